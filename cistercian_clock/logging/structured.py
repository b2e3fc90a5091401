"""
Structured JSON Logger
======================

Bounded Context: Observability Infrastructure

Structured logger that writes one JSON object per line.

Design:
- JSON output (compatible with log aggregators)
- Thread-safe (uses standard logging module)
- Contextual metadata (value, tick, path, etc.)
- Type-safe events (LogEvent enum)

Example:
    >>> logger = StructuredLogger(component="clock")
    >>> logger.info(
    ...     event=LogEvent.CLOCK_TICK,
    ...     message="Rendered 12:34 56",
    ...     metadata={'hours_minutes': 1234, 'seconds': 56}
    ... )

Output:
    {"timestamp": "2026-10-17T15:30:45.123456+00:00", "level": "INFO",
     "component": "clock", "event": "clock.tick", "message": "Rendered 12:34 56",
     "metadata": {"hours_minutes": 1234, "seconds": 56}}
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .events import LogEvent


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "clock", "cli")
        logger: Underlying Python logger instance

    Thread Safety:
        Thread-safe via Python's logging module.
    """

    def __init__(
        self,
        component: str,
        level: int = logging.INFO,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "clock")
            level: Logging level (default: INFO)
            logger_name: Custom logger name (default: cistercian_clock.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"cistercian_clock.{component}"
        self.logger = logging.getLogger(self.logger_name)
        self.logger.setLevel(level)
        # JSON lines go to our own handler only, never to root handlers
        self.logger.propagate = False

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def build_entry(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """Build the dict that is serialized for one log line."""
        entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            entry['metadata'] = metadata

        if exc_info:
            entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        return entry

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        entry = self.build_entry(level, event, message, metadata, exc_info)
        self.logger.log(
            getattr(logging, level),
            json.dumps(entry, default=str),
            exc_info=exc_info if level == 'ERROR' else None
        )

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.FRAME_WRITTEN,
            ...     message="Saved frame",
            ...     metadata={'path': 'runs/clock/frame_00001.png'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> None:
        """
        Log ERROR level message.

        Example:
            >>> try:
            ...     render(surface, (0, 0), value=10_000)
            ... except OutOfRangeError as e:
            ...     logger.error(
            ...         event=LogEvent.GLYPH_REJECTED,
            ...         message="Value out of range",
            ...         exc_info=e,
            ...     )
        """
        self._log('ERROR', event, message, metadata, exc_info)


class JSONFormatter(logging.Formatter):
    """
    Formatter that passes through the JSON built by StructuredLogger.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: int = logging.INFO
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Example:
        >>> logger = create_logger("clock", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)

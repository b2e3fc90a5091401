"""
Structured Logging for Cistercian Clock
=======================================

Bounded Context: Observability

JSON-structured logging for the clock application and CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from cistercian_clock.logging import create_logger, LogEvent
    >>> logger = create_logger("clock")
    >>> logger.info(
    ...     event=LogEvent.CLOCK_STARTED,
    ...     message="Clock started",
    ...     metadata={'tick_interval_s': 1.0}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]

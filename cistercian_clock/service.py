"""
Clock Service - ticks a time source and renders Cistercian clock frames.

Architecture:
- One loop: read time -> draw face -> write snapshot / show window
- Cadence from config (tick_interval_s), bounded by max_ticks if set
- stop() is thread-safe (threading.Event), so another thread or a
  signal handler can end the loop

Outputs:
- sv.ImageSink snapshots when output_dir is set
- cv2.imshow window when display is set ('q' quits)
"""

import threading
from contextlib import ExitStack
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
import supervision as sv

from cistercian_glyph import GlyphValidationError
from cistercian_clock.config import ClockConfig
from cistercian_clock.face import ClockFace
from cistercian_clock.logging import LogEvent, StructuredLogger, create_logger
from cistercian_clock.time_source import SystemTimeSource

WINDOW_NAME = "Cistercian Clock"
FRAME_NAME_PATTERN = "clock_{:05d}.png"


def next_frame_index(output_dir: Optional[Path]) -> int:
    """First snapshot index not yet used in output_dir."""
    if output_dir is None or not Path(output_dir).is_dir():
        return 0
    indices = []
    for path in Path(output_dir).glob("clock_*.png"):
        suffix = path.stem[len("clock_"):]
        if suffix.isdigit():
            indices.append(int(suffix))
    return max(indices) + 1 if indices else 0


class ClockService:
    """
    Main clock loop.

    Usage:
        config = ClockConfig.from_yaml("clock.yaml")
        service = ClockService(config)
        service.run()  # Blocks until stopped or max_ticks reached

    Thread Safety:
    - stop() may be called from any thread
    - run() must not be called concurrently on the same instance
    """

    def __init__(
        self,
        config: ClockConfig,
        time_source: Optional[SystemTimeSource] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        """
        Args:
            config: Clock configuration
            time_source: Source of readings (default: local system time)
            logger: Structured logger (default: component "clock")
        """
        self.config = config
        self.time_source = time_source or SystemTimeSource()
        self.logger = logger or create_logger("clock")
        self.face = ClockFace(
            theme=config.resolve_theme(),
            scale=config.clock_scale,
            frame_resolution_wh=config.frame_resolution_wh,
        )

        self.last_frame: Optional[np.ndarray] = None
        self.tick_count = 0
        self._stop_event = threading.Event()

    def stop(self) -> None:
        """
        Ask the loop to end after the current tick.

        Final: a stop that arrives before run() makes run() return at once.
        """
        self._stop_event.set()

    @property
    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    def tick(self) -> np.ndarray:
        """Render one reading into a frame."""
        reading = self.time_source.read()
        try:
            frame = self.face.draw(reading)
        except GlyphValidationError as e:
            self.logger.error(
                event=LogEvent.RENDER_ERROR,
                message="Failed to render clock frame",
                metadata={'time': reading.text},
                exc_info=e,
            )
            raise

        self.tick_count += 1
        self.last_frame = frame
        self.logger.debug(
            event=LogEvent.CLOCK_TICK,
            message=f"Rendered {reading.text}",
            metadata={
                'tick': self.tick_count,
                'hours_minutes': reading.hours_minutes,
                'seconds': reading.seconds,
            },
        )
        return frame

    def run(self) -> int:
        """
        Tick until stopped, 'q' is pressed or max_ticks is reached.

        Returns:
            Number of frames rendered by this call
        """
        start_count = self.tick_count

        self.logger.info(
            event=LogEvent.CLOCK_STARTED,
            message="Clock started",
            metadata={
                'theme': self.config.theme,
                'tick_interval_s': self.config.tick_interval_s,
                'max_ticks': self.config.max_ticks,
            },
        )

        with ExitStack() as stack:
            image_sink = None
            if self.config.output_dir is not None:
                image_sink = stack.enter_context(sv.ImageSink(
                    target_dir_path=str(self.config.output_dir),
                    overwrite=False,
                    image_name_pattern=FRAME_NAME_PATTERN,
                ))
            frame_index = next_frame_index(self.config.output_dir)
            if self.config.display:
                stack.callback(cv2.destroyAllWindows)

            while not self._stop_event.is_set():
                frame = self.tick()

                if image_sink is not None:
                    image_sink.save_image(
                        image=frame,
                        image_name=FRAME_NAME_PATTERN.format(frame_index),
                    )
                    frame_index += 1
                    self.logger.debug(
                        event=LogEvent.FRAME_WRITTEN,
                        message="Saved clock frame",
                        metadata={'dir': str(self.config.output_dir), 'tick': self.tick_count},
                    )

                if self.config.display:
                    cv2.imshow(WINDOW_NAME, frame)
                    if cv2.waitKey(1) & 0xFF == ord('q'):
                        break

                rendered = self.tick_count - start_count
                if self.config.max_ticks is not None and rendered >= self.config.max_ticks:
                    break

                self._stop_event.wait(self.config.tick_interval_s)

        rendered = self.tick_count - start_count
        self.logger.info(
            event=LogEvent.CLOCK_STOPPED,
            message="Clock stopped",
            metadata={'ticks': rendered},
        )
        return rendered

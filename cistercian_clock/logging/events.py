"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the clock application's structured logs.

Event Naming Convention:
    <component>.<action>

    component: clock, glyph, frame, config, error

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.value
    | filter event = "glyph.rejected"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - clock.*: Clock service lifecycle
    - glyph.*: Glyph rendering
    - frame.*: Frame output
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Clock Events ==========
    CLOCK_STARTED = "clock.started"
    """Clock service started ticking."""

    CLOCK_TICK = "clock.tick"
    """One time reading rendered."""

    CLOCK_STOPPED = "clock.stopped"
    """Clock service stopped."""

    # ========== Glyph Events ==========
    GLYPH_RENDERED = "glyph.rendered"
    """A numeral was drawn."""

    GLYPH_REJECTED = "glyph.rejected"
    """A numeral value or scale failed validation."""

    # ========== Frame Events ==========
    FRAME_WRITTEN = "frame.written"
    """A rendered frame was saved to disk."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration loaded and validated."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration could not be loaded."""

    RENDER_ERROR = "error.render"
    """Rendering a frame failed."""

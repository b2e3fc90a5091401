"""
Configuration schema for the clock service.

This module defines the configuration structure of the clock: theme and
palette overrides, glyph scale, frame size, tick cadence and outputs.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml

from cistercian_glyph.geometry.shapes import validate_scale
from cistercian_glyph.errors import InvalidScaleError
from cistercian_clock.themes import THEMES, Theme, get_theme


@dataclass(frozen=True)
class ClockConfig:
    """
    Main configuration for ClockService.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    # Appearance
    theme: str = "dark"
    clock_scale: float = 4.0
    palette_overrides: Dict[str, str] = field(default_factory=dict)

    # Frame
    frame_resolution_wh: Tuple[int, int] = (480, 320)  # (width, height)

    # Cadence
    tick_interval_s: float = 1.0
    max_ticks: Optional[int] = None

    # Outputs
    output_dir: Optional[Path] = None
    display: bool = False

    def __post_init__(self):
        """Validate clock configuration."""
        if self.theme not in THEMES:
            raise ValueError(
                f"Invalid theme: {self.theme}. Must be one of {set(THEMES)}"
            )

        try:
            validate_scale(self.clock_scale)
        except InvalidScaleError as e:
            raise ValueError(f"clock_scale: {e}") from e

        width, height = self.frame_resolution_wh
        if width <= 0 or height <= 0:
            raise ValueError(
                f"frame_resolution_wh must have positive dimensions, got {self.frame_resolution_wh}"
            )
        if width > 4096 or height > 4096:
            raise ValueError(
                f"frame_resolution_wh dimensions too large (max 4096x4096), got {self.frame_resolution_wh}"
            )

        if not math.isfinite(self.tick_interval_s) or self.tick_interval_s <= 0:
            raise ValueError(
                f"tick_interval_s must be > 0, got {self.tick_interval_s}"
            )

        if self.max_ticks is not None and self.max_ticks < 1:
            raise ValueError(
                f"max_ticks must be >= 1, got {self.max_ticks}"
            )

        # Fail fast on unknown categories or malformed colors
        self.resolve_theme()

    def resolve_theme(self) -> Theme:
        """Theme with palette overrides applied."""
        return get_theme(self.theme).with_palette_overrides(self.palette_overrides)

    @classmethod
    def from_dict(cls, data: dict) -> "ClockConfig":
        """Build a config from parsed YAML (missing keys keep defaults)."""
        data = data or {}

        kwargs = {}
        for key in ("theme", "clock_scale", "tick_interval_s", "max_ticks", "display"):
            if key in data:
                kwargs[key] = data[key]

        if "palette_overrides" in data:
            kwargs["palette_overrides"] = dict(data["palette_overrides"] or {})

        if "frame_resolution_wh" in data:
            kwargs["frame_resolution_wh"] = tuple(data["frame_resolution_wh"])

        if data.get("output_dir"):
            kwargs["output_dir"] = Path(data["output_dir"])

        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ClockConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            theme: "dark"
            clock_scale: 4.0
            frame_resolution_wh: [480, 320]  # [width, height]
            tick_interval_s: 1.0
            max_ticks: null
            output_dir: "./runs/clock"
            display: false
            palette_overrides:
              cat1: "#3a86ff"
              cat6: "#ffbe0b"
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Clock config must be a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

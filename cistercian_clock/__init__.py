"""
cistercian_clock - Cistercian numeral clock

Bounded Context: Showing the current time as two Cistercian numerals
Responsibilities:
  - Time source (hour, minute, second once per tick)
  - Clock face layout (hour*100 + minute glyph, second glyph, time text)
  - Tick loop with snapshot / window output
  - YAML configuration and structured JSON logging

Architecture:
  - ClockConfig: Frozen, validated configuration (YAML)
  - ClockFace: Frame layout on top of cistercian_glyph
  - ClockService: Tick loop
  - ReferenceChart: Labelled chart of 0-99, hundreds and thousands
"""

from .chart import ReferenceChart, chart_rows
from .config import ClockConfig
from .face import ClockFace
from .service import ClockService
from .themes import DARK_THEME, LIGHT_THEME, Theme, get_theme
from .time_source import SystemTimeSource, TimeReading

__all__ = [
    "ClockConfig",
    "ClockFace",
    "ClockService",
    "ReferenceChart",
    "chart_rows",
    "DARK_THEME",
    "LIGHT_THEME",
    "Theme",
    "get_theme",
    "SystemTimeSource",
    "TimeReading",
]

__version__ = "1.0.0"

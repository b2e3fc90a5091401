"""
Clock Face
==========

Lays out one clock frame: heading, two glyphs side by side
(hour*100 + minute, then second) and the time as text.

Design:
- Layout only; glyph geometry comes from cistercian_glyph
- A new frame per reading, nothing retained between ticks

Dependencies:
- numpy (frames)
- supervision (Color, via FrameSurface)
"""

import numpy as np
from typing import Tuple

from cistercian_glyph import FrameSurface, GlyphRenderer
from cistercian_glyph.geometry.shapes import Point
from cistercian_clock.themes import DARK_THEME, Theme
from cistercian_clock.time_source import TimeReading

HEADING = "Cistercian Time"
HEADER_HEIGHT = 48
FOOTER_HEIGHT = 48
MARGIN = 16


class ClockFace:
    """
    Renders time readings into frames.

    Usage:
        face = ClockFace(theme=DARK_THEME, scale=4.0, frame_resolution_wh=(480, 320))
        frame = face.draw(TimeReading(12, 34, 56))
    """

    def __init__(
        self,
        theme: Theme = DARK_THEME,
        scale: float = 4.0,
        frame_resolution_wh: Tuple[int, int] = (480, 320),
        text_scale: float = 0.8,
        text_thickness: int = 2,
    ):
        """
        Args:
            theme: Colors of the face
            scale: Glyph scale factor
            frame_resolution_wh: (width, height) of produced frames
            text_scale: Scale factor for heading and time text
            text_thickness: Thickness for heading and time text

        Raises:
            InvalidScaleError: If scale is invalid
            ValueError: If the frame cannot hold both glyphs
        """
        self.theme = theme
        self.renderer = GlyphRenderer(palette=theme.palette, scale=scale)
        self.frame_resolution_wh = frame_resolution_wh
        self.text_scale = text_scale
        self.text_thickness = text_thickness

        required = self.required_resolution_wh(scale)
        width, height = frame_resolution_wh
        if width < required[0] or height < required[1]:
            raise ValueError(
                f"frame_resolution_wh {frame_resolution_wh} too small for scale {scale}, "
                f"need at least {required}"
            )

    @staticmethod
    def required_resolution_wh(scale: float) -> Tuple[int, int]:
        """Smallest frame that fits both glyphs with heading and footer."""
        cell = GlyphRenderer(scale=scale).cell_size
        width = 2 * cell + cell / 4 + 2 * MARGIN
        height = HEADER_HEIGHT + cell + FOOTER_HEIGHT
        return int(np.ceil(width)), int(np.ceil(height))

    def glyph_centers(self) -> Tuple[Point, Point]:
        """Centers of the hours-minutes glyph and the seconds glyph."""
        width, _ = self.frame_resolution_wh
        cell = self.renderer.cell_size
        gap = cell / 4
        left = (width - (2 * cell + gap)) / 2
        y = HEADER_HEIGHT + cell / 2
        return (left + cell / 2, y), (left + 1.5 * cell + gap, y)

    def draw(self, reading: TimeReading) -> np.ndarray:
        """
        Render one reading.

        Returns:
            BGR frame of frame_resolution_wh
        """
        width, height = self.frame_resolution_wh
        surface = FrameSurface.blank(
            width,
            height,
            self.theme.background,
            text_scale=self.text_scale,
            text_thickness=self.text_thickness,
        )

        surface.draw_text(HEADING, (width / 2, HEADER_HEIGHT / 2), self.theme.text_color)

        hm_center, s_center = self.glyph_centers()
        self.renderer.draw(surface, hm_center, reading.hours_minutes)
        self.renderer.draw(surface, s_center, reading.seconds)

        text_y = HEADER_HEIGHT + self.renderer.cell_size + FOOTER_HEIGHT / 2
        surface.draw_text(reading.text, (width / 2, text_y), self.theme.text_color)

        return surface.frame

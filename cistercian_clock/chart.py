"""
Reference Chart
===============

Lays out the "Cistercian Numbers" chart: every numeral from 0 to 99,
then the hundreds 100-400 and the thousands 1000-4000, each glyph with
its base-10 label underneath.

Design:
- Layout only, same as ClockFace; glyphs come from GlyphRenderer
- Works on any DrawSurface (labels need a TextSurface)
"""

import numpy as np
from typing import Iterator, List, Tuple

from cistercian_glyph import FrameSurface, GlyphRenderer
from cistercian_glyph.geometry.shapes import Point
from cistercian_glyph.rendering.composer import LABEL_GAP
from cistercian_glyph.rendering.surface import DrawSurface, TextSurface
from cistercian_clock.themes import DARK_THEME, Theme

HEADING = "Cistercian Numbers"
HEADER_HEIGHT = 48
MARGIN = 16
# Unscaled height reserved under each glyph for its label
LABEL_ROW = LABEL_GAP + 16.0


def chart_rows() -> List[List[int]]:
    """Numerals of the chart, one list per row."""
    rows = [list(range(tens * 10, tens * 10 + 10)) for tens in range(10)]
    rows.append([number * 100 for number in range(1, 5)])
    rows.append([number * 1_000 for number in range(1, 5)])
    return rows


class ReferenceChart:
    """
    Renders the labelled chart of Cistercian numerals.

    Usage:
        chart = ReferenceChart(theme=LIGHT_THEME, scale=2.0)
        frame = chart.draw()
    """

    def __init__(
        self,
        theme: Theme = DARK_THEME,
        scale: float = 2.0,
        text_scale: float = 0.5,
        text_thickness: int = 1,
    ):
        """
        Args:
            theme: Colors of the chart
            scale: Glyph scale factor
            text_scale: Scale factor for heading and labels
            text_thickness: Thickness for heading and labels

        Raises:
            InvalidScaleError: If scale is invalid
        """
        self.theme = theme
        self.renderer = GlyphRenderer(palette=theme.palette, scale=scale, show_label=True)
        self.rows = chart_rows()
        self.text_scale = text_scale
        self.text_thickness = text_thickness

    @property
    def row_height(self) -> float:
        return self.renderer.cell_size + self.renderer.scale * LABEL_ROW

    @property
    def column_pitch(self) -> float:
        return self.renderer.cell_size * 1.25

    def required_resolution_wh(self) -> Tuple[int, int]:
        """Frame size that fits the widest row and every label."""
        columns = max(len(row) for row in self.rows)
        width = (columns - 1) * self.column_pitch + self.renderer.cell_size + 2 * MARGIN
        height = HEADER_HEIGHT + len(self.rows) * self.row_height + MARGIN
        return int(np.ceil(width)), int(np.ceil(height))

    def glyph_centers(self) -> Iterator[Tuple[int, Point]]:
        """Yield (value, center) for every glyph, row by row."""
        cell = self.renderer.cell_size
        for row_index, row in enumerate(self.rows):
            y = HEADER_HEIGHT + row_index * self.row_height + cell / 2
            for column, value in enumerate(row):
                x = MARGIN + column * self.column_pitch + cell / 2
                yield value, (x, y)

    def draw_on(self, surface: DrawSurface) -> int:
        """
        Draw heading and glyphs on surface.

        Returns:
            Number of glyphs drawn
        """
        width, _ = self.required_resolution_wh()
        if isinstance(surface, TextSurface):
            surface.draw_text(HEADING, (width / 2, HEADER_HEIGHT / 2), self.theme.text_color)

        count = 0
        for value, center in self.glyph_centers():
            self.renderer.draw(surface, center, value)
            count += 1
        return count

    def draw(self) -> np.ndarray:
        """
        Render the chart on a new frame.

        Returns:
            BGR frame of required_resolution_wh()
        """
        width, height = self.required_resolution_wh()
        surface = FrameSurface.blank(
            width,
            height,
            self.theme.background,
            text_scale=self.text_scale,
            text_thickness=self.text_thickness,
        )
        self.draw_on(surface)
        return surface.frame

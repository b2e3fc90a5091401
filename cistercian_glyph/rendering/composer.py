"""
Glyph Composer Module
=====================

Combines the stem and up to four quadrants into one draw batch.

Design:
- Validate first: a rejected value or scale issues no draw call
- compose() is pure geometry, render() adds colors and drawing
- Palette and scale are explicit parameters, never ambient state

Dependencies:
- supervision (Color, via palette)
"""

import logging
from typing import List, Optional

from cistercian_glyph.geometry.digits import decompose, validate_value
from cistercian_glyph.geometry.shapes import (
    CELL_SIZE,
    Point,
    Quadrant,
    QuadrantBox,
    Segment,
    StemGeometry,
    validate_scale,
)
from cistercian_glyph.geometry.strokes import digit_segments
from cistercian_glyph.rendering.palette import DARK_PALETTE, Palette, stroke_width_for
from cistercian_glyph.rendering.surface import (
    DrawSurface,
    StyledSegment,
    TextSurface,
    emit_segments,
)

logger = logging.getLogger(__name__)

# Gap between the glyph cell and its label, in unscaled units
LABEL_GAP = 6.0


def compose(value: int, center: Point, scale: float = 1.0) -> List[Segment]:
    """
    Segments of one glyph: the stem, then units, tens, hundreds, thousands.

    Args:
        value: Integer in [0, 9999]
        center: (x, y) glyph center
        scale: Finite scale factor > 0

    Returns:
        1 to 13 segments

    Raises:
        OutOfRangeError: If value is outside [0, 9999]
        InvalidScaleError: If scale is not finite and positive
    """
    digits = decompose(value)
    stem = StemGeometry(center=center, scale=scale)

    segments = [stem.segment()]
    for quadrant, digit in zip(Quadrant, digits.as_tuple()):
        # positions above the magnitude are zero and draw nothing
        if quadrant.index >= digits.magnitude:
            break
        box = QuadrantBox.from_stem(stem, quadrant)
        segments.extend(digit_segments(box, digit))

    return segments


def style(segments: List[Segment], scale: float, palette: Palette) -> List[StyledSegment]:
    """Attach the call-wide stroke width and per-category colors."""
    width = stroke_width_for(scale)
    return [
        StyledSegment(segment=segment, stroke_width=width, color=palette.color_for(segment.category))
        for segment in segments
    ]


def format_label(value: int) -> str:
    """
    Base-10 label for a numeral.

    Example:
        >>> format_label(999), format_label(1234), format_label(9005)
        ('999', '1,234', '9,005')
    """
    value = validate_value(value)
    if value <= 999:
        return str(value)
    return f"{value // 1000},{value % 1000:03d}"


def label_anchor(center: Point, scale: float) -> Point:
    """Label position, centered under the glyph cell."""
    return (center[0], center[1] + scale * (CELL_SIZE / 2.0 + LABEL_GAP))


def render(
    surface: DrawSurface,
    center: Point,
    scale: float = 1.0,
    palette: Palette = DARK_PALETTE,
    value: int = 0,
    show_label: bool = False,
) -> List[StyledSegment]:
    """
    Draw one Cistercian numeral on a surface.

    Args:
        surface: Receives one draw_line call per segment
        center: (x, y) glyph center
        scale: Finite scale factor > 0 (stroke width 2.0 below scale 2)
        palette: Stroke colors
        value: Integer in [0, 9999]
        show_label: Also draw the base-10 label (surfaces with draw_text only)

    Returns:
        The styled segment batch that was drawn

    Raises:
        OutOfRangeError: Before any draw call, if value is outside [0, 9999]
        InvalidScaleError: Before any draw call, if scale is invalid
    """
    try:
        validate_value(value)
        scale = validate_scale(scale)
    except ValueError:
        logger.debug("Rejected glyph value=%r scale=%r", value, scale)
        raise

    batch = style(compose(value, center, scale), scale, palette)
    emit_segments(surface, batch)

    if show_label:
        if isinstance(surface, TextSurface):
            surface.draw_text(format_label(value), label_anchor(center, scale), palette.colour_0)
        else:
            logger.debug("Surface %s cannot draw text, label skipped", type(surface).__name__)

    logger.debug("Rendered value=%d with %d segments", value, len(batch))
    return batch


class GlyphRenderer:
    """
    Renderer bound to a palette and scale.

    Usage:
        renderer = GlyphRenderer(palette=LIGHT_PALETTE, scale=4.0)
        renderer.draw(surface, center=(80, 80), value=1234)
    """

    def __init__(
        self,
        palette: Palette = DARK_PALETTE,
        scale: float = 1.0,
        show_label: bool = False,
    ):
        """
        Args:
            palette: Stroke colors
            scale: Finite scale factor > 0
            show_label: Draw base-10 labels under glyphs

        Raises:
            InvalidScaleError: If scale is invalid
        """
        self.palette = palette
        self.scale = validate_scale(scale)
        self.show_label = show_label

    @property
    def cell_size(self) -> float:
        """Side of the square cell one glyph occupies."""
        return self.scale * CELL_SIZE

    def draw(
        self,
        surface: DrawSurface,
        center: Point,
        value: int,
        show_label: Optional[bool] = None,
    ) -> List[StyledSegment]:
        """Render value at center with the bound palette and scale."""
        return render(
            surface,
            center,
            scale=self.scale,
            palette=self.palette,
            value=value,
            show_label=self.show_label if show_label is None else show_label,
        )

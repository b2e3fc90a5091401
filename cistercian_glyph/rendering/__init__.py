"""
Rendering Layer
===============

Bounded Context: Glyph coloring and drawing.

Responsibilities:
- Resolve stroke width and color per segment
- Compose the draw batch of a numeral
- Issue draw calls to a surface

Non-responsibilities:
- Segment geometry (handled by geometry)
- Laying out several glyphs (handled by the caller)

Design:
- Stateless drawing functions
- Uses supervision.draw.utils for raster surfaces
- Palettes are explicit parameters
"""

from cistercian_glyph.rendering.composer import (
    GlyphRenderer,
    compose,
    format_label,
    render,
    style,
)
from cistercian_glyph.rendering.palette import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    Palette,
    stroke_width_for,
)
from cistercian_glyph.rendering.surface import (
    DrawCall,
    DrawSurface,
    FrameSurface,
    RecordingSurface,
    StyledSegment,
    TextCall,
    TextSurface,
    emit_segments,
)

__all__ = [
    "GlyphRenderer",
    "compose",
    "format_label",
    "render",
    "style",
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "Palette",
    "stroke_width_for",
    "DrawCall",
    "DrawSurface",
    "FrameSurface",
    "RecordingSurface",
    "StyledSegment",
    "TextCall",
    "TextSurface",
    "emit_segments",
]

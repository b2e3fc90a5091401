"""
Cistercian Glyph Engine v1.0
============================

Bounded Context: Drawing integers 0..9999 as Cistercian numerals.

A Cistercian numeral is one vertical stem with up to four clusters of
strokes, one per decimal position: units (top right), tens (top left),
hundreds (bottom right) and thousands (bottom left).

Design Philosophy:
- Separation of Concerns: Geometry and Rendering separated
- One stroke table, four reflections (no per-quadrant code)
- Pure functions of (value, center, scale, palette, surface)
- Pragmatismo > Purismo: supervision draws, we only compute segments

Architecture:

    cistercian_glyph/
    ├── errors.py          # GlyphValidationError hierarchy
    ├── geometry/          # Pure geometry (immutable, stateless)
    │   ├── digits.py      # decompose(), DigitPositions
    │   ├── shapes.py      # StemGeometry, Quadrant, QuadrantBox, Segment
    │   └── strokes.py     # DIGIT_STROKES table, digit_segments()
    │
    └── rendering/         # Colors and drawing (stateless)
        ├── palette.py     # Palette, DARK_PALETTE, LIGHT_PALETTE
        ├── surface.py     # DrawSurface, FrameSurface, RecordingSurface
        └── composer.py    # compose(), render(), GlyphRenderer

Usage:

    # 1. Pure geometry
    from cistercian_glyph import compose

    segments = compose(1234, center=(68, 68), scale=4.0)

    # 2. Draw on a frame
    import numpy as np
    from cistercian_glyph import FrameSurface, render, DARK_PALETTE

    surface = FrameSurface(np.zeros((136, 136, 3), dtype=np.uint8))
    render(surface, center=(68, 68), scale=4.0, palette=DARK_PALETTE, value=1234)

    # 3. Or bind palette and scale once
    from cistercian_glyph import GlyphRenderer

    renderer = GlyphRenderer(palette=DARK_PALETTE, scale=4.0)
    renderer.draw(surface, center=(68, 68), value=42)
"""

from cistercian_glyph.errors import GlyphValidationError, InvalidScaleError, OutOfRangeError

# Geometry Layer (immutable, stateless)
from cistercian_glyph.geometry import (
    Category,
    DigitPositions,
    Quadrant,
    QuadrantBox,
    Segment,
    StemGeometry,
    decompose,
    digit_segments,
)

# Rendering Layer (stateless)
from cistercian_glyph.rendering import (
    DARK_PALETTE,
    LIGHT_PALETTE,
    FrameSurface,
    GlyphRenderer,
    Palette,
    RecordingSurface,
    compose,
    format_label,
    render,
)

__all__ = [
    # Errors
    "GlyphValidationError",
    "InvalidScaleError",
    "OutOfRangeError",
    # Geometry
    "Category",
    "DigitPositions",
    "Quadrant",
    "QuadrantBox",
    "Segment",
    "StemGeometry",
    "decompose",
    "digit_segments",
    # Rendering
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "FrameSurface",
    "GlyphRenderer",
    "Palette",
    "RecordingSurface",
    "compose",
    "format_label",
    "render",
]

__version__ = "1.0.0"

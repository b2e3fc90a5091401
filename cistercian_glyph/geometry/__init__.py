"""
Geometry Layer
==============

Bounded Context: Pure glyph geometry.

Responsibilities:
- Digit decomposition of a numeral
- Stem and quadrant box placement
- Digit stroke table
- NO colors, NO drawing

Design Philosophy:
- Pure functions where possible
- Immutable data structures
- Fail-fast validation
- Zero side effects
"""

from cistercian_glyph.geometry.digits import DigitPositions, decompose, validate_value
from cistercian_glyph.geometry.shapes import (
    Anchor,
    Category,
    Point,
    Quadrant,
    QuadrantBox,
    Segment,
    StemGeometry,
    validate_scale,
)
from cistercian_glyph.geometry.strokes import DIGIT_STROKES, digit_segments

__all__ = [
    "DigitPositions",
    "decompose",
    "validate_value",
    "Anchor",
    "Category",
    "Point",
    "Quadrant",
    "QuadrantBox",
    "Segment",
    "StemGeometry",
    "validate_scale",
    "DIGIT_STROKES",
    "digit_segments",
]

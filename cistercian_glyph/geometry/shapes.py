"""
Glyph Shapes Module
===================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Points are (x, y) float tuples in screen coordinates (+y points down)
- One parameterized transform (anchor, sign) for all four quadrants
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Tuple

from cistercian_glyph.errors import InvalidScaleError

Point = Tuple[float, float]

# Glyph cell is 34 units tall; the stem stops one unit short of each edge.
CELL_SIZE = 34.0
STEM_HALF_HEIGHT = CELL_SIZE / 2.0 - 1.0
BOX_SIZE = 10.0


class Category(str, Enum):
    """Stroke category, used to pick a palette color."""

    STEM = "stem"
    CAT1 = "cat1"
    CAT2 = "cat2"
    CAT3 = "cat3"
    CAT4 = "cat4"
    CAT6 = "cat6"


class Anchor(Enum):
    """Stem end a quadrant box hangs from. Value is the inward y direction."""

    TOP = 1
    BOTTOM = -1

    @property
    def inward(self) -> int:
        return self.value


class Quadrant(Enum):
    """
    Digit position of a numeral.

    Each value is (position index, anchor, horizontal sign).
    """

    UNITS = (0, Anchor.TOP, 1)
    TENS = (1, Anchor.TOP, -1)
    HUNDREDS = (2, Anchor.BOTTOM, 1)
    THOUSANDS = (3, Anchor.BOTTOM, -1)

    @property
    def index(self) -> int:
        return self.value[0]

    @property
    def anchor(self) -> Anchor:
        return self.value[1]

    @property
    def sign(self) -> int:
        return self.value[2]


def validate_scale(scale) -> float:
    """
    Check that scale is a finite real number > 0.

    Raises:
        InvalidScaleError: For bools, non-numbers, NaN, infinities and scale <= 0
    """
    if isinstance(scale, bool) or not isinstance(scale, Real):
        raise InvalidScaleError(scale)
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidScaleError(scale)
    return float(scale)


@dataclass(frozen=True)
class Segment:
    """
    Immutable line segment with a stroke category.

    Attributes:
        start: (x, y) segment start
        end: (x, y) segment end
        category: Category used to resolve the stroke color
    """

    start: Point
    end: Point
    category: Category

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "start": list(self.start),
            "end": list(self.end),
            "category": self.category.value,
        }


@dataclass(frozen=True)
class StemGeometry:
    """
    Vertical stem shared by every glyph.

    Attributes:
        center: (x, y) glyph center
        scale: Positive scale factor

    Invariants:
        - scale is finite and > 0
    """

    center: Point
    scale: float = 1.0

    def __post_init__(self):
        """Validate scale and normalize center to floats."""
        object.__setattr__(self, "scale", validate_scale(self.scale))
        object.__setattr__(self, "center", (float(self.center[0]), float(self.center[1])))

    @property
    def half_height(self) -> float:
        return self.scale * STEM_HALF_HEIGHT

    @property
    def box_size(self) -> float:
        return self.scale * BOX_SIZE

    @property
    def top(self) -> Point:
        return (self.center[0], self.center[1] - self.half_height)

    @property
    def bottom(self) -> Point:
        return (self.center[0], self.center[1] + self.half_height)

    def anchor_point(self, anchor: Anchor) -> Point:
        return self.top if anchor is Anchor.TOP else self.bottom

    def segment(self) -> Segment:
        """The stem itself, drawn for every value."""
        return Segment(self.top, self.bottom, Category.STEM)


@dataclass(frozen=True)
class QuadrantBox:
    """
    Square of side 10*scale hanging off one end of the stem.

    Attributes:
        near: Stem point at the anchor
        far: Anchor shifted horizontally away from the stem
        near_inset: Stem point 10*scale toward the stem midpoint
        far_inset: far shifted by the same inset
    """

    near: Point
    far: Point
    near_inset: Point
    far_inset: Point

    @classmethod
    def from_stem(cls, stem: StemGeometry, quadrant: Quadrant) -> "QuadrantBox":
        """
        Place the box for a quadrant.

        near = anchor, far = anchor + (sign*10s, 0),
        near_inset = anchor + (0, inward*10s), far_inset = far + (0, inward*10s)
        """
        ax, ay = stem.anchor_point(quadrant.anchor)
        dx = quadrant.sign * stem.box_size
        dy = quadrant.anchor.inward * stem.box_size
        return cls(
            near=(ax, ay),
            far=(ax + dx, ay),
            near_inset=(ax, ay + dy),
            far_inset=(ax + dx, ay + dy),
        )

    def corner(self, name: str) -> Point:
        return getattr(self, name)

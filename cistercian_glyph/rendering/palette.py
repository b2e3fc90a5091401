"""
Palette Module
==============

Stroke/color resolution for glyph segments.

Design:
- Immutable palette (frozen dataclass)
- Pure lookup category -> color
- Stroke width uniform per render call

Dependencies:
- supervision (Color)
"""

from dataclasses import dataclass, replace
from typing import Dict, Mapping

import supervision as sv

from cistercian_glyph.geometry.shapes import Category

MIN_STROKE_WIDTH = 2.0


@dataclass(frozen=True)
class Palette:
    """
    Six stroke colors, one per category.

    There is no colour_5: digit 5 is drawn with categories 1 and 4.

    Attributes:
        colour_0: Stem
        colour_1: Top edge (cat1)
        colour_2: Inset edge (cat2)
        colour_3: Near to far-inset diagonal (cat3)
        colour_4: Inset to far diagonal (cat4)
        colour_6: Outer edge (cat6)
    """

    colour_0: sv.Color
    colour_1: sv.Color
    colour_2: sv.Color
    colour_3: sv.Color
    colour_4: sv.Color
    colour_6: sv.Color

    def color_for(self, category: Category) -> sv.Color:
        """Resolve the color of a stroke category."""
        return getattr(self, _FIELD_BY_CATEGORY[Category(category)])

    def as_dict(self) -> Dict[str, sv.Color]:
        """Colors keyed by category name."""
        return {category.value: self.color_for(category) for category in Category}

    def with_overrides(self, overrides: Mapping[str, str]) -> "Palette":
        """
        Copy of this palette with some categories recolored.

        Args:
            overrides: {category name: hex color}, e.g. {"cat1": "#3a86ff"}

        Raises:
            ValueError: On unknown category or malformed hex color
        """
        changes = {}
        for name, hex_color in overrides.items():
            try:
                field_name = _FIELD_BY_CATEGORY[Category(name)]
            except ValueError:
                raise ValueError(
                    f"Unknown palette category: {name!r}. "
                    f"Must be one of {[c.value for c in Category]}"
                ) from None
            changes[field_name] = sv.Color.from_hex(hex_color)
        return replace(self, **changes)


_FIELD_BY_CATEGORY = {
    Category.STEM: "colour_0",
    Category.CAT1: "colour_1",
    Category.CAT2: "colour_2",
    Category.CAT3: "colour_3",
    Category.CAT4: "colour_4",
    Category.CAT6: "colour_6",
}


def stroke_width_for(scale: float) -> float:
    """Stroke width for a render call: 2.0 below scale 2, otherwise the scale."""
    if scale < 2.0:
        return MIN_STROKE_WIDTH
    return scale * 1.0


DARK_PALETTE = Palette(
    colour_0=sv.Color(r=242, g=242, b=242),
    colour_1=sv.Color(r=58, g=134, b=255),
    colour_2=sv.Color(r=251, g=86, b=7),
    colour_3=sv.Color(r=162, g=106, b=241),
    colour_4=sv.Color(r=255, g=0, b=110),
    colour_6=sv.Color(r=255, g=190, b=11),
)

LIGHT_PALETTE = Palette(
    colour_0=sv.Color(r=4, g=3, b=15),
    colour_1=sv.Color(r=93, g=93, b=91),
    colour_2=sv.Color(r=0, g=122, b=94),
    colour_3=sv.Color(r=27, g=42, b=65),
    colour_4=sv.Color(r=150, g=2, b=0),
    colour_6=sv.Color(r=0, g=122, b=163),
)

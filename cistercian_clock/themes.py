"""
Clock Themes
============

Background, text color and glyph palette for the clock face.
"""

from dataclasses import dataclass, replace
from typing import Dict, Mapping

import supervision as sv

from cistercian_glyph import DARK_PALETTE, LIGHT_PALETTE, Palette


@dataclass(frozen=True)
class Theme:
    """
    Colors of one clock face.

    Attributes:
        name: Theme identifier ("dark" or "light")
        palette: Glyph stroke colors
        background: Frame fill color
        text_color: Heading and time text color
    """

    name: str
    palette: Palette
    background: sv.Color
    text_color: sv.Color

    def with_palette_overrides(self, overrides: Mapping[str, str]) -> "Theme":
        """Copy with some glyph categories recolored (hex strings)."""
        if not overrides:
            return self
        return replace(self, palette=self.palette.with_overrides(overrides))


DARK_THEME = Theme(
    name="dark",
    palette=DARK_PALETTE,
    background=sv.Color(r=23, g=18, b=25),
    text_color=sv.Color(r=252, g=252, b=252),
)

LIGHT_THEME = Theme(
    name="light",
    palette=LIGHT_PALETTE,
    background=sv.Color(r=255, g=255, b=255),
    text_color=sv.Color(r=4, g=3, b=15),
)

THEMES: Dict[str, Theme] = {
    DARK_THEME.name: DARK_THEME,
    LIGHT_THEME.name: LIGHT_THEME,
}


def get_theme(name: str) -> Theme:
    """
    Look up a theme by name.

    Raises:
        ValueError: If no theme has that name
    """
    try:
        return THEMES[name]
    except KeyError:
        raise ValueError(
            f"Invalid theme: {name}. Must be one of {set(THEMES)}"
        ) from None

"""
Theme catalogue: the named editor palettes.

Each palette maps every color role to a hex color plus the icon glyph shown in
the theme picker. Palettes are immutable and the catalogue is built once at
import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from codebox.domain.entities.segment import ColorRole

DEFAULT_THEME = "light"


@dataclass(frozen=True)
class Palette:
    name: str
    background: str
    text: str
    keywords: str
    strings: str
    numbers: str
    comments: str
    line_numbers: str
    line_numbers_bg: str
    icon: str = ""

    def color_for(self, role: ColorRole) -> str:
        return getattr(self, ColorRole(role).value)

    def as_dict(self) -> dict:
        return {
            "background": self.background,
            "text": self.text,
            "keywords": self.keywords,
            "strings": self.strings,
            "numbers": self.numbers,
            "comments": self.comments,
            "lineNumbers": self.line_numbers,
            "lineNumbersBg": self.line_numbers_bg,
            "icon": self.icon,
        }


_PALETTES: Tuple[Palette, ...] = (
    Palette("darcula", "#2B2B2B", "#A9B7C6", "#CC7832", "#6A8759", "#6897BB", "#808080", "#606366", "#313335", "\U0001F311"),
    Palette("dark", "#1E1E1E", "#D4D4D4", "#569CD6", "#CE9178", "#B5CEA8", "#6A9955", "#858585", "#252526", "\U0001F31A"),
    Palette("light", "#FFFFFF", "#333333", "#0000FF", "#A31515", "#098658", "#008000", "#999999", "#F0F0F0", "\u2600\uFE0F"),
    Palette("github", "#ffffff", "#24292e", "#d73a49", "#032f62", "#005cc5", "#6a737d", "#6a737d", "#f6f8fa", "\U0001F431"),
    Palette("powershell", "#012456", "#EEEDF0", "#569CD6", "#CE9178", "#B5CEA8", "#608B4E", "#808080", "#012456", "\U0001F4BB"),
    Palette("atom", "#282C34", "#ABB2BF", "#C678DD", "#98C379", "#D19A66", "#5C6370", "#4B5363", "#282C34", "\u269B\uFE0F"),
    Palette("monokai", "#272822", "#F8F8F2", "#F92672", "#E6DB74", "#AE81FF", "#75715E", "#90908A", "#272822", "\U0001F3A8"),
    Palette("winter", "#FFFFFF", "#434C5E", "#81A1C1", "#A3BE8C", "#B48EAD", "#616E88", "#D8DEE9", "#ECEFF4", "\u2744\uFE0F"),
    Palette("night owl", "#011627", "#d6deeb", "#c792ea", "#ecc48d", "#f78c6c", "#637777", "#4b6479", "#011627", "\U0001F989"),
    Palette("panda", "#292A2B", "#E6E6E6", "#FF75B5", "#19F9D8", "#FFB86C", "#676B79", "#676B79", "#292A2B", "\U0001F43C"),
)

THEMES: Mapping[str, Palette] = MappingProxyType({p.name: p for p in _PALETTES})


def theme_names() -> Tuple[str, ...]:
    return tuple(THEMES)


def has_theme(name: str) -> bool:
    return name in THEMES


def get_palette(name: str | None) -> Palette:
    """Return the palette called ``name``; unknown names get the light palette."""
    return THEMES.get(name or "", THEMES[DEFAULT_THEME])

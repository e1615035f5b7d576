"""
Domain service: split one line of code into colored segments.

The editor draws these segments underneath a transparent text field, so the
only hard rule is that they concatenate back to the exact line. Segments are
built left to right by repeatedly taking the earliest match among the active
pattern classes; ties on the same start go comment > string > keyword >
number. Only the first comment on a line is honoured.

Colors come from a ``Palette`` or from any role -> color mapping, such as
``Palette.as_dict()``. Roles the mapping does not name get no color.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Match, Optional, Pattern, Tuple, Union

from codebox.domain.catalog.languages import LexicalPatterns, get_language
from codebox.domain.catalog.themes import Palette, get_palette
from codebox.domain.entities.segment import ColorRole, Segment

_PRIORITY: Tuple[ColorRole, ...] = (
    ColorRole.COMMENT,
    ColorRole.STRING,
    ColorRole.KEYWORD,
    ColorRole.NUMBER,
)

ColorSource = Union[Palette, Mapping[str, str]]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _mapping_color(colors: Mapping[str, str], role: ColorRole) -> Optional[str]:
    # "keywords", "keyword" and "lineNumbers" all name the same role
    for key in (role, role.value, _camel(role.value), role.name.lower()):
        if key in colors:
            return colors[key]
    return None


def _first_nonempty(rx: Pattern[str], line: str, pos: int) -> Optional[Match[str]]:
    for m in rx.finditer(line, pos):
        if m.end() > m.start():
            return m
    return None


class LexicalSegmenter:
    def __init__(self, patterns: LexicalPatterns, palette: Optional[ColorSource] = None) -> None:
        self._patterns = patterns
        self._palette = palette

    @classmethod
    def for_language(cls, language: Optional[str], palette: Optional[ColorSource] = None) -> "LexicalSegmenter":
        return cls(get_language(language).patterns, palette)

    def _matchers(self) -> List[Tuple[ColorRole, Pattern[str]]]:
        p = self._patterns
        candidates = zip(_PRIORITY, (p.comments, p.strings, p.keywords, p.numbers))
        return [(role, rx) for role, rx in candidates if rx is not None]

    def _color(self, role: ColorRole) -> Optional[str]:
        if self._palette is None:
            return None
        if isinstance(self._palette, Palette):
            return self._palette.color_for(role)
        return _mapping_color(self._palette, role)

    def _segment(self, text: str, role: ColorRole) -> Segment:
        return Segment(text=text, role=role, color=self._color(role))

    def segment(self, line: str) -> List[Segment]:
        if not line:
            return []

        matchers = self._matchers()
        # next non-empty match per class; re-searched only once the scan passes it
        upcoming: Dict[ColorRole, Optional[Match[str]]] = {
            role: _first_nonempty(rx, line, 0) for role, rx in matchers
        }
        segments: List[Segment] = []
        pos = 0

        while pos < len(line):
            best: Optional[Tuple[ColorRole, Match[str]]] = None
            for role, rx in matchers:
                m = upcoming.get(role)
                if m is not None and m.start() < pos:
                    m = upcoming[role] = _first_nonempty(rx, line, pos)
                if m is None:
                    continue
                # strict '<' keeps the earlier entry (higher priority) on ties
                if best is None or m.start() < best[1].start():
                    best = (role, m)
            if best is None:
                break

            role, m = best
            if m.start() > pos:
                segments.append(self._segment(line[pos:m.start()], ColorRole.TEXT))
            segments.append(self._segment(m.group(0), role))
            if role is ColorRole.COMMENT:
                upcoming.pop(role)
            pos = m.end()

        if pos < len(line):
            segments.append(self._segment(line[pos:], ColorRole.TEXT))
        return segments


def segment_line(
    line: str,
    language: Optional[str],
    palette: Union[ColorSource, str, None] = None,
) -> List[Segment]:
    """Segments for ``line``; ``palette`` may be a Palette, a color mapping or a theme name."""
    if isinstance(palette, str):
        palette = get_palette(palette)
    return LexicalSegmenter.for_language(language, palette).segment(line)

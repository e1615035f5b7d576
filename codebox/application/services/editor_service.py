from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from codebox.domain.catalog.languages import get_language
from codebox.domain.catalog.themes import Palette, get_palette
from codebox.domain.entities.segment import Segment
from codebox.domain.services.bulk_reformatter import BulkReformatter
from codebox.domain.services.incremental_formatter import IncrementalFormatter
from codebox.domain.services.lexical_segmenter import LexicalSegmenter


@dataclass(frozen=True)
class RenderedLine:
    number: int
    segments: List[Segment] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(s.text for s in self.segments)


@dataclass(frozen=True)
class RenderedCode:
    palette: Palette
    lines: List[RenderedLine]

    @property
    def line_number_color(self) -> str:
        return self.palette.line_numbers

    @property
    def line_number_background(self) -> str:
        return self.palette.line_numbers_bg


def is_newline_insert(previous_text: str, new_text: str) -> bool:
    """The edit added at least one line break."""
    return len(new_text.split("\n")) > len(previous_text.split("\n"))


class EditorService:
    """Application service behind the code editing surface.

    Thin orchestration over the formatting and highlighting domain services;
    every call is synchronous and cheap enough to run per keystroke.
    """

    def __init__(self, default_language: str = "JavaScript", default_theme: str = "light") -> None:
        self.default_language = default_language
        self.default_theme = default_theme

    def _language(self, language: Optional[str]) -> str:
        return language or self.default_language

    def on_text_change(self, previous_text: str, new_text: str, language: Optional[str] = None) -> str:
        formatter = IncrementalFormatter.for_language(self._language(language))
        return formatter.format(previous_text, new_text, is_newline_insert(previous_text, new_text))

    def reformat(self, text: str, language: Optional[str] = None) -> str:
        return BulkReformatter(self._language(language)).reformat(text)

    def render(self, code: str, language: Optional[str] = None, theme: Optional[str] = None) -> RenderedCode:
        palette = get_palette(theme or self.default_theme)
        segmenter = LexicalSegmenter(get_language(self._language(language)).patterns, palette)
        lines = [
            RenderedLine(number=i, segments=segmenter.segment(line))
            for i, line in enumerate(code.split("\n"), start=1)
        ]
        return RenderedCode(palette=palette, lines=lines)

    @staticmethod
    def line_numbers(code: str) -> List[str]:
        return [str(i) for i in range(1, len(code.split("\n")) + 1)]

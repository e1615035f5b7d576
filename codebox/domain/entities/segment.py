from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ColorRole(str, Enum):
    """Display roles a palette assigns a color to."""

    TEXT = "text"
    KEYWORD = "keywords"
    STRING = "strings"
    NUMBER = "numbers"
    COMMENT = "comments"
    LINE_NUMBER = "line_numbers"
    LINE_NUMBER_BG = "line_numbers_bg"


@dataclass(frozen=True)
class Segment:
    """Contiguous slice of one line tagged with a single color role.

    The segments of a line always concatenate back to the line itself.
    """

    text: str
    role: ColorRole = ColorRole.TEXT
    color: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return self.role is ColorRole.TEXT

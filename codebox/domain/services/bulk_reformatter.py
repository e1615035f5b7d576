"""
Domain service: re-indent a whole buffer from scratch.

Single pass with one running indent level. A line opens a block when some
bracket kind is opened and not closed on it (or, for Python, when it ends in
a colon); any closer after the first column closes one, even when the same
line opened it. Brackets inside strings and comments count
as structure too; this is a heuristic re-indent, not a parser.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from codebox.domain.catalog.languages import get_language

logger = logging.getLogger(__name__)

BRACKET_PAIRS: Tuple[Tuple[str, str], ...] = (("{", "}"), ("(", ")"), ("[", "]"))
CLOSERS = tuple(close for _open, close in BRACKET_PAIRS)


def _opens_block(line: str) -> bool:
    return any(o in line and c not in line for o, c in BRACKET_PAIRS)


def _closes_block(line: str) -> bool:
    # a leading closer was already applied before the line was emitted
    return any(c in line and not line.startswith(c) for _o, c in BRACKET_PAIRS)


class BulkReformatter:
    def __init__(self, language: Optional[str]) -> None:
        spec = get_language(language)
        self.language = spec.name
        self.indent_width = spec.indent_width
        self._colon_blocks = spec.name == "Python"

    def reformat(self, text: str) -> str:
        if not text.strip():
            return text

        level = 0
        out: List[str] = []
        for raw in text.split("\n"):
            line = raw.lstrip()
            if line.startswith(CLOSERS):
                level = max(0, level - 1)

            out.append(" " * (self.indent_width * level) + line if line.strip() else "")

            if _opens_block(line):
                level += 1
            if self._colon_blocks and line.rstrip().endswith(":"):
                level += 1
            if _closes_block(line):
                level = max(0, level - 1)

        logger.debug("reformatted %d lines as %s", len(out), self.language)
        return "\n".join(out)


def reformat_all(text: str, language: Optional[str]) -> str:
    return BulkReformatter(language).reformat(text)

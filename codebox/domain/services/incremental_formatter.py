"""
Domain service: auto-indent the line created by pressing Enter.

Runs on every keystroke, so it stays a pure string function. Only a freshly
inserted, still-empty last line is ever touched; every other edit (typing in
the middle of a line, deleting, pasting) passes through verbatim.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from codebox.domain.services.indent_rules import IndentRule, rule_for

logger = logging.getLogger(__name__)

FormatterFn = Callable[[str, str, bool], str]


class IncrementalFormatter:
    """Indent the new empty last line according to one language's rule."""

    def __init__(self, rule: Optional[IndentRule]) -> None:
        self._rule = rule

    @classmethod
    def for_language(cls, language: Optional[str]) -> "IncrementalFormatter":
        return cls(rule_for(language))

    @property
    def is_noop(self) -> bool:
        return self._rule is None

    def format(self, previous_text: str, new_text: str, inserted_newline: bool) -> str:
        if not inserted_newline or self._rule is None:
            return new_text

        lines = new_text.split("\n")
        if lines[-1].strip():
            return new_text

        previous_line = lines[-2] if len(lines) > 1 else ""
        level = self._rule.next_level(previous_line)
        lines[-1] = " " * (self._rule.indent_width * level)
        logger.debug("auto-indent level=%d width=%d", level, self._rule.indent_width)
        return "\n".join(lines)

    __call__ = format


def get_formatter(language: Optional[str]) -> FormatterFn:
    """Formatter callable for ``language``; unsupported languages get a no-op."""
    return IncrementalFormatter.for_language(language).format


def format(previous_text: str, new_text: str, inserted_newline: bool, language: Optional[str] = None) -> str:  # noqa: A001
    """Auto-indent ``new_text`` for ``language``.

    Without a language (or with one outside the catalogue) the plain "text"
    rules apply, which never indent: the result is ``new_text`` unchanged.
    Editors pass the snippet's language, or use ``EditorService``, which
    falls back to its configured default language.
    """
    return IncrementalFormatter.for_language(language).format(previous_text, new_text, inserted_newline)

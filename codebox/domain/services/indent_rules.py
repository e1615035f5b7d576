"""
Per-language indentation heuristics used by the incremental formatter.

A rule looks at the line above a freshly inserted empty line and decides the
indent level for the new line. Levels are counted in indent units, never go
below zero, and nothing here parses the language for real.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from codebox.domain.catalog.languages import get_language, find_language

_PY_DEDENT_WORDS = re.compile(r"^(?:return|break|continue|raise|pass)\b")


def leading_whitespace_width(line: str) -> int:
    return len(line) - len(line.lstrip())


class IndentRule:
    """Base rule: keep the indentation of the previous line."""

    def __init__(self, indent_width: int) -> None:
        self.indent_width = indent_width

    def base_level(self, previous_line: str) -> int:
        return leading_whitespace_width(previous_line) // self.indent_width

    def increments(self, previous_line: str) -> bool:
        return False

    def decrements(self, previous_line: str) -> bool:
        return False

    def next_level(self, previous_line: str) -> int:
        if not previous_line:
            return 0
        level = self.base_level(previous_line)
        if self.increments(previous_line):
            level += 1
        if self.decrements(previous_line):
            level = max(0, level - 1)
        return level


class PythonIndentRule(IndentRule):
    """Colon opens a block; flow statements and block closers dedent."""

    def increments(self, previous_line: str) -> bool:
        return previous_line.strip().endswith(":")

    def decrements(self, previous_line: str) -> bool:
        stripped = previous_line.strip()
        return bool(
            _PY_DEDENT_WORDS.match(stripped)
            or stripped == "else:"
            or stripped.startswith("elif ")
            or stripped.startswith("except")
            or stripped.startswith("finally:")
        )


class BraceIndentRule(IndentRule):
    """Indent after a line that leaves more ``{`` open than it closes."""

    def increments(self, previous_line: str) -> bool:
        return previous_line.count("{") > previous_line.count("}")


class ArrowBraceIndentRule(BraceIndentRule):
    """Brace rule plus a brace-less arrow function body (``x =>``)."""

    def increments(self, previous_line: str) -> bool:
        if super().increments(previous_line):
            return True
        return previous_line.rstrip().endswith("=>") and "{" not in previous_line


_RULE_TYPES: Dict[str, type] = {
    "Python": PythonIndentRule,
    "JavaScript": ArrowBraceIndentRule,
    "Dart": ArrowBraceIndentRule,
    "Java": BraceIndentRule,
    "C": BraceIndentRule,
    "C++": BraceIndentRule,
    "Rust": BraceIndentRule,
}


def rule_for(language: Optional[str]) -> Optional[IndentRule]:
    """Return the rule for ``language`` or ``None`` when it has no formatter."""
    spec = find_language(language)
    if spec is None:
        return None
    rule_type = _RULE_TYPES.get(spec.name)
    return rule_type(spec.indent_width) if rule_type else None


def indent_width(language: Optional[str]) -> int:
    return get_language(language).indent_width

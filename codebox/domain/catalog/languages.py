"""
Language catalogue.

Every supported language carries its indent unit and the four lexical pattern
classes (keywords, strings, numbers, comments) the segmenter matches against.
Lookups never fail: anything unrecognised resolves to ``DEFAULT_LANGUAGE``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)

DEFAULT_INDENT_WIDTH = 2


def _compile(pattern: Optional[str], flags: int = 0) -> Optional[Pattern[str]]:
    """Compile a pattern, dropping it when it is empty, invalid or matches ''."""
    if not pattern:
        return None
    try:
        compiled = re.compile(pattern, flags)
    except re.error as exc:
        logger.warning("Dropped invalid lexical pattern %r: %s", pattern, exc)
        return None
    if compiled.fullmatch(""):
        # the segmenter only accepts matches that consume text
        logger.warning("Dropped lexical pattern matching empty text: %r", pattern)
        return None
    return compiled


def _keyword_regex(words: Tuple[str, ...]) -> str:
    return r"\b(?:" + "|".join(words) + r")\b"


@dataclass(frozen=True)
class LexicalPatterns:
    """Compiled matchers for one language; any class may be ``None``."""

    keywords: Optional[Pattern[str]] = None
    strings: Optional[Pattern[str]] = None
    numbers: Optional[Pattern[str]] = None
    comments: Optional[Pattern[str]] = None

    @classmethod
    def from_strings(
        cls,
        keywords: Optional[str] = None,
        strings: Optional[str] = None,
        numbers: Optional[str] = None,
        comments: Optional[str] = None,
    ) -> "LexicalPatterns":
        return cls(
            keywords=_compile(keywords),
            strings=_compile(strings),
            numbers=_compile(numbers),
            comments=_compile(comments, re.MULTILINE),
        )

    @classmethod
    def for_keywords(
        cls,
        words: Tuple[str, ...],
        strings: str = r"([\"'])(.*?)\1",
        comments: str = r"(//.*$)|(/\*.*?\*/)",
    ) -> "LexicalPatterns":
        return cls.from_strings(
            keywords=_keyword_regex(words),
            strings=strings,
            numbers=r"\b\d+\b",
            comments=comments,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.keywords or self.strings or self.numbers or self.comments)


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    indent_width: int = DEFAULT_INDENT_WIDTH
    patterns: LexicalPatterns = field(default_factory=LexicalPatterns)
    aliases: Tuple[str, ...] = ()


_C_KEYWORDS = (
    "auto", "break", "case", "char", "const", "continue", "default", "do", "double",
    "else", "enum", "extern", "float", "for", "goto", "if", "int", "long", "register",
    "return", "short", "signed", "sizeof", "static", "struct", "switch", "typedef",
    "union", "unsigned", "void", "volatile", "while",
)

PYTHON = LanguageSpec(
    name="Python",
    indent_width=4,
    patterns=LexicalPatterns.for_keywords(
        (
            "def", "if", "else", "elif", "for", "while", "break", "continue", "return",
            "import", "from", "as", "class", "try", "except", "finally", "with", "in",
            "is", "not", "and", "or", "True", "False", "None",
        ),
        comments=r"#.*$",
    ),
    aliases=("py", "python3"),
)

JAVA = LanguageSpec(
    name="Java",
    indent_width=4,
    patterns=LexicalPatterns.for_keywords(
        (
            "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
            "class", "const", "continue", "default", "do", "double", "else", "enum",
            "extends", "final", "finally", "float", "for", "goto", "if", "implements",
            "import", "instanceof", "int", "interface", "long", "native", "new", "package",
            "private", "protected", "public", "return", "short", "static", "strictfp",
            "super", "switch", "synchronized", "this", "throw", "throws", "transient",
            "try", "void", "volatile", "while", "true", "false", "null",
        )
    ),
)

C = LanguageSpec(
    name="C",
    indent_width=4,
    patterns=LexicalPatterns.for_keywords(_C_KEYWORDS),
    aliases=("h",),
)

CPP = LanguageSpec(
    name="C++",
    indent_width=4,
    patterns=LexicalPatterns.for_keywords(
        _C_KEYWORDS
        + (
            "class", "namespace", "template", "try", "catch", "throw", "new", "delete",
            "private", "protected", "public", "virtual", "inline", "explicit", "friend",
            "using", "nullptr", "true", "false",
        )
    ),
    aliases=("cpp", "cxx", "cc", "hpp"),
)

RUST = LanguageSpec(
    name="Rust",
    indent_width=4,
    patterns=LexicalPatterns.for_keywords(
        (
            "as", "break", "const", "continue", "crate", "else", "enum", "extern", "false",
            "fn", "for", "if", "impl", "in", "let", "loop", "match", "mod", "move", "mut",
            "pub", "ref", "return", "self", "Self", "static", "struct", "super", "trait",
            "true", "type", "unsafe", "use", "where", "while", "async", "await", "dyn",
        )
    ),
    aliases=("rs",),
)

JAVASCRIPT = LanguageSpec(
    name="JavaScript",
    indent_width=2,
    patterns=LexicalPatterns.for_keywords(
        (
            "var", "let", "const", "function", "return", "if", "else", "for", "while", "do",
            "switch", "case", "break", "continue", "try", "catch", "finally", "class",
            "import", "export", "from", "this", "null", "undefined", "true", "false",
            "new", "async", "await",
        ),
        strings=r"([\"'`])(.*?)\1",
    ),
    aliases=("js", "jsx", "mjs", "node"),
)

DART = LanguageSpec(
    name="Dart",
    indent_width=2,
    patterns=LexicalPatterns.for_keywords(
        (
            "abstract", "dynamic", "implements", "show", "as", "else", "import", "static",
            "assert", "enum", "in", "super", "async", "export", "interface", "switch",
            "await", "extends", "is", "sync", "break", "external", "library", "this",
            "case", "factory", "mixin", "throw", "catch", "false", "new", "true", "class",
            "final", "null", "try", "const", "finally", "on", "typedef", "continue", "for",
            "operator", "var", "covariant", "Function", "part", "void", "default", "get",
            "rethrow", "while", "deferred", "hide", "return", "with", "do", "if", "set",
            "yield",
        )
    ),
)

DEFAULT_LANGUAGE = LanguageSpec(
    name="text",
    indent_width=DEFAULT_INDENT_WIDTH,
    patterns=LexicalPatterns.for_keywords(
        ("function", "return", "if", "else", "for", "while", "var", "let", "const",
         "class", "import", "export")
    ),
)

# Order matters: it is the order the language picker shows.
LANGUAGES: Tuple[LanguageSpec, ...] = (PYTHON, JAVA, C, CPP, RUST, JAVASCRIPT, DART)


def _build_index() -> Mapping[str, LanguageSpec]:
    index = {}
    for spec in LANGUAGES:
        index[spec.name.lower()] = spec
        for alias in spec.aliases:
            index[alias] = spec
    return MappingProxyType(index)


_BY_KEY: Mapping[str, LanguageSpec] = _build_index()


def language_names() -> Tuple[str, ...]:
    return tuple(spec.name for spec in LANGUAGES)


def find_language(name: Optional[str]) -> Optional[LanguageSpec]:
    """Resolve a name or alias case-insensitively; ``None`` when unsupported."""
    if not isinstance(name, str):
        return None
    return _BY_KEY.get(name.strip().lower())


def get_language(name: Optional[str]) -> LanguageSpec:
    """Like :func:`find_language` but falls back to ``DEFAULT_LANGUAGE``."""
    return find_language(name) or DEFAULT_LANGUAGE


def indent_width_for(name: Optional[str]) -> int:
    return get_language(name).indent_width

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pygments.lexers import guess_lexer
from pygments.util import ClassNotFound

from codebox.domain.catalog.languages import DEFAULT_LANGUAGE, find_language

logger = logging.getLogger(__name__)


class LanguageDetector:
    """
    Pick a catalogue language for a snippet that was saved without one.
    Heuristics:
    - Filename extension (fast path)
    - Pygments content guess, mapped onto the supported languages
    - Anything else is the default language
    """

    _EXTENSIONS = {
        ".py": "Python",
        ".pyw": "Python",
        ".pyi": "Python",
        ".java": "Java",
        ".c": "C",
        ".h": "C",
        ".cpp": "C++",
        ".cxx": "C++",
        ".cc": "C++",
        ".hpp": "C++",
        ".hxx": "C++",
        ".rs": "Rust",
        ".js": "JavaScript",
        ".jsx": "JavaScript",
        ".mjs": "JavaScript",
        ".cjs": "JavaScript",
        ".dart": "Dart",
    }

    # pygments lexer aliases -> catalogue names
    _LEXER_ALIASES = {
        "python": "Python",
        "python3": "Python",
        "py": "Python",
        "java": "Java",
        "c": "C",
        "cpp": "C++",
        "c++": "C++",
        "rust": "Rust",
        "javascript": "JavaScript",
        "js": "JavaScript",
        "dart": "Dart",
    }

    def detect_language(self, code: Optional[str], filename: Optional[str] = None) -> str:
        ext = Path((filename or "").strip().lower()).suffix
        if ext in self._EXTENSIONS:
            return self._EXTENSIONS[ext]

        text = code or ""
        if not text.strip():
            return DEFAULT_LANGUAGE.name

        # a shebang is a stronger signal than any lexer score
        first_line = text.lstrip().splitlines()[0].lower()
        if first_line.startswith("#!"):
            if "python" in first_line:
                return "Python"
            if "node" in first_line:
                return "JavaScript"

        try:
            lexer = guess_lexer(text)
        except ClassNotFound:
            logger.debug("pygments could not guess a lexer")
            return DEFAULT_LANGUAGE.name

        for alias in getattr(lexer, "aliases", ()) or ():
            name = self._LEXER_ALIASES.get(alias.lower())
            if name and find_language(name) is not None:
                logger.info("Detected language via pygments: %s", name)
                return name
        return DEFAULT_LANGUAGE.name

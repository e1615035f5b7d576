"""
Domain service: normalize snippet text before it is stored.

Pure Python only:
- strip BOM
- normalize CRLF/CR to LF
- replace NBSP and other Unicode space separators (Zs) with an ASCII space
- remove zero-width, directional and other control/format characters
  (tabs and newlines are kept)
- trim trailing whitespace per line

Does NOT force a trailing newline.
"""

from __future__ import annotations

import unicodedata
from typing import Any


class CodeNormalizer:
    _ZERO_WIDTH = frozenset({
        "\u200B",  # ZWSP
        "\u200C",  # ZWNJ
        "\u200D",  # ZWJ
        "\u2060",  # WJ
        "\uFEFF",  # ZWNBSP/BOM
    })

    _DIRECTIONAL = frozenset({
        "\u200E", "\u200F",  # LRM, RLM
        "\u202A", "\u202B", "\u202C", "\u202D", "\u202E",  # embeddings/overrides
        "\u2066", "\u2067", "\u2068", "\u2069",  # isolates
    })

    def normalize(self, text: Any) -> str:
        """Normalize snippet text; ``None`` and non-strings become ``""``."""
        if not isinstance(text, str):
            return ""

        out = text.lstrip("\ufeff")
        out = out.replace("\r\n", "\n").replace("\r", "\n")
        out = "".join(self._translate(ch) for ch in out)
        return "\n".join(line.rstrip(" \t") for line in out.split("\n"))

    def _translate(self, ch: str) -> str:
        if ch in ("\t", "\n"):
            return ch
        if ch in self._ZERO_WIDTH or ch in self._DIRECTIONAL:
            return ""
        cat = unicodedata.category(ch)
        if cat == "Zs":
            return " "
        if cat in ("Cc", "Cf"):
            return ""
        return ch

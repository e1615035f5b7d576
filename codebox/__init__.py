"""Syntax highlighting and auto-indentation core for the codebox snippet editor."""

from __future__ import annotations

from codebox.domain.services.bulk_reformatter import reformat_all  # noqa: F401
from codebox.domain.services.incremental_formatter import format, get_formatter  # noqa: F401,A004
from codebox.domain.services.lexical_segmenter import segment_line  # noqa: F401

__version__ = "1.0.0"

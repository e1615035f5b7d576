from __future__ import annotations


class CodeboxError(Exception):
    """Base class for errors raised outside the pure editing core."""


class SnippetNotFoundError(CodeboxError, LookupError):
    def __init__(self, snippet_id: str) -> None:
        super().__init__(f"snippet not found: {snippet_id}")
        self.snippet_id = snippet_id


class SnippetStorageError(CodeboxError):
    """Persisting snippets failed."""

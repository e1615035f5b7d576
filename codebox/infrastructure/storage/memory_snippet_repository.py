from __future__ import annotations

from dataclasses import replace as _copy
from typing import List, Optional

from codebox.domain.entities.snippet import Snippet
from codebox.domain.interfaces.snippet_repository_interface import ISnippetRepository


class InMemorySnippetRepository(ISnippetRepository):
    """Process-local store for ephemeral sessions and tests."""

    def __init__(self) -> None:
        self._items: List[Snippet] = []

    async def save(self, snippet: Snippet) -> Snippet:
        stored = snippet.with_free_id({s.id for s in self._items})
        self._items.insert(0, _copy(stored))
        return stored

    async def replace(self, snippet: Snippet) -> Optional[Snippet]:
        for i, current in enumerate(self._items):
            if current.id == snippet.id:
                self._items[i] = _copy(snippet)
                return snippet
        return None

    async def list_all(self) -> List[Snippet]:
        return [_copy(s) for s in self._items]

    async def get(self, snippet_id: str) -> Optional[Snippet]:
        for s in self._items:
            if s.id == snippet_id:
                return _copy(s)
        return None

    async def delete(self, snippet_id: str) -> bool:
        before = len(self._items)
        self._items = [s for s in self._items if s.id != snippet_id]
        return len(self._items) != before

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from codebox.domain.entities.snippet import Snippet
from codebox.domain.errors import SnippetStorageError
from codebox.domain.interfaces.snippet_repository_interface import ISnippetRepository

logger = logging.getLogger(__name__)

SAVED_CODES_KEY = "savedCodes"


class JsonSnippetRepository(ISnippetRepository):
    """Snippets stored as one JSON array under ``savedCodes`` in a file.

    Newest snippet first. A missing or unreadable file reads as an empty
    store; failing writes raise ``SnippetStorageError``. File I/O runs in a
    worker thread and every read-modify-write holds one ``asyncio.Lock``.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path).expanduser()
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ---------- Blob I/O ----------
    def _read_blob(self) -> List[Dict[str, Any]]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            logger.error("Error reading saved codes from %s: %s", self._path, exc)
            return []
        try:
            data = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError as exc:
            logger.error("Corrupt snippet store %s: %s", self._path, exc)
            return []
        items = data.get(SAVED_CODES_KEY, []) if isinstance(data, dict) else []
        return [d for d in items if isinstance(d, dict)]

    def _write_blob(self, items: List[Dict[str, Any]]) -> None:
        payload = json.dumps({SAVED_CODES_KEY: items}, ensure_ascii=False, indent=2)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=str(self._path.parent), suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp, self._path)
        except OSError as exc:
            raise SnippetStorageError(f"could not write {self._path}: {exc}") from exc

    async def _load(self) -> List[Snippet]:
        items = await asyncio.to_thread(self._read_blob)
        return [Snippet.from_dict(d) for d in items]

    async def _store(self, snippets: List[Snippet]) -> None:
        await asyncio.to_thread(self._write_blob, [s.to_dict() for s in snippets])

    # ---------- Repository contract ----------
    async def save(self, snippet: Snippet) -> Snippet:
        async with self._lock:
            snippets = await self._load()
            stored = snippet.with_free_id({s.id for s in snippets})
            await self._store([stored] + snippets)
        return stored

    async def replace(self, snippet: Snippet) -> Optional[Snippet]:
        async with self._lock:
            snippets = await self._load()
            for i, current in enumerate(snippets):
                if current.id == snippet.id:
                    snippets[i] = snippet
                    await self._store(snippets)
                    return snippet
        return None

    async def list_all(self) -> List[Snippet]:
        return await self._load()

    async def get(self, snippet_id: str) -> Optional[Snippet]:
        for s in await self._load():
            if s.id == snippet_id:
                return s
        return None

    async def delete(self, snippet_id: str) -> bool:
        async with self._lock:
            snippets = await self._load()
            kept = [s for s in snippets if s.id != snippet_id]
            if len(kept) == len(snippets):
                return False
            await self._store(kept)
        return True

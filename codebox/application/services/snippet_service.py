from __future__ import annotations

import logging
import time
from typing import List, Optional

from codebox.application.dto.save_snippet_dto import SaveSnippetDTO
from codebox.domain.catalog.languages import find_language
from codebox.domain.catalog.themes import DEFAULT_THEME, has_theme
from codebox.domain.entities.snippet import Snippet
from codebox.domain.errors import SnippetNotFoundError
from codebox.domain.interfaces.snippet_repository_interface import ISnippetRepository
from codebox.domain.services.code_normalizer import CodeNormalizer
from codebox.domain.services.language_detector import LanguageDetector

logger = logging.getLogger(__name__)


class SnippetService:
    """Application service orchestrating snippet operations.

    Thin orchestration over domain + repository. No storage format here.
    """

    def __init__(
        self,
        snippet_repository: ISnippetRepository,
        code_normalizer: CodeNormalizer,
        language_detector: Optional[LanguageDetector] = None,
        default_theme: str = DEFAULT_THEME,
        recent_limit: int = 5,
    ) -> None:
        self._repo = snippet_repository
        self._normalizer = code_normalizer
        self._detector = language_detector or LanguageDetector()
        self._default_theme = default_theme
        self._recent_limit = recent_limit

    async def save_snippet(self, dto: SaveSnippetDTO) -> Snippet:
        created_at = int(time.time() * 1000)
        # the repository moves the id forward if this millisecond is taken
        entity = self._build(dto, snippet_id=Snippet.new_id(created_at), created_at=created_at)
        saved = await self._repo.save(entity)
        logger.info("Saved snippet %s (%s)", saved.id, saved.language)
        return saved

    async def update_snippet(self, snippet_id: str, dto: SaveSnippetDTO) -> Snippet:
        current = await self._repo.get(snippet_id)
        if current is None:
            raise SnippetNotFoundError(snippet_id)
        entity = self._build(dto, snippet_id=current.id, created_at=current.created_at)
        replaced = await self._repo.replace(entity)
        if replaced is None:
            raise SnippetNotFoundError(snippet_id)
        return replaced

    async def get_snippet(self, snippet_id: str) -> Optional[Snippet]:
        return await self._repo.get(snippet_id)

    async def list_snippets(self) -> List[Snippet]:
        return await self._repo.list_all()

    async def recent_snippets(self, limit: Optional[int] = None) -> List[Snippet]:
        if limit is None:
            limit = self._recent_limit
        snippets = await self._repo.list_all()
        return snippets[: max(0, limit)]

    async def delete_snippet(self, snippet_id: str) -> bool:
        deleted = await self._repo.delete(snippet_id)
        if not deleted:
            logger.warning("Delete requested for unknown snippet %s", snippet_id)
        return deleted

    def _build(self, dto: SaveSnippetDTO, snippet_id: str, created_at: int) -> Snippet:
        code = self._normalizer.normalize(dto.code)
        return Snippet(
            id=snippet_id,
            title=dto.title,
            code=code,
            language=self._resolve_language(dto.language, code),
            theme=dto.theme if dto.theme and has_theme(dto.theme) else self._default_theme,
            created_at=created_at,
        )

    def _resolve_language(self, language: Optional[str], code: str) -> str:
        spec = find_language(language)
        if spec is not None:
            return spec.name
        return self._detector.detect_language(code)

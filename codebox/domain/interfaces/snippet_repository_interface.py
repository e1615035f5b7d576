from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from codebox.domain.entities.snippet import Snippet


class ISnippetRepository(ABC):
    """Repository interface for the Snippet domain entity.

    Domain defines the contract; infrastructure implements it.
    """

    @abstractmethod
    async def save(self, snippet: Snippet) -> Snippet:
        """Store as the newest snippet and return what was stored.

        A ``code_<ms>`` id that is already taken moves to the next free
        millisecond; the check and the insert happen as one step.
        """
        raise NotImplementedError

    @abstractmethod
    async def replace(self, snippet: Snippet) -> Optional[Snippet]:  # None when the id is unknown
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> List[Snippet]:
        raise NotImplementedError

    @abstractmethod
    async def get(self, snippet_id: str) -> Optional[Snippet]:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, snippet_id: str) -> bool:
        raise NotImplementedError

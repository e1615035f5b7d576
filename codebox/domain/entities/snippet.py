from __future__ import annotations

import time
from dataclasses import dataclass, field, asdict, replace
from typing import Any, Collection, Dict


def _now_ms() -> int:
    return int(time.time() * 1000)


def _as_ms(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0


@dataclass
class Snippet:
    """Domain entity: a saved code snippet.

    Kept framework-free to allow use across layers. ``created_at`` is epoch
    milliseconds, which is also what the generated id is derived from.
    """

    id: str
    title: str
    code: str
    language: str
    theme: str
    created_at: int = field(default_factory=_now_ms)

    @classmethod
    def new_id(cls, created_at: int) -> str:
        return f"code_{created_at}"

    def with_free_id(self, taken: Collection[str]) -> "Snippet":
        """Copy whose id is not in ``taken``.

        Only ``code_<ms>`` ids derived from ``created_at`` are moved, one
        millisecond at a time; any other id is returned as given.
        """
        if self.id != self.new_id(self.created_at):
            return self
        created_at = self.created_at
        while self.new_id(created_at) in taken:
            created_at += 1
        if created_at == self.created_at:
            return self
        return replace(self, id=self.new_id(created_at), created_at=created_at)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["createdAt"] = data.pop("created_at")
        return data

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Snippet":
        # a damaged createdAt reads as 0 rather than hiding the whole store
        return cls(
            id=str(d.get("id", "") or ""),
            title=str(d.get("title", "") or ""),
            code=str(d.get("code", "") or ""),
            language=str(d.get("language", "") or ""),
            theme=str(d.get("theme", "") or ""),
            created_at=_as_ms(d.get("createdAt", d.get("created_at"))),
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_TITLE = "Code Snippet"


@dataclass
class SaveSnippetDTO:
    code: str
    title: str = DEFAULT_TITLE
    language: Optional[str] = None
    theme: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise ValueError("code is required")
        if not isinstance(self.title, str) or not self.title.strip():
            self.title = DEFAULT_TITLE
        else:
            self.title = self.title.strip()

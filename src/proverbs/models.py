from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from . import config as CFG


@dataclass(frozen=True)
class Proverb:
    id: int                   # 0-based position in load order
    source_text: str          # original-language form
    translated_text: str      # translation
    theme: str                # free-text category label
    source_norm: str          # normalized forms, computed once at load time
    translated_norm: str
    theme_norm: str

    @property
    def haystack(self) -> str:
        """Combined normalized text that keywords are matched against."""
        return f"{self.source_norm} {self.translated_norm} {self.theme_norm}"

    def to_dict(self) -> dict:
        return {
            "sourceText": self.source_text,
            "translatedText": self.translated_text,
            "theme": self.theme,
            "id": self.id,
        }


@dataclass(frozen=True)
class ProverbSet:
    """Frozen, annotated collection shared read-only by every query."""
    proverbs: Tuple[Proverb, ...]

    def __len__(self) -> int:
        return len(self.proverbs)

    def __iter__(self):
        return iter(self.proverbs)

    def __getitem__(self, i):
        return self.proverbs[i]


@dataclass(frozen=True)
class Query:
    search: Optional[str] = None
    theme: Optional[str] = None
    page: int = CFG.DEFAULT_PAGE
    limit: int = CFG.DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        search: Optional[str] = None,
        theme: Optional[str] = None,
        page: object = None,
        limit: object = None,
    ) -> "Query":
        """Build a query from raw request values; page/limit are coerced, never rejected."""
        from .search import parse_page_param
        return cls(
            search=search,
            theme=theme,
            page=parse_page_param(page, CFG.DEFAULT_PAGE),
            limit=parse_page_param(limit, CFG.DEFAULT_LIMIT),
        )


@dataclass(frozen=True)
class SearchResult:
    total_results: int               # matches before pagination
    current_page: int                # echoed page index
    proverbs: Tuple[Proverb, ...]    # this page only, len <= limit

    def to_dict(self) -> dict:
        return {
            "totalResults": self.total_results,
            "currentPage": self.current_page,
            "proverbs": [p.to_dict() for p in self.proverbs],
        }

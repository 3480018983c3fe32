from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict

from .entity_profile import ALL

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current category/search selection for one entity view.

    Fields:

    - category: one of the entity profile's category values; "all" matches everything
    - query: free-text search, matched case-insensitively; empty matches everything
    """

    category: str = ALL
    query: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            category=data.get("category") or ALL,
            query=data.get("query") or "",
        )


@dataclass(frozen=True)
class PageState:
    """
    Pagination position: zero-based page index and page size.
    """

    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self):
        if self.page < 0:
            raise ValueError(f"page must be >= 0, got {self.page}")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {self.page_size}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PageState:
        return cls(
            page=int(data.get("page", 0)),
            page_size=int(data.get("page_size", DEFAULT_PAGE_SIZE)),
        )

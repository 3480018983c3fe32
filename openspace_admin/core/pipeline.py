"""
Pure view derivation: filter, aggregate and paginate a record collection.

None of these functions mutate their inputs or keep state; the
ViewController owns the state and calls them in order on every change.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple

from .entity_profile import EntityProfile
from .filter_state import FilterState


@dataclass(frozen=True)
class Summary:
    """Counts over the full, unfiltered collection."""
    total: int
    counts: Dict[str, int]

    def __getitem__(self, key: str) -> int:
        if key == "total":
            return self.total
        return self.counts[key]

    def to_dict(self) -> Dict[str, int]:
        return {"total": self.total, **self.counts}


def _field_text(record: Any, name: str) -> str:
    value = getattr(record, name, None)
    if isinstance(value, Enum):
        value = value.value
    if value is None:
        return ""
    return str(value)


def matches_query(record: Any, fields: Sequence[str], query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    for name in fields:
        text = _field_text(record, name)
        if text and needle in text.lower():
            return True
    return False


def filter_records(
    records: Sequence[Any],
    profile: EntityProfile,
    state: FilterState,
) -> Tuple[Any, ...]:
    """
    Return the records matching both the category and the text query, in
    their original order.

    :raises UnknownCategoryError: if state.category is not declared by the profile
    """
    if not records:
        return ()
    category = profile.category(state.category)
    return tuple(
        r for r in records
        if category.matches(r) and matches_query(r, profile.search_fields, state.query)
    )


def aggregate(records: Sequence[Any], profile: EntityProfile) -> Summary:
    counts = {c.value: sum(1 for r in records if c.matches(r)) for c in profile.partitions}
    return Summary(total=len(records), counts=counts)


def paginate(records: Sequence[Any], page: int, page_size: int) -> Tuple[Any, ...]:
    """
    Slice out page `page` of size `page_size`. Pages past the end are empty.
    """
    if page < 0:
        raise ValueError(f"page must be >= 0, got {page}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    start = page * page_size
    return tuple(records[start:start + page_size])


def page_count(total: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    return max(1, -(-total // page_size))


def clamp_page(page: int, total: int, page_size: int) -> int:
    return min(max(page, 0), page_count(total, page_size) - 1)

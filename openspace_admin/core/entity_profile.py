from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Type

from .exceptions import UnknownCategoryError

ALL = "all"


@dataclass(frozen=True)
class Category:
    """
    One option of an entity's category selector.

    `predicate` is None only for the "all" sentinel. The non-sentinel
    categories of a profile must partition the collection, which is what
    lets the summary counts add up to the total.
    """
    value: str
    label: str
    predicate: Optional[Callable[[Any], bool]] = None

    @property
    def is_all(self) -> bool:
        return self.predicate is None

    def matches(self, record: Any) -> bool:
        return self.predicate is None or bool(self.predicate(record))


@dataclass(frozen=True)
class EntityProfile:
    """
    Describes one entity type to the generic filter/aggregate/paginate pipeline

    - key: stable identifier, also used to namespace UI component ids
    - label: human-readable name ("Reports")
    - record_type: dataclass with a `from_dict` classmethod
    - categories: category selector options, the "all" sentinel first
    - search_fields: record attributes searched by the free-text query, in order
    - mutable_flag: name of the boolean attribute the store may flip, if any
    """

    key: str
    label: str
    record_type: Type[Any]
    categories: Tuple[Category, ...]
    search_fields: Tuple[str, ...]
    mutable_flag: Optional[str] = None

    def __post_init__(self):
        values = [c.value for c in self.categories]
        if len(set(values)) != len(values):
            raise ValueError(f"Profile '{self.key}' has duplicate category values")
        if ALL not in values:
            raise ValueError(f"Profile '{self.key}' must declare the '{ALL}' category")

    @property
    def category_values(self) -> Tuple[str, ...]:
        return tuple(c.value for c in self.categories)

    @property
    def partitions(self) -> Tuple[Category, ...]:
        return tuple(c for c in self.categories if not c.is_all)

    def category(self, value: str) -> Category:
        for c in self.categories:
            if c.value == value:
                return c
        raise UnknownCategoryError(
            f"Unknown category '{value}' for {self.key}; expected one of {list(self.category_values)}"
        )

    def parse_record(self, raw: Dict[str, Any]) -> Any:
        return self.record_type.from_dict(raw)

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Tuple

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.exceptions import RecordLoadError, UnsupportedMutationError
from openspace_admin.core.filter_state import DEFAULT_PAGE_SIZE, FilterState, PageState
from openspace_admin.core.pipeline import (
    Summary,
    aggregate,
    clamp_page,
    filter_records,
    page_count,
    paginate,
)
from openspace_admin.core.record_store import RecordStore
from openspace_admin.core.records import RecordId
from openspace_admin.core.state import LoadStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedView:
    """
    Everything the rendering layer needs for one entity tab, computed in a
    single pass so it is never half-updated.
    """

    entity: str
    status: LoadStatus
    filter_state: FilterState
    page_state: PageState
    summary: Summary
    filtered: Tuple[Any, ...]
    page_records: Tuple[Any, ...]
    page_count: int
    error: Optional[str] = None

    @property
    def filtered_count(self) -> int:
        return len(self.filtered)

    @property
    def is_loading(self) -> bool:
        return self.status in (LoadStatus.IDLE, LoadStatus.LOADING)

    @property
    def range_label(self) -> str:
        """Row range shown next to the pager, e.g. '11–20 of 23'."""
        total = self.filtered_count
        if total == 0 or not self.page_records:
            return f"0–0 of {total}"
        first = self.page_state.page * self.page_state.page_size + 1
        last = first + len(self.page_records) - 1
        return f"{first}–{last} of {total}"


class ViewController:
    """
    Owns the filter and pagination state of one entity view and derives
    the visible page from its RecordStore.

    Inputs (filter, search, page, page size, resolve/unresolve) are applied
    immediately when the view is READY. In any other state they are queued
    and replayed in arrival order once a load completes; a failed load
    discards the queue. The previous collection stays visible until a load
    commits its replacement.

    Page reset rules: the page goes back to 0 whenever the category, the
    query or the page size changes, and is clamped into range after a
    mutation or a reload.
    """

    def __init__(
        self,
        profile: EntityProfile,
        store: RecordStore,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        if store.profile is not profile:
            raise ValueError(f"Store for '{store.profile.key}' given to a '{profile.key}' controller")
        self.profile = profile
        self._store = store
        self._filter = FilterState()
        self._page = PageState(page=0, page_size=page_size)
        self._pending: List[Callable[[], None]] = []

    @property
    def status(self) -> LoadStatus:
        return self._store.status

    @property
    def filter_state(self) -> FilterState:
        return self._filter

    @property
    def page_state(self) -> PageState:
        return self._page

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    async def load(self) -> DerivedView:
        try:
            await self._store.load()
        except RecordLoadError:
            if self._pending:
                logger.warning(
                    "Discarding queued inputs after failed load",
                    extra={"entity": self.profile.key, "n_pending": len(self._pending)},
                )
            self._pending.clear()
            return self.view()

        if self.status is LoadStatus.READY:
            self._drain_pending()
            self._clamp_page()
        return self.view()

    async def reload(self) -> DerivedView:
        logger.info("Reload requested", extra={"entity": self.profile.key, "status": self.status.value})
        return await self.load()

    # ------------------------------------------------------------------
    # User inputs
    # ------------------------------------------------------------------
    def set_category(self, category: str) -> None:
        self.profile.category(category)
        self._submit(lambda: self._apply_filter(replace(self._filter, category=category)))

    def set_query(self, query: Optional[str]) -> None:
        query = query or ""
        self._submit(lambda: self._apply_filter(replace(self._filter, query=query)))

    def set_page(self, page: int) -> None:
        if page < 0:
            raise ValueError(f"page must be >= 0, got {page}")

        def apply() -> None:
            n = len(self._filtered())
            self._page = replace(self._page, page=clamp_page(page, n, self._page.page_size))

        self._submit(apply)

    def set_page_size(self, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0, got {page_size}")

        def apply() -> None:
            self._page = PageState(page=0, page_size=page_size)

        self._submit(apply)

    def resolve(self, record_id: RecordId) -> None:
        self._submit_mutation(record_id, True)

    def unresolve(self, record_id: RecordId) -> None:
        self._submit_mutation(record_id, False)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def record(self, record_id: RecordId) -> Optional[Any]:
        found = self._store.get(record_id)
        return copy.copy(found) if found is not None else None

    def view(self) -> DerivedView:
        records = self._store.records
        filtered = filter_records(records, self.profile, self._filter)
        return DerivedView(
            entity=self.profile.key,
            status=self.status,
            filter_state=self._filter,
            page_state=self._page,
            summary=aggregate(records, self.profile),
            filtered=filtered,
            page_records=paginate(filtered, self._page.page, self._page.page_size),
            page_count=page_count(len(filtered), self._page.page_size),
            error=self._store.error,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _submit(self, apply: Callable[[], None]) -> None:
        if self.status is LoadStatus.READY:
            apply()
            return
        self._pending.append(apply)
        logger.debug(
            "Input queued until view is ready",
            extra={"entity": self.profile.key, "status": self.status.value, "n_pending": len(self._pending)},
        )

    def _submit_mutation(self, record_id: RecordId, value: bool) -> None:
        if self.profile.mutable_flag is None:
            raise UnsupportedMutationError(f"{self.profile.label} records cannot be modified")

        def apply() -> None:
            self._store.set_resolution_flag(record_id, value)
            self._clamp_page()

        self._submit(apply)

    def _drain_pending(self) -> None:
        pending, self._pending = self._pending, []
        for apply in pending:
            apply()

    def _apply_filter(self, new_filter: FilterState) -> None:
        if new_filter == self._filter:
            return
        self._filter = new_filter
        self._page = replace(self._page, page=0)

    def _filtered(self) -> Tuple[Any, ...]:
        return filter_records(self._store.records, self.profile, self._filter)

    def _clamp_page(self) -> None:
        n = len(self._filtered())
        self._page = replace(self._page, page=clamp_page(self._page.page, n, self._page.page_size))

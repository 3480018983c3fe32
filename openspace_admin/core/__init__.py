"""
Core domain layer: record types, entity profiles and the pure
filter/aggregate/paginate pipeline.

The stateful pieces live in submodules that depend on record sources:
    openspace_admin.core.record_store
    openspace_admin.core.view_controller
"""

from .entity_profile import ALL, Category, EntityProfile
from .records import OpenSpace, OpenSpaceStatus, Report
from .profiles import OPEN_SPACES, REPORTS
from .entity_registry import EntityRegistry, default_registry
from .filter_state import FilterState, PageState
from .state import LoadStatus
from .pipeline import Summary, aggregate, clamp_page, filter_records, page_count, paginate

__all__ = [
    "ALL",
    "Category",
    "EntityProfile",
    "OpenSpace",
    "OpenSpaceStatus",
    "Report",
    "OPEN_SPACES",
    "REPORTS",
    "EntityRegistry",
    "default_registry",
    "FilterState",
    "PageState",
    "LoadStatus",
    "Summary",
    "aggregate",
    "clamp_page",
    "filter_records",
    "page_count",
    "paginate",
]

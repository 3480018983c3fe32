from __future__ import annotations

from .entity_profile import ALL, Category, EntityProfile
from .records import OpenSpace, OpenSpaceStatus, Report

REPORTS = EntityProfile(
    key="reports",
    label="Reports",
    record_type=Report,
    categories=(
        Category(ALL, "All"),
        Category("resolved", "Resolved", lambda r: r.is_resolved is True),
        Category("pending", "Pending", lambda r: r.is_resolved is False),
    ),
    search_fields=("open_space_name", "street", "description", "reporter_name"),
    mutable_flag="is_resolved",
)

# "inactive" covers both Inactive and Under Maintenance
OPEN_SPACES = EntityProfile(
    key="open_spaces",
    label="Open Spaces",
    record_type=OpenSpace,
    categories=(
        Category(ALL, "All"),
        Category("active", "Active", lambda s: s.status == OpenSpaceStatus.ACTIVE),
        Category("inactive", "Inactive", lambda s: s.status != OpenSpaceStatus.ACTIVE),
    ),
    search_fields=("name", "address", "status"),
)

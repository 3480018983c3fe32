from __future__ import annotations

import pytest

from openspace_admin.core.entity_profile import ALL, Category, EntityProfile
from openspace_admin.core.entity_registry import EntityRegistry, default_registry
from openspace_admin.core.exceptions import UnknownCategoryError
from openspace_admin.core.profiles import OPEN_SPACES, REPORTS
from openspace_admin.core.records import Report


def test_default_registry_order_is_reports_then_open_spaces():
    registry = default_registry()
    assert [p.key for p in registry.all_profiles()] == ["reports", "open_spaces"]
    assert registry.get("reports") is REPORTS


def test_register_duplicate_key_raises():
    registry = EntityRegistry()
    registry.register(REPORTS)
    with pytest.raises(ValueError, match="already registered"):
        registry.register(REPORTS)


def test_register_rejects_non_profiles():
    with pytest.raises(TypeError):
        EntityRegistry().register("reports")


def test_get_unknown_key_raises():
    with pytest.raises(KeyError):
        default_registry().get("parks")


def test_profile_requires_all_sentinel():
    with pytest.raises(ValueError, match="'all'"):
        EntityProfile(
            key="x",
            label="X",
            record_type=Report,
            categories=(Category("pending", "Pending", lambda r: True),),
            search_fields=(),
        )


def test_profile_category_lookup():
    assert REPORTS.category(ALL).is_all
    assert OPEN_SPACES.category_values == ("all", "active", "inactive")
    with pytest.raises(UnknownCategoryError):
        OPEN_SPACES.category("pending")


def test_only_reports_are_mutable():
    assert REPORTS.mutable_flag == "is_resolved"
    assert OPEN_SPACES.mutable_flag is None

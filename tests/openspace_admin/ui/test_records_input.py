import asyncio

import pytest
from dash.exceptions import PreventUpdate

from openspace_admin.core.profiles import OPEN_SPACES, REPORTS
from openspace_admin.core.record_store import RecordStore
from openspace_admin.core.state import LoadStatus
from openspace_admin.core.view_controller import ViewController
from openspace_admin.sources.fixtures import FixtureSource
from openspace_admin.ui.callbacks.callbacks_records import apply_input
from openspace_admin.ui.ids import IDs, entity_id, pattern_id


def _raw_report(rid):
    return {"id": rid, "open_space_name": f"Space {rid}", "latitude": 0, "longitude": 0}


def _controller(profile=REPORTS, raw_items=None, page_size=10):
    source = FixtureSource(profile, raw_items=raw_items)
    return ViewController(profile, RecordStore(profile, source), page_size=page_size)


def _loaded(profile=REPORTS, raw_items=None, page_size=10):
    controller = _controller(profile, raw_items, page_size)
    asyncio.run(controller.load())
    return controller


def test_first_render_loads_idle_controller():
    controller = _controller()
    apply_input(controller, None, None)
    assert controller.status is LoadStatus.READY


def test_session_trigger_does_not_reload_ready_controller():
    controller = _loaded()
    controller.resolve(1)
    apply_input(controller, IDs.Store.SESSION_ID, "session-abc")
    assert controller.view().summary["resolved"] == 2


def test_idle_controller_is_loaded_before_any_input():
    # e.g. a session rebuilt after eviction, first event is a chip click
    controller = _controller()
    apply_input(controller, pattern_id(IDs.Pattern.CATEGORY, "reports", "pending"), 1)

    view = controller.view()
    assert view.status is LoadStatus.READY
    assert controller.pending_count == 0
    assert [r.id for r in view.filtered] == [1, 3]


def test_search_and_page_size():
    controller = _loaded()
    apply_input(controller, entity_id("reports", IDs.Entity.SEARCH), "garden")
    assert controller.filter_state.query == "garden"

    apply_input(controller, entity_id("reports", IDs.Entity.PAGE_SIZE), 25)
    assert controller.page_state.page_size == 25

    with pytest.raises(PreventUpdate):
        apply_input(controller, entity_id("reports", IDs.Entity.PAGE_SIZE), None)


def test_pagination_echo_is_ignored():
    controller = _loaded(raw_items=[_raw_report(i) for i in range(1, 26)], page_size=5)
    pagination = entity_id("reports", IDs.Entity.PAGINATION)

    with pytest.raises(PreventUpdate):
        apply_input(controller, pagination, 1)

    apply_input(controller, pagination, 3)
    assert controller.page_state.page == 2

    with pytest.raises(PreventUpdate):
        apply_input(controller, pagination, 3)


def test_resolve_and_unresolve_buttons():
    controller = _loaded()
    apply_input(controller, pattern_id(IDs.Pattern.RESOLVE, "reports", 1), 1)
    assert controller.record(1).is_resolved is True

    apply_input(controller, pattern_id(IDs.Pattern.UNRESOLVE, "reports", 2), 1)
    assert controller.record(2).is_resolved is False


def test_rerendered_button_without_clicks_is_ignored():
    controller = _loaded()
    with pytest.raises(PreventUpdate):
        apply_input(controller, pattern_id(IDs.Pattern.RESOLVE, "reports", 1), None)
    assert controller.record(1).is_resolved is False


def test_rejected_input_becomes_prevent_update():
    controller = _loaded(profile=OPEN_SPACES)
    with pytest.raises(PreventUpdate):
        apply_input(controller, pattern_id(IDs.Pattern.RESOLVE, "open_spaces", 1), 1)
    with pytest.raises(PreventUpdate):
        apply_input(controller, pattern_id(IDs.Pattern.CATEGORY, "open_spaces", "archived"), 1)


def test_refresh_reloads_collection():
    controller = _loaded()
    controller.resolve(1)
    apply_input(controller, entity_id("reports", IDs.Entity.REFRESH_BTN), 1)
    assert controller.view().summary["resolved"] == 1


def test_unknown_trigger_is_ignored():
    controller = _loaded()
    with pytest.raises(PreventUpdate):
        apply_input(controller, "something-else", 1)

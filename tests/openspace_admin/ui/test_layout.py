import asyncio
import json

from dash import html

from openspace_admin.core.profiles import OPEN_SPACES, REPORTS
from openspace_admin.core.record_store import RecordStore
from openspace_admin.core.records import Report
from openspace_admin.core.view_controller import ViewController
from openspace_admin.sources.fixtures import FixtureSource
from openspace_admin.ui.dash_app import create_dash_app
from openspace_admin.ui.layout.build_detail_modals import build_location_details
from openspace_admin.ui.layout.build_records_table import build_records_table, build_stat_cards


def _controller(profile):
    return ViewController(profile, RecordStore(profile, FixtureSource(profile)))


def _text(component) -> str:
    """Concatenate every string child in a component tree."""
    if component is None:
        return ""
    if isinstance(component, (str, int, float)):
        return str(component)
    if isinstance(component, (list, tuple)):
        return " ".join(_text(c) for c in component)
    return _text(getattr(component, "children", None))


def test_table_shows_loading_placeholder_before_load():
    view = _controller(REPORTS).view()
    table = build_records_table(view, REPORTS)
    assert isinstance(table, html.Div)
    assert table.children == "Loading..."


def test_table_renders_one_row_per_page_record():
    controller = _controller(REPORTS)
    asyncio.run(controller.load())
    table = build_records_table(controller.view(), REPORTS)

    body = table.children[1]
    assert len(body.children) == 3
    assert "Community Garden" in _text(table)


def test_table_empty_message_when_nothing_matches():
    controller = _controller(OPEN_SPACES)
    asyncio.run(controller.load())
    controller.set_query("no such park")

    table = build_records_table(controller.view(), OPEN_SPACES)
    assert "No open spaces match" in _text(table)


def test_stat_cards_show_total_and_partitions():
    controller = _controller(OPEN_SPACES)
    asyncio.run(controller.load())
    cards = build_stat_cards(controller.view(), OPEN_SPACES)

    assert len(cards.children) == 3
    text = _text(cards)
    assert "5" in text and "3" in text and "2" in text


def test_create_dash_app_from_config_dir(tmp_path):
    (tmp_path / "global.json").write_text(json.dumps({"ui_title": "Console Under Test", "load_delay_seconds": 0}))

    app = create_dash_app(tmp_path)

    assert app.title == "Console Under Test"
    assert app.layout is not None
    assert len(app.callback_map) > 0


def test_location_details_render_malformed_coordinates():
    report = Report.from_dict({"id": 1, "open_space_name": "City Park", "street": "Park Ave", "latitude": "n/a"})
    assert "n/a, None" in _text(build_location_details(report))

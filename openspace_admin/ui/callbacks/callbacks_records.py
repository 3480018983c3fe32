from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
from dash import ALL, Input, Output, State, dcc, exceptions, html

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.exceptions import OpenSpaceAdminError
from openspace_admin.core.state import LoadStatus
from openspace_admin.core.view_controller import ViewController
from openspace_admin.services.export_service import export_filename, export_records_csv
from openspace_admin.ui.helpers import run_async, session_or_prevent, triggered_value
from openspace_admin.ui.ids import IDs, entity_id
from openspace_admin.ui.layout.build_records_table import build_records_table, build_stat_cards

if TYPE_CHECKING:
    from openspace_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_input(controller: ViewController, triggered: Any, value: Any) -> None:
    """
    Route one fired input of an entity tab to its controller.

    `value` is the new value of the property that fired (a click count,
    the query, the page size or the 1-based active page). A controller that
    is still IDLE is loaded first whatever fired: a fresh tab, or a session
    rebuilt after it was evicted from the session cache.

    :raises PreventUpdate: for echoes, empty clicks and rejected inputs
    """
    key = controller.profile.key

    def eid(suffix: str) -> str:
        return entity_id(key, suffix)

    if controller.status is LoadStatus.IDLE:
        run_async(controller.load())

    if triggered is None or triggered == IDs.Store.SESSION_ID:
        # first render for this tab / browser reload
        return

    if triggered == eid(IDs.Entity.REFRESH_BTN):
        run_async(controller.reload())

    elif triggered == eid(IDs.Entity.SEARCH):
        controller.set_query(value)

    elif triggered == eid(IDs.Entity.PAGE_SIZE):
        if not value:
            raise exceptions.PreventUpdate
        controller.set_page_size(int(value))

    elif triggered == eid(IDs.Entity.PAGINATION):
        # the render callback writes active_page back; ignore the echo
        if not value or value - 1 == controller.page_state.page:
            raise exceptions.PreventUpdate
        controller.set_page(value - 1)

    elif isinstance(triggered, dict):
        # pattern buttons re-rendered with n_clicks=None still fire
        if not value:
            raise exceptions.PreventUpdate
        pattern = triggered.get("type")
        index = triggered.get("index")
        try:
            if pattern == IDs.Pattern.CATEGORY:
                controller.set_category(index)
            elif pattern == IDs.Pattern.RESOLVE:
                controller.resolve(index)
            elif pattern == IDs.Pattern.UNRESOLVE:
                controller.unresolve(index)
            else:
                raise exceptions.PreventUpdate
        except OpenSpaceAdminError:
            logger.exception("Rejected input", extra={"entity": key, "trigger": triggered})
            raise exceptions.PreventUpdate

    else:
        raise exceptions.PreventUpdate


def register_records_callbacks(app: dash.Dash, ctx: AppConfig, profile: EntityProfile) -> None:
    """
    Wire one entity tab to its per-session ViewController.

    Inputs only touch the controller and bump the tab's view-version store;
    a separate render callback turns the controller's DerivedView into
    components. Keeping them apart means every render sees one complete view.
    """
    key = profile.key

    def eid(suffix: str) -> str:
        return entity_id(key, suffix)

    category_pattern = {"type": IDs.Pattern.CATEGORY, "entity": key, "index": ALL}

    inputs = dict(
        session_id=Input(IDs.Store.SESSION_ID, "data"),
        refresh=Input(eid(IDs.Entity.REFRESH_BTN), "n_clicks"),
        categories=Input(category_pattern, "n_clicks"),
        query=Input(eid(IDs.Entity.SEARCH), "value"),
        active_page=Input(eid(IDs.Entity.PAGINATION), "active_page"),
        page_size=Input(eid(IDs.Entity.PAGE_SIZE), "value"),
    )
    if profile.mutable_flag is not None:
        inputs["resolve"] = Input({"type": IDs.Pattern.RESOLVE, "entity": key, "index": ALL}, "n_clicks")
        inputs["unresolve"] = Input({"type": IDs.Pattern.UNRESOLVE, "entity": key, "index": ALL}, "n_clicks")

    # ---------------------------------------------------------
    # User input -> controller
    # ---------------------------------------------------------
    @app.callback(
        output=Output(eid(IDs.Entity.VIEW_VERSION), "data"),
        inputs=inputs,
        state=dict(version=State(eid(IDs.Entity.VIEW_VERSION), "data")),
    )
    def handle_input(session_id, version, **_inputs):
        controller = session_or_prevent(ctx, session_id).controller(key)
        apply_input(controller, dash.ctx.triggered_id, triggered_value())
        return (version or 0) + 1

    # ---------------------------------------------------------
    # Controller view -> components
    # ---------------------------------------------------------
    @app.callback(
        Output(eid(IDs.Entity.STATS), "children"),
        Output(category_pattern, "outline"),
        Output(eid(IDs.Entity.TABLE), "children"),
        Output(eid(IDs.Entity.PAGINATION), "max_value"),
        Output(eid(IDs.Entity.PAGINATION), "active_page"),
        Output(eid(IDs.Entity.RANGE_TEXT), "children"),
        Output(eid(IDs.Entity.ALERT), "children"),
        Output(eid(IDs.Entity.ALERT), "is_open"),
        Input(eid(IDs.Entity.VIEW_VERSION), "data"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def render_view(_version, session_id):
        session = session_or_prevent(ctx, session_id)
        view = session.controller(key).view()

        outlines = [c.value != view.filter_state.category for c in profile.categories]

        if view.status is LoadStatus.FAILED:
            alert = [
                html.Strong("Load failed. "),
                view.error or "Unknown error.",
                " Use Refresh to try again.",
            ]
            alert_open = True
        else:
            alert = None
            alert_open = False

        return (
            build_stat_cards(view, profile),
            outlines,
            build_records_table(view, profile),
            view.page_count,
            view.page_state.page + 1,
            view.range_label,
            alert,
            alert_open,
        )

    # ---------------------------------------------------------
    # Export filtered collection (all pages)
    # ---------------------------------------------------------
    @app.callback(
        Output(eid(IDs.Entity.DOWNLOAD), "data"),
        Input(eid(IDs.Entity.EXPORT_BTN), "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def export_view(n_clicks, session_id):
        if not n_clicks:
            raise exceptions.PreventUpdate

        view = session_or_prevent(ctx, session_id).controller(key).view()
        if view.status is not LoadStatus.READY:
            raise exceptions.PreventUpdate

        csv_text = export_records_csv(view.filtered, profile)
        logger.info(
            "Exported records",
            extra={"entity": key, "n_records": view.filtered_count, "category": view.filter_state.category},
        )
        return dcc.send_string(csv_text, export_filename(profile, view.filter_state.category))

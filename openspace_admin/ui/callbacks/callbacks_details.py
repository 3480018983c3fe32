from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, exceptions, no_update

from openspace_admin.core.profiles import REPORTS
from openspace_admin.ui.helpers import require_click, session_or_prevent
from openspace_admin.ui.ids import IDs
from openspace_admin.ui.layout.build_detail_modals import build_location_details, build_report_details

if TYPE_CHECKING:
    from openspace_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_detail_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Report details (read-only)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.DETAIL_MODAL, "is_open"),
        Output(IDs.Control.DETAIL_MODAL_BODY, "children"),
        Input({"type": IDs.Pattern.DETAILS, "entity": ALL, "index": ALL}, "n_clicks"),
        Input(IDs.Control.DETAIL_MODAL_CLOSE, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def toggle_detail_modal(_detail_clicks, _close_clicks, session_id):
        triggered = dash.ctx.triggered_id
        if triggered == IDs.Control.DETAIL_MODAL_CLOSE:
            return False, no_update

        if not isinstance(triggered, dict):
            raise exceptions.PreventUpdate
        require_click()

        if triggered.get("entity") != REPORTS.key:
            raise exceptions.PreventUpdate

        record = session_or_prevent(ctx, session_id).controller(REPORTS.key).record(triggered.get("index"))
        if record is None:
            logger.warning("Details requested for unknown report", extra={"record_id": triggered.get("index")})
            raise exceptions.PreventUpdate

        return True, build_report_details(record)

    # ---------------------------------------------------------
    # Location details (any entity)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.LOCATION_MODAL, "is_open"),
        Output(IDs.Control.LOCATION_MODAL_BODY, "children"),
        Input({"type": IDs.Pattern.LOCATION, "entity": ALL, "index": ALL}, "n_clicks"),
        Input(IDs.Control.LOCATION_MODAL_CLOSE, "n_clicks"),
        State(IDs.Store.SESSION_ID, "data"),
        prevent_initial_call=True,
    )
    def toggle_location_modal(_location_clicks, _close_clicks, session_id):
        triggered = dash.ctx.triggered_id
        if triggered == IDs.Control.LOCATION_MODAL_CLOSE:
            return False, no_update

        if not isinstance(triggered, dict):
            raise exceptions.PreventUpdate
        require_click()

        session = session_or_prevent(ctx, session_id)
        try:
            controller = session.controller(triggered.get("entity"))
        except KeyError:
            raise exceptions.PreventUpdate

        record = controller.record(triggered.get("index"))
        if record is None:
            raise exceptions.PreventUpdate

        return True, build_location_details(record)

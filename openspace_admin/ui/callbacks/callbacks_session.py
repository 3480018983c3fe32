from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, exceptions

from openspace_admin.services.session_service import new_session_id
from openspace_admin.ui.ids import IDs

if TYPE_CHECKING:
    from openspace_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_session_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Assign a session id to each browser tab (once)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SESSION_ID, "data"),
        Input(IDs.Store.SESSION_ID, "modified_timestamp"),
        State(IDs.Store.SESSION_ID, "data"),
    )
    def ensure_session_id(_ts, session_id):
        if session_id:
            raise exceptions.PreventUpdate
        session_id = new_session_id()
        ctx.sessions.get_or_create(session_id)
        logger.info("Assigned browser session", extra={"session_id": session_id})
        return session_id

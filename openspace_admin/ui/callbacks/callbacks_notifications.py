from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output, html

from openspace_admin.services.notification_service import NotificationInbox
from openspace_admin.ui.helpers import require_click, session_or_prevent
from openspace_admin.ui.ids import IDs, pattern_id

if TYPE_CHECKING:
    from openspace_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)

INBOX_KEY = "inbox"

TYPE_COLORS = {
    "warning": "warning",
    "success": "success",
    "info": "info",
}


def build_notification_items(inbox: NotificationInbox):
    if not inbox.items:
        return html.Div("No notifications", className="text-muted small px-3 py-2")

    items = []
    for n in inbox.items:
        items.append(
            dbc.DropdownMenuItem(
                html.Div(
                    [
                        html.Div(
                            [
                                dbc.Badge(n.type, color=TYPE_COLORS.get(n.type, "secondary"), className="me-2"),
                                html.Span(n.title, className="fw-semibold" if not n.is_read else ""),
                            ]
                        ),
                        html.Div(n.message, className="small"),
                        html.Div(n.timestamp, className="text-muted small"),
                    ],
                    className="osa-notification" + ("" if n.is_read else " osa-notification-unread"),
                ),
                id=pattern_id(IDs.Pattern.NOTIFICATION_ITEM, INBOX_KEY, n.id),
                toggle=False,
            )
        )
    return items


def menu_label(inbox: NotificationInbox) -> str:
    unread = inbox.unread_count
    return f"Notifications ({unread})" if unread else "Notifications"


def register_notification_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Render inbox / mark one / mark all
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.NOTIFICATIONS_LIST, "children"),
        Output(IDs.Control.NOTIFICATIONS_MENU, "label"),
        Input(IDs.Store.SESSION_ID, "data"),
        Input({"type": IDs.Pattern.NOTIFICATION_ITEM, "entity": INBOX_KEY, "index": ALL}, "n_clicks"),
        Input(IDs.Control.NOTIFICATIONS_MARK_ALL, "n_clicks"),
    )
    def update_inbox(session_id, _item_clicks, _mark_all_clicks):
        session = session_or_prevent(ctx, session_id)
        inbox = session.inbox
        triggered = dash.ctx.triggered_id

        if triggered == IDs.Control.NOTIFICATIONS_MARK_ALL:
            require_click()
            inbox.mark_all_read()
        elif isinstance(triggered, dict):
            require_click()
            inbox.mark_read(triggered.get("index"))

        return build_notification_items(inbox), menu_label(inbox)

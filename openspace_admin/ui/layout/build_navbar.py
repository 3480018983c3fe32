from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from openspace_admin.config.model import GlobalConfig
from openspace_admin.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    notifications = dbc.DropdownMenu(
        id=IDs.Control.NOTIFICATIONS_MENU,
        label="Notifications",
        align_end=True,
        color="light",
        children=[
            dbc.DropdownMenuItem("Notifications", header=True),
            # populated by callback
            html.Div(id=IDs.Control.NOTIFICATIONS_LIST, style={"minWidth": "340px"}),
            dbc.DropdownMenuItem(divider=True),
            dbc.DropdownMenuItem("Mark all as read", id=IDs.Control.NOTIFICATIONS_MARK_ALL),
        ],
    )

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(
                            global_config.subtitle,
                            className="text-muted",
                            id="navbar-subtitle",
                        ),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),

                # Right: inbox + avatar
                html.Div(
                    [
                        notifications,
                        html.Span(
                            "A",
                            title="Admin User (admin@example.com)",
                            className="osa-avatar ms-3",
                        ),
                    ],
                    className="ms-auto d-flex align-items-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm osa-navbar",
    )

from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc

from openspace_admin.ui.config import AppConfig
from openspace_admin.ui.ids import IDs
from openspace_admin.ui.layout.build_detail_modals import build_detail_modals
from openspace_admin.ui.layout.build_navbar import build_navbar
from openspace_admin.ui.layout.build_records_panel import build_records_panel


def build_layout(ctx: AppConfig) -> dbc.Container:
    profiles = ctx.registry.all_profiles()

    return dbc.Container(
        fluid=True,
        className="osa-root",
        children=[
            build_navbar(ctx.global_config),

            # App-level stores
            dcc.Store(id=IDs.Store.SESSION_ID, storage_type="session"),

            dcc.Tabs(
                id=IDs.Control.PAGE_TABS,
                value=profiles[0].key if profiles else None,
                children=[
                    dcc.Tab(
                        label=p.label,
                        value=p.key,
                        children=[build_records_panel(p, ctx.global_config)],
                    )
                    for p in profiles
                ],
                className="mt-2",
            ),

            build_detail_modals(),
        ],
    )

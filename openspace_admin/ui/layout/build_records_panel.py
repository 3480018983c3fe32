from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from openspace_admin.config.model import GlobalConfig
from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.ui.ids import IDs, entity_id, pattern_id
from openspace_admin.ui.layout.build_records_table import CATEGORY_COLORS


def build_records_panel(profile: EntityProfile, global_config: GlobalConfig) -> html.Div:
    """
    One entity tab:
    - summary tiles over the whole collection (populated via callback)
    - category chips, search box, refresh + CSV export
    - the current page of the filtered collection
    - pager and rows-per-page selector
    """
    key = profile.key

    def eid(suffix: str) -> str:
        return entity_id(key, suffix)

    # -- 1. Category chips --
    chips = html.Div(
        [
            dbc.Button(
                c.label,
                id=pattern_id(IDs.Pattern.CATEGORY, key, c.value),
                color=CATEGORY_COLORS.get(c.value, "primary"),
                outline=not c.is_all,
                size="sm",
                className="rounded-pill me-2",
            )
            for c in profile.categories
        ],
        className="d-flex align-items-center",
    )

    # -- 2. Toolbar: chips (left), search + actions (right) --
    toolbar = dbc.Card(
        dbc.CardBody(
            dbc.Row(
                [
                    dbc.Col(
                        html.Div(
                            [html.H5(profile.label, className="mb-0 me-3"), chips],
                            className="d-flex align-items-center",
                        ),
                        md=6,
                    ),
                    dbc.Col(
                        html.Div(
                            [
                                dbc.Input(
                                    id=eid(IDs.Entity.SEARCH),
                                    type="search",
                                    placeholder=f"Search {profile.label.lower()}...",
                                    debounce=True,
                                    size="sm",
                                    className="me-2",
                                ),
                                dbc.Button(
                                    "Refresh",
                                    id=eid(IDs.Entity.REFRESH_BTN),
                                    color="secondary",
                                    size="sm",
                                    className="me-2",
                                ),
                                dbc.Button(
                                    "Export CSV",
                                    id=eid(IDs.Entity.EXPORT_BTN),
                                    color="primary",
                                    size="sm",
                                ),
                                dcc.Download(id=eid(IDs.Entity.DOWNLOAD)),
                            ],
                            className="d-flex justify-content-end align-items-center",
                        ),
                        md=6,
                    ),
                ],
                className="align-items-center",
            )
        ),
        className="shadow-sm mb-3",
    )

    # -- 3. Table + pager --
    page_size_options = [{"label": str(n), "value": n} for n in global_config.page_size_options]

    table_card = dbc.Card(
        [
            dbc.CardBody(
                dcc.Loading(
                    id=eid(IDs.Entity.LOADING),
                    type="default",
                    children=[
                        # bumped by the input callback; being inside the Loading
                        # wrapper makes the spinner cover in-flight loads
                        dcc.Store(id=eid(IDs.Entity.VIEW_VERSION), data=0),
                        html.Div(id=eid(IDs.Entity.TABLE), style={"overflowX": "auto"}),
                    ],
                ),
                className="p-0",
            ),
            dbc.CardFooter(
                html.Div(
                    [
                        html.Span("Rows per page", className="small text-muted me-2"),
                        dcc.Dropdown(
                            id=eid(IDs.Entity.PAGE_SIZE),
                            options=page_size_options,
                            value=global_config.default_page_size,
                            clearable=False,
                            style={"width": "90px"},
                            className="me-3",
                        ),
                        html.Span(id=eid(IDs.Entity.RANGE_TEXT), className="small text-muted me-3"),
                        dbc.Pagination(
                            id=eid(IDs.Entity.PAGINATION),
                            max_value=1,
                            active_page=1,
                            fully_expanded=False,
                            size="sm",
                            className="mb-0",
                        ),
                    ],
                    className="d-flex justify-content-end align-items-center",
                )
            ),
        ],
        className="shadow-sm",
    )

    return html.Div(
        [
            html.Div(id=eid(IDs.Entity.STATS)),
            toolbar,
            dbc.Alert(id=eid(IDs.Entity.ALERT), color="danger", is_open=False, className="mb-3"),
            table_card,
        ],
        className="mt-3",
    )

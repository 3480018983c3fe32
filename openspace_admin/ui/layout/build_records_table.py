from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import dash_bootstrap_components as dbc
from dash import html

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.profiles import OPEN_SPACES, REPORTS
from openspace_admin.core.records import OpenSpace, OpenSpaceStatus, Report
from openspace_admin.core.view_controller import DerivedView
from openspace_admin.ui.ids import IDs, pattern_id

CATEGORY_COLORS: Dict[str, str] = {
    "all": "primary",
    "resolved": "success",
    "pending": "warning",
    "active": "success",
    "inactive": "secondary",
}

STATUS_COLORS: Dict[OpenSpaceStatus, str] = {
    OpenSpaceStatus.ACTIVE: "success",
    OpenSpaceStatus.INACTIVE: "secondary",
    OpenSpaceStatus.UNDER_MAINTENANCE: "warning",
}


@dataclass(frozen=True)
class TableSpec:
    headers: List[str]
    cells: Callable[[Any], List[Any]]


def resolution_badge(is_resolved: bool) -> dbc.Badge:
    if is_resolved:
        return dbc.Badge("Resolved", color="success", pill=True)
    return dbc.Badge("Pending", color="warning", pill=True)


def _location_cell(entity_key: str, record: Any) -> html.Div:
    return html.Div(
        [
            dbc.Button(
                "Map",
                id=pattern_id(IDs.Pattern.LOCATION, entity_key, record.id),
                color="link",
                size="sm",
                className="p-0 me-2",
                title="View Location Details",
            ),
            f"{record.latitude}, {record.longitude}",
        ],
        className="d-flex align-items-center",
    )


def _report_cells(report: Report) -> List[Any]:
    if report.is_resolved:
        toggle = dbc.Button(
            "Undo",
            id=pattern_id(IDs.Pattern.UNRESOLVE, REPORTS.key, report.id),
            color="warning",
            outline=True,
            size="sm",
            title="Mark as Pending",
        )
    else:
        toggle = dbc.Button(
            "Resolve",
            id=pattern_id(IDs.Pattern.RESOLVE, REPORTS.key, report.id),
            color="success",
            outline=True,
            size="sm",
            title="Mark as Resolved",
        )

    actions = html.Div(
        [
            dbc.Button(
                "View",
                id=pattern_id(IDs.Pattern.DETAILS, REPORTS.key, report.id),
                color="secondary",
                outline=True,
                size="sm",
                className="me-1",
            ),
            toggle,
        ],
        className="d-flex justify-content-end",
    )

    return [
        report.open_space_name,
        report.street,
        report.reporter_name,
        _location_cell(REPORTS.key, report),
        report.description,
        resolution_badge(report.is_resolved),
        actions,
    ]


def _open_space_cells(space: OpenSpace) -> List[Any]:
    return [
        space.name,
        space.address,
        _location_cell(OPEN_SPACES.key, space),
        dbc.Badge(space.status.value, color=STATUS_COLORS.get(space.status, "secondary"), pill=True),
    ]


TABLE_SPECS: Dict[str, TableSpec] = {
    REPORTS.key: TableSpec(
        headers=["Open Space", "Street", "Reporter", "Location", "Description", "Status", "Actions"],
        cells=_report_cells,
    ),
    OPEN_SPACES.key: TableSpec(
        headers=["Name", "Address", "Location", "Status"],
        cells=_open_space_cells,
    ),
}


def build_records_table(view: DerivedView, profile: EntityProfile):
    """
    Table for the current page slice, or a placeholder while loading / when
    nothing matches.
    """
    if view.is_loading:
        return html.Div("Loading...", className="text-center py-4")

    if not view.page_records:
        return html.Div(
            f"No {profile.label.lower()} match the current filter.",
            className="text-muted text-center py-4",
        )

    spec = TABLE_SPECS[profile.key]
    header = html.Thead(html.Tr([html.Th(h) for h in spec.headers]))
    body = html.Tbody(
        [
            html.Tr([html.Td(cell) for cell in spec.cells(record)], key=str(record.id))
            for record in view.page_records
        ]
    )

    return dbc.Table(
        [header, body],
        bordered=False,
        hover=True,
        responsive=True,
        striped=True,
        className="osa-records-table align-middle mb-0",
    )


def build_stat_cards(view: DerivedView, profile: EntityProfile) -> dbc.Row:
    summary = view.summary
    tiles = [(f"Total {profile.label}", summary.total, "primary")]
    tiles += [
        (c.label, summary[c.value], CATEGORY_COLORS.get(c.value, "primary"))
        for c in profile.partitions
    ]

    return dbc.Row(
        [
            dbc.Col(
                dbc.Card(
                    dbc.CardBody(
                        [
                            html.Div(title.upper(), className="text-muted small"),
                            html.H3(str(value), className=f"text-{color} mb-0"),
                        ]
                    ),
                    className="shadow-sm",
                ),
                md=4,
            )
            for title, value, color in tiles
        ],
        className="g-3 mb-3",
    )

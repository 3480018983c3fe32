from __future__ import annotations

from typing import Any

import dash_bootstrap_components as dbc
from dash import html

from openspace_admin.core.records import Report
from openspace_admin.ui.ids import IDs
from openspace_admin.ui.layout.build_records_table import resolution_badge


def build_detail_modals() -> html.Div:
    return html.Div(
        [
            dbc.Modal(
                [
                    dbc.ModalHeader(dbc.ModalTitle("Report Details", id=IDs.Control.DETAIL_MODAL_TITLE)),
                    dbc.ModalBody(id=IDs.Control.DETAIL_MODAL_BODY),
                    dbc.ModalFooter(dbc.Button("Close", id=IDs.Control.DETAIL_MODAL_CLOSE, size="sm")),
                ],
                id=IDs.Control.DETAIL_MODAL,
                size="lg",
                scrollable=True,
                is_open=False,
            ),
            dbc.Modal(
                [
                    dbc.ModalHeader(dbc.ModalTitle("Location Details")),
                    dbc.ModalBody(id=IDs.Control.LOCATION_MODAL_BODY),
                    dbc.ModalFooter(dbc.Button("Close", id=IDs.Control.LOCATION_MODAL_CLOSE, size="sm")),
                ],
                id=IDs.Control.LOCATION_MODAL,
                is_open=False,
            ),
        ]
    )


def _field(label: str, value: Any) -> html.P:
    return html.P([html.Strong(f"{label}: "), value], className="mb-1")


def build_report_details(report: Report) -> html.Div:
    date_text = report.date_reported.strftime("%Y-%m-%d") if report.date_reported else "Unknown"

    children = [
        _field("Open Space", report.open_space_name),
        _field("Street", report.street),
        _field("Reporter", report.reporter_name),
        _field("Description", report.description),
        _field("Status", resolution_badge(report.is_resolved)),
        _field("Date", date_text),
    ]

    if report.photos:
        children.append(html.H6("Photos:", className="mt-3"))
        children.append(
            dbc.Row(
                [
                    dbc.Col(
                        html.Img(
                            src=photo,
                            alt=f"Report {i + 1}",
                            style={"width": "100%", "borderRadius": "4px"},
                        ),
                        xs=6,
                        md=4,
                        className="mb-2",
                    )
                    for i, photo in enumerate(report.photos)
                ],
                className="g-2",
            )
        )

    return html.Div(children)


def build_location_details(record: Any) -> html.Div:
    # reports carry open_space_name/street, registry entries name/address
    name = getattr(record, "open_space_name", None) or getattr(record, "name", "")
    address = getattr(record, "street", None) or getattr(record, "address", "")
    return html.Div(
        [
            _field("Location", name),
            _field("Address", address),
            _field("Coordinates", f"{record.latitude}, {record.longitude}"),
        ]
    )

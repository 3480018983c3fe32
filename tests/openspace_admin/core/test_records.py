from __future__ import annotations

from datetime import datetime, timezone

import pytest

from openspace_admin.core.records import OpenSpace, OpenSpaceStatus, Report


def test_report_from_dict_parses_utc_timestamp_and_defaults():
    report = Report.from_dict(
        {
            "id": 7,
            "open_space_name": "City Park",
            "street": "Park Avenue",
            "reporter_name": "John Doe",
            "latitude": 34.0522,
            "longitude": -118.2437,
            "description": "Dumping",
            "date_reported": "2024-07-25T10:00:00Z",
        }
    )

    assert report.is_resolved is False
    assert report.photos == []
    assert report.date_reported == datetime(2024, 7, 25, 10, 0, tzinfo=timezone.utc)


def test_report_to_dict_roundtrip():
    report = Report(
        id=1,
        open_space_name="A",
        street="B",
        reporter_name="C",
        latitude=1.5,
        longitude=-2.5,
        description="D",
        is_resolved=True,
        photos=["p1"],
        date_reported=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )
    assert Report.from_dict(report.to_dict()) == report


def test_geolocation_is_not_range_checked():
    report = Report.from_dict(
        {"id": 1, "open_space_name": "X", "street": "", "reporter_name": "", "latitude": 999, "longitude": -999, "description": ""}
    )
    assert (report.latitude, report.longitude) == (999.0, -999.0)


def test_open_space_accepts_short_coordinate_keys():
    space = OpenSpace.from_dict(
        {"id": 5, "name": "Central Plaza", "address": "202 Plaza Blvd", "lat": 34.0555, "lng": -118.2475, "status": "Under Maintenance"}
    )
    assert space.status is OpenSpaceStatus.UNDER_MAINTENANCE
    assert space.latitude == 34.0555
    assert space.to_dict()["status"] == "Under Maintenance"


def test_open_space_rejects_unknown_status():
    with pytest.raises(ValueError):
        OpenSpace.from_dict({"id": 1, "name": "X", "address": "Y", "lat": 0, "lng": 0, "status": "Closed"})


def test_open_space_is_immutable():
    space = OpenSpace(id=1, name="X", address="Y", latitude=0.0, longitude=0.0, status=OpenSpaceStatus.ACTIVE)
    with pytest.raises(Exception):
        space.status = OpenSpaceStatus.INACTIVE


def test_report_keeps_malformed_coordinates_as_given():
    report = Report.from_dict(
        {"id": 1, "open_space_name": "X", "street": "", "reporter_name": "", "latitude": "n/a", "longitude": None, "description": ""}
    )
    assert report.latitude == "n/a"
    assert report.longitude is None


def test_missing_coordinates_default_to_none():
    report = Report.from_dict({"id": 1, "open_space_name": "X"})
    space = OpenSpace.from_dict({"id": 2, "name": "Y", "status": "Active"})
    assert (report.latitude, report.longitude) == (None, None)
    assert (space.latitude, space.longitude) == (None, None)


def test_numeric_string_coordinates_are_converted():
    space = OpenSpace.from_dict({"id": 2, "name": "Y", "lat": "34.05", "lng": "-118.24", "status": "Active"})
    assert (space.latitude, space.longitude) == (34.05, -118.24)


@pytest.mark.parametrize("flag", ["false", "true", 0, 1])
def test_report_rejects_non_boolean_resolution_flag(flag):
    with pytest.raises(ValueError, match="is_resolved"):
        Report.from_dict({"id": 1, "open_space_name": "X", "is_resolved": flag})


def test_report_null_resolution_flag_means_pending():
    assert Report.from_dict({"id": 1, "is_resolved": None}).is_resolved is False

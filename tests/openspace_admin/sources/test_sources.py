import asyncio
import json

import pytest

from openspace_admin.config.model import SourceConfig
from openspace_admin.core.exceptions import ConfigError, RecordSchemaError
from openspace_admin.core.profiles import OPEN_SPACES, REPORTS
from openspace_admin.core.records import OpenSpace, OpenSpaceStatus, Report
from openspace_admin.sources import FixtureSource, JsonFileSource, build_source
from openspace_admin.validation import ValidationError


def test_fixture_source_returns_typed_records():
    reports = asyncio.run(FixtureSource(REPORTS).fetch())
    spaces = asyncio.run(FixtureSource(OPEN_SPACES).fetch())

    assert all(isinstance(r, Report) for r in reports)
    assert [r.id for r in reports] == [1, 2, 3]
    assert all(isinstance(s, OpenSpace) for s in spaces)
    assert spaces[4].status is OpenSpaceStatus.UNDER_MAINTENANCE


def test_fixture_source_returns_fresh_objects_each_fetch():
    source = FixtureSource(REPORTS)
    first = source.read_records()
    first[0].is_resolved = True

    second = source.read_records()
    assert second[0].is_resolved is False


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        FixtureSource(REPORTS, delay_seconds=-0.5)


def test_fixture_source_reports_every_bad_item():
    raw = [
        "not a dict",
        {"id": 1, "name": "A", "address": "a", "lat": 0, "lng": 0, "status": "Closed"},
        {"id": 2, "name": "B", "address": "b", "lat": 0, "lng": 0},
    ]
    with pytest.raises(ValidationError) as exc:
        FixtureSource(OPEN_SPACES, raw_items=raw).read_records()

    codes = [i.code for i in exc.value.issues]
    assert codes == ["RECORD_NOT_OBJECT", "RECORD_BAD_VALUE", "RECORD_MISSING_FIELD"]


def test_json_file_source_reads_array(tmp_path):
    path = tmp_path / "open_spaces.json"
    path.write_text(json.dumps([
        {"id": "os-1", "name": "Dock", "address": "1 Quay", "latitude": 1.5, "longitude": 2.5, "status": "Inactive"},
    ]))

    records = asyncio.run(JsonFileSource(OPEN_SPACES, path).fetch())
    assert records == [
        OpenSpace(id="os-1", name="Dock", address="1 Quay", latitude=1.5, longitude=2.5,
                  status=OpenSpaceStatus.INACTIVE),
    ]


def test_json_file_source_rejects_non_array(tmp_path):
    path = tmp_path / "reports.json"
    path.write_text(json.dumps({"reports": []}))
    with pytest.raises(RecordSchemaError):
        JsonFileSource(REPORTS, path).read_records()


def test_build_source_defaults_to_fixtures():
    source = build_source(None, REPORTS, delay_seconds=0.25)
    assert isinstance(source, FixtureSource)
    assert source.delay_seconds == 0.25


def test_build_source_json(tmp_path):
    source = build_source(SourceConfig(type="json", path=tmp_path / "x.json"), REPORTS, delay_seconds=0)
    assert isinstance(source, JsonFileSource)
    assert source.path == tmp_path / "x.json"


@pytest.mark.parametrize("cfg", [SourceConfig(type="json"), SourceConfig(type="sql")])
def test_build_source_errors(cfg):
    with pytest.raises(ConfigError):
        build_source(cfg, REPORTS, delay_seconds=0)

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.exceptions import RecordSchemaError
from openspace_admin.sources.base import RecordSource
from openspace_admin.validation.record_validation import parse_records

logger = logging.getLogger(__name__)


class JsonFileSource(RecordSource):
    """
    Reads a JSON array of record objects, e.g.:

    [
      {"id": 1, "name": "City Park", "address": "123 Park Ave",
       "lat": 34.0522, "lng": -118.2437, "status": "Active"}
    ]

    The file is re-read on every fetch, so a reload picks up edits.
    """

    id = "json"

    def __init__(self, profile: EntityProfile, path: Path, delay_seconds: float = 0.0):
        super().__init__(profile, delay_seconds)
        self.path = Path(path)

    def read_records(self) -> List[Any]:
        logger.info(
            "Reading records from JSON",
            extra={"entity": self.profile.key, "path": str(self.path)},
        )
        with self.path.open(encoding="utf-8") as f:
            raw = json.load(f)

        if not isinstance(raw, list):
            raise RecordSchemaError(
                f"{self.path}: expected a JSON array of records, got {type(raw).__name__}"
            )
        return parse_records(raw, self.profile)

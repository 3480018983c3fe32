from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.sources.base import RecordSource
from openspace_admin.sources.fixture_data import BY_ENTITY
from openspace_admin.validation.record_validation import parse_records


class FixtureSource(RecordSource):
    """
    Serves a hardcoded collection after a fixed delay.

    Each fetch builds fresh record objects, so a reload discards any
    resolve/unresolve changes made to the previous collection.
    """

    id = "fixtures"

    def __init__(
        self,
        profile: EntityProfile,
        delay_seconds: float = 0.0,
        raw_items: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(profile, delay_seconds)
        if raw_items is None:
            try:
                raw_items = BY_ENTITY[profile.key]
            except KeyError:
                raise KeyError(f"No built-in fixtures for entity '{profile.key}'")
        self._raw_items = raw_items

    def read_records(self) -> List[Any]:
        return parse_records(copy.deepcopy(self._raw_items), self.profile)

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, List

from openspace_admin.core.entity_profile import EntityProfile


class RecordSource(ABC):
    """
    Supplies the full record collection for one entity type

    Every call to `fetch()` resolves once with a finite, fully
    materialised list of fresh record objects. Sources may fail by raising;
    the store turns that into a FAILED view.
    """

    id: str

    def __init__(self, profile: EntityProfile, delay_seconds: float = 0.0):
        if delay_seconds < 0:
            raise ValueError(f"delay_seconds must be >= 0, got {delay_seconds}")
        self.profile = profile
        self.delay_seconds = delay_seconds

    async def fetch(self) -> List[Any]:
        # models network latency
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        return self.read_records()

    @abstractmethod
    def read_records(self) -> List[Any]:
        """
        Produce the typed records
        :raises RecordSchemaError: if the raw data can't be turned into records
        """
        raise NotImplementedError

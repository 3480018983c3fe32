from __future__ import annotations

import copy
import logging
from typing import Any, List, Optional, Tuple

from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.exceptions import RecordLoadError, UnsupportedMutationError
from openspace_admin.core.records import RecordId
from openspace_admin.core.state import LoadStatus
from openspace_admin.sources.base import RecordSource
from openspace_admin.validation.record_validation import validate_collection

logger = logging.getLogger(__name__)


class RecordStore:
    """
    Authoritative in-memory collection for one entity type.

    Loads replace the collection wholesale. Every load gets a sequence
    number and only the most recent one is allowed to commit, so an older
    load finishing late never overwrites a newer result.
    """

    def __init__(self, profile: EntityProfile, source: RecordSource):
        self.profile = profile
        self._source = source
        self._records: List[Any] = []
        self._status = LoadStatus.IDLE
        self._error: Optional[str] = None
        self._load_seq = 0

    @property
    def status(self) -> LoadStatus:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def records(self) -> Tuple[Any, ...]:
        # copies, so a snapshot taken before a mutation keeps its values
        return tuple(copy.copy(r) for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    async def load(self) -> Tuple[Any, ...]:
        """
        Fetch a fresh collection from the source and make it current.

        :return: the current collection once this load has finished (which is
                 a newer load's result if this one was superseded)
        :raises RecordLoadError: if the source fails and no newer load is pending
        """
        self._load_seq += 1
        token = self._load_seq
        self._status = LoadStatus.LOADING
        logger.info(
            "Loading records",
            extra={"entity": self.profile.key, "source": self._source.id, "load_seq": token},
        )

        try:
            records = list(await self._source.fetch())
            validate_collection(records)
        except Exception as e:
            if token != self._load_seq:
                logger.debug(
                    "Superseded load failed; ignoring",
                    extra={"entity": self.profile.key, "load_seq": token, "error": str(e)},
                )
                return self.records
            self._status = LoadStatus.FAILED
            self._error = str(e)
            logger.error(
                "Record load failed",
                extra={"entity": self.profile.key, "source": self._source.id, "error": str(e)},
            )
            raise RecordLoadError(f"Could not load {self.profile.label.lower()}: {e}") from e

        if token != self._load_seq:
            logger.debug(
                "Superseded load finished; discarding result",
                extra={"entity": self.profile.key, "load_seq": token},
            )
            return self.records

        self._records = records
        self._status = LoadStatus.READY
        self._error = None
        logger.info(
            "Records loaded",
            extra={"entity": self.profile.key, "n_records": len(records), "load_seq": token},
        )
        return self.records

    def get(self, record_id: RecordId) -> Optional[Any]:
        for r in self._records:
            if r.id == record_id:
                return r
        return None

    def set_resolution_flag(self, record_id: RecordId, value: bool) -> None:
        """
        Set the profile's mutable flag on the record with `record_id`.

        Unknown ids are ignored.

        :raises UnsupportedMutationError: if the entity type has no mutable flag
        """
        flag = self.profile.mutable_flag
        if flag is None:
            raise UnsupportedMutationError(f"{self.profile.label} records cannot be modified")

        record = self.get(record_id)
        if record is None:
            logger.debug(
                "Mutation for unknown id ignored",
                extra={"entity": self.profile.key, "record_id": record_id},
            )
            return

        setattr(record, flag, bool(value))
        logger.info(
            "Record updated",
            extra={"entity": self.profile.key, "record_id": record_id, flag: bool(value)},
        )

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

RecordId = Union[int, str]


class OpenSpaceStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    UNDER_MAINTENANCE = "Under Maintenance"


def _coordinate(value: Any) -> Any:
    """Float when the value converts, otherwise the raw value (None if absent)."""
    if value is None or isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def _flag(data: Dict[str, Any], name: str) -> bool:
    value = data.get(name)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    # fromisoformat() only accepts a trailing 'Z' from 3.11 onwards
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass
class Report:
    """
    A report of illegal use of an open space.

    Only `is_resolved` is ever changed after load; everything else is
    rendered exactly as received. Non-numeric coordinates are kept as given.
    """

    id: RecordId
    open_space_name: str
    street: str
    reporter_name: str
    latitude: Any
    longitude: Any
    description: str
    is_resolved: bool = False
    photos: List[str] = field(default_factory=list)
    date_reported: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date_reported"] = self.date_reported.isoformat() if self.date_reported else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Report:
        return cls(
            id=data["id"],
            open_space_name=data.get("open_space_name") or "",
            street=data.get("street") or "",
            reporter_name=data.get("reporter_name") or "",
            latitude=_coordinate(data.get("latitude")),
            longitude=_coordinate(data.get("longitude")),
            description=data.get("description") or "",
            is_resolved=_flag(data, "is_resolved"),
            photos=list(data.get("photos") or []),
            date_reported=_parse_timestamp(data.get("date_reported")),
        )


@dataclass(frozen=True)
class OpenSpace:
    """An entry in the open-space registry."""

    id: RecordId
    name: str
    address: str
    latitude: Any
    longitude: Any
    status: OpenSpaceStatus

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OpenSpace:
        # registry exports use the short "lat"/"lng" keys
        lat = data["latitude"] if "latitude" in data else data.get("lat")
        lng = data["longitude"] if "longitude" in data else data.get("lng")
        return cls(
            id=data["id"],
            name=data.get("name") or "",
            address=data.get("address") or "",
            latitude=_coordinate(lat),
            longitude=_coordinate(lng),
            status=OpenSpaceStatus(data["status"]),
        )

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from openspace_admin.sources.fixture_data import NOTIFICATIONS

logger = logging.getLogger(__name__)


def _read_flag(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"is_read must be true or false, got {value!r}")
    return value


@dataclass
class Notification:
    id: int
    title: str
    message: str
    type: str = "info"
    timestamp: str = ""
    is_read: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Notification:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            message=data.get("message", ""),
            type=data.get("type", "info"),
            timestamp=data.get("timestamp", ""),
            is_read=_read_flag(data.get("is_read")),
        )


class NotificationInbox:
    """
    Read/unread list shown in the navbar.

    Independent of the record views: marking a notification read never
    touches reports, and resolving a report never creates notifications.
    """

    def __init__(self, items: Optional[Iterable[Notification]] = None):
        if items is None:
            items = (Notification.from_dict(d) for d in copy.deepcopy(NOTIFICATIONS))
        self._items: List[Notification] = list(items)

    @property
    def items(self) -> Tuple[Notification, ...]:
        return tuple(copy.copy(n) for n in self._items)

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self._items if not n.is_read)

    def mark_read(self, notification_id: int) -> None:
        """Mark one notification read. Unknown ids are ignored."""
        for n in self._items:
            if n.id == notification_id:
                n.is_read = True
                return
        logger.debug("mark_read for unknown notification ignored", extra={"notification_id": notification_id})

    def mark_all_read(self) -> None:
        for n in self._items:
            n.is_read = True

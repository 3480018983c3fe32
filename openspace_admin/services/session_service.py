from __future__ import annotations

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, Mapping

from openspace_admin.config.model import GlobalConfig
from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.entity_registry import EntityRegistry
from openspace_admin.core.record_store import RecordStore
from openspace_admin.core.view_controller import ViewController
from openspace_admin.services.notification_service import NotificationInbox
from openspace_admin.sources.factory import build_source

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 64

ControllerFactory = Callable[[EntityProfile], ViewController]


def new_session_id() -> str:
    return f"session-{uuid.uuid4().hex[:12]}"


@dataclass
class ConsoleSession:
    """One browser session: a controller per entity type plus its inbox."""
    session_id: str
    controllers: Dict[str, ViewController]
    inbox: NotificationInbox = field(default_factory=NotificationInbox)

    def controller(self, entity_key: str) -> ViewController:
        try:
            return self.controllers[entity_key]
        except KeyError:
            raise KeyError(f"Session '{self.session_id}' has no view for entity '{entity_key}'")


def controller_factory_from_config(global_config: GlobalConfig) -> ControllerFactory:
    """
    Build controllers wired to the record source configured for each entity.
    """

    def factory(profile: EntityProfile) -> ViewController:
        source = build_source(
            global_config.source_for(profile.key),
            profile,
            delay_seconds=global_config.load_delay_seconds,
        )
        store = RecordStore(profile, source)
        return ViewController(profile, store, page_size=global_config.default_page_size)

    return factory


class ConsoleSessionManager(Mapping[str, ConsoleSession]):
    """
    Server-side home of per-session view state.

    Dash callbacks are stateless, so each browser tab carries only a session
    id; the controllers it refers to live here. Implements the Mapping
    interface (dict-like) for lookups; the least recently used session is
    dropped once more than `max_sessions` exist.
    """

    def __init__(
        self,
        registry: EntityRegistry,
        controller_factory: ControllerFactory,
        max_sessions: int = DEFAULT_MAX_SESSIONS,
    ):
        if max_sessions <= 0:
            raise ValueError(f"max_sessions must be > 0, got {max_sessions}")
        self._registry = registry
        self._factory = controller_factory
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, ConsoleSession]" = OrderedDict()

    def __getitem__(self, session_id: str) -> ConsoleSession:
        session = self._sessions[session_id]
        self._sessions.move_to_end(session_id)
        return session

    def __iter__(self) -> Iterator[str]:
        return iter(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)

    def get_or_create(self, session_id: str) -> ConsoleSession:
        # 1. Fast path: already exists
        if session_id in self._sessions:
            return self[session_id]

        # 2. Build one controller per registered entity
        controllers = {p.key: self._factory(p) for p in self._registry.all_profiles()}
        session = ConsoleSession(session_id=session_id, controllers=controllers)
        self._sessions[session_id] = session
        logger.info("Created console session", extra={"session_id": session_id})

        # 3. Evict
        while len(self._sessions) > self._max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted console session", extra={"session_id": evicted})

        return session

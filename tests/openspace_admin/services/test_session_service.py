from __future__ import annotations

import pytest

from openspace_admin.config.model import GlobalConfig
from openspace_admin.core.entity_registry import default_registry
from openspace_admin.services.session_service import (
    ConsoleSessionManager,
    controller_factory_from_config,
    new_session_id,
)


def _manager(max_sessions: int = 3) -> ConsoleSessionManager:
    cfg = GlobalConfig(load_delay_seconds=0.0, default_page_size=5)
    return ConsoleSessionManager(
        default_registry(),
        controller_factory_from_config(cfg),
        max_sessions=max_sessions,
    )


def test_new_session_id_format():
    sid = new_session_id()
    assert sid.startswith("session-")
    assert sid != new_session_id()


def test_get_or_create_builds_controller_per_entity():
    sessions = _manager()
    session = sessions.get_or_create("s1")

    assert set(session.controllers) == {"reports", "open_spaces"}
    assert session.controller("reports").page_state.page_size == 5
    assert sessions.get_or_create("s1") is session
    assert len(sessions) == 1


def test_sessions_do_not_share_state():
    sessions = _manager()
    a = sessions.get_or_create("a").controller("reports")
    b = sessions.get_or_create("b").controller("reports")
    assert a is not b


def test_unknown_entity_raises_key_error():
    session = _manager().get_or_create("s1")
    with pytest.raises(KeyError):
        session.controller("parks")


def test_least_recently_used_session_is_evicted():
    sessions = _manager(max_sessions=2)
    sessions.get_or_create("a")
    sessions.get_or_create("b")
    # touch "a" so "b" becomes the oldest
    _ = sessions["a"]
    sessions.get_or_create("c")

    assert list(sessions) == ["a", "c"]
    assert "b" not in sessions


def test_max_sessions_must_be_positive():
    with pytest.raises(ValueError):
        _manager(max_sessions=0)

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Optional, TypeVar

import dash
from dash import exceptions

from openspace_admin.services.session_service import ConsoleSession
from openspace_admin.ui.config import AppConfig

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Drive a coroutine to completion from a (synchronous) Dash callback.

    The server runs callbacks on a single thread with no loop of its own, so
    each load gets a short-lived event loop.
    """
    return asyncio.run(coro)


def triggered_value() -> Any:
    """Value of the property that fired the current callback, if any."""
    triggered = dash.ctx.triggered
    if not triggered:
        return None
    return triggered[0].get("value")


def require_click() -> None:
    """
    Stop pattern-matched buttons re-rendered with n_clicks=None from
    firing their callback.
    """
    if not triggered_value():
        raise exceptions.PreventUpdate


def session_or_prevent(ctx: AppConfig, session_id: Optional[str]) -> ConsoleSession:
    if not session_id:
        raise exceptions.PreventUpdate
    return ctx.sessions.get_or_create(session_id)

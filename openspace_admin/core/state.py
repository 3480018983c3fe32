from __future__ import annotations
from enum import Enum


class LoadStatus(str, Enum):
    """
    Lifecycle of a record collection / view.

    IDLE -> LOADING -> READY, READY -> LOADING on reload,
    LOADING -> FAILED on a source error, FAILED -> LOADING on retry.
    """
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"

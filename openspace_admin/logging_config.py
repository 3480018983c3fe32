from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "openspace-admin"


class ConsoleJsonFormatter(jsonlogger.JsonFormatter):
    """JSON lines tagged with the service name and a lower-case level."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record["level"] = record.levelname.lower()
        log_record.pop("levelname", None)


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.getenv("OPENSPACE_ADMIN_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(
        level: Optional[Union[int, str]] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the console.

    Modes:
    - JSON lines (default), one object per record with any `extra=` fields
    - plain text for local development

    Selection order for the format:
        1) force_format argument ("json" or "plain") if provided
        2) env var OPENSPACE_ADMIN_LOG_FORMAT
        3) default = "json"

    The level comes from `level`, else OPENSPACE_ADMIN_LOG_LEVEL, else INFO.
    """
    if force_format is not None:
        format_mode = force_format
    else:
        format_mode = os.getenv("OPENSPACE_ADMIN_LOG_FORMAT", "json").lower()

    root = logging.getLogger()
    root.setLevel(_resolve_level(level))

    handler = logging.StreamHandler()
    if format_mode == "plain":
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(ConsoleJsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root.handlers.clear()
    root.addHandler(handler)

    # per-request access lines drown out the record-load events
    logging.getLogger("werkzeug").setLevel(logging.WARNING)

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from openspace_admin.config.model import (
    DEFAULT_LOAD_DELAY_SECONDS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_PAGE_SIZE_OPTIONS,
    DEFAULT_SUBTITLE,
    DEFAULT_UI_TITLE,
    GlobalConfig,
    SourceConfig,
)
from openspace_admin.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a config directory.

    Expected structure:

        root/
            global.json

    global.json keys (all optional):

    - ui_title: title for the navbar and browser tab
    - subtitle: navbar subtitle
    - load_delay_seconds: simulated latency of every record load
    - default_page_size: initial rows per page, must be in page_size_options
    - page_size_options: choices offered by the rows-per-page selector
    - sources: {"<entity key>": {"type": "fixtures" | "json", "path": "..."}}
               Relative paths are resolved relative to the config root.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if a value has the wrong type or range.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open(encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    return parse_global_config(raw, root)


def parse_global_config(raw: Dict[str, Any], root: Path) -> GlobalConfig:
    delay = raw.get("load_delay_seconds", DEFAULT_LOAD_DELAY_SECONDS)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise ConfigError(f"load_delay_seconds must be a non-negative number, got {delay!r}")

    options_raw = raw.get("page_size_options", list(DEFAULT_PAGE_SIZE_OPTIONS))
    if not isinstance(options_raw, list) or not options_raw:
        raise ConfigError("page_size_options must be a non-empty list of positive integers")
    for opt in options_raw:
        if isinstance(opt, bool) or not isinstance(opt, int) or opt <= 0:
            raise ConfigError(f"page_size_options must contain positive integers, got {opt!r}")
    options = tuple(sorted(set(options_raw)))

    page_size = raw.get("default_page_size", DEFAULT_PAGE_SIZE)
    if page_size not in options:
        raise ConfigError(f"default_page_size {page_size!r} is not one of page_size_options {list(options)}")

    return GlobalConfig(
        ui_title=raw.get("ui_title", DEFAULT_UI_TITLE),
        subtitle=raw.get("subtitle", DEFAULT_SUBTITLE),
        load_delay_seconds=float(delay),
        default_page_size=page_size,
        page_size_options=options,
        sources=_parse_sources(raw.get("sources") or {}, root),
    )


def _parse_sources(raw_sources: Any, root: Path) -> Dict[str, SourceConfig]:
    if not isinstance(raw_sources, dict):
        raise ConfigError("sources must be an object keyed by entity")

    sources: Dict[str, SourceConfig] = {}
    for entity_key, entry in raw_sources.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"sources.{entity_key} must be an object")

        # Resolve path properly:
        # - Absolute paths are used as-is.
        # - Relative paths are resolved relative to the config root directory.
        path_raw = entry.get("path")
        if path_raw is None:
            path = None
        else:
            path = Path(path_raw)
            if not path.is_absolute():
                path = (root / path).resolve()

        sources[entity_key] = SourceConfig(type=entry.get("type", "fixtures"), path=path)
    return sources

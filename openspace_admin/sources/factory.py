from __future__ import annotations

from pathlib import Path
from typing import Optional

from openspace_admin.config.model import SourceConfig
from openspace_admin.core.entity_profile import EntityProfile
from openspace_admin.core.exceptions import ConfigError
from openspace_admin.sources.base import RecordSource
from openspace_admin.sources.fixtures import FixtureSource
from openspace_admin.sources.json_file import JsonFileSource


def build_source(
    cfg: Optional[SourceConfig],
    profile: EntityProfile,
    delay_seconds: float,
) -> RecordSource:
    """
    Build the record source configured for `profile`. No config means the
    built-in fixtures.

    :raises ConfigError: for an unknown source type or a json source without a path
    """
    if cfg is None or cfg.type == FixtureSource.id:
        return FixtureSource(profile, delay_seconds=delay_seconds)

    if cfg.type == JsonFileSource.id:
        if cfg.path is None:
            raise ConfigError(f"Source for '{profile.key}' has type 'json' but no 'path'")
        return JsonFileSource(profile, Path(cfg.path), delay_seconds=delay_seconds)

    raise ConfigError(
        f"Unknown source type '{cfg.type}' for '{profile.key}'. "
        f"Expected one of {[FixtureSource.id, JsonFileSource.id]}"
    )

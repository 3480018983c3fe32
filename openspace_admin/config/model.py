from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

DEFAULT_UI_TITLE = "Open Space Management"
DEFAULT_SUBTITLE = "Review and manage reports of illegal use of open spaces."
DEFAULT_LOAD_DELAY_SECONDS = 1.0
DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_SIZE_OPTIONS = (5, 10, 25)


@dataclass(frozen=True)
class SourceConfig:
    """
    Where one entity's records come from.

    - type: "fixtures" (built-in demo data) or "json" (a JSON array on disk)
    - path: file for the "json" type, already resolved against the config root
    """
    type: str = "fixtures"
    path: Optional[Path] = None


@dataclass(frozen=True)
class GlobalConfig:
    ui_title: str = DEFAULT_UI_TITLE
    subtitle: str = DEFAULT_SUBTITLE
    load_delay_seconds: float = DEFAULT_LOAD_DELAY_SECONDS
    default_page_size: int = DEFAULT_PAGE_SIZE
    page_size_options: Tuple[int, ...] = DEFAULT_PAGE_SIZE_OPTIONS
    sources: Dict[str, SourceConfig] = field(default_factory=dict)

    def source_for(self, entity_key: str) -> Optional[SourceConfig]:
        return self.sources.get(entity_key)

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from openspace_admin.config.model import GlobalConfig
from openspace_admin.core.entity_registry import EntityRegistry
from openspace_admin.services.session_service import ConsoleSessionManager


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    registry: Optional[EntityRegistry] = None
    sessions: Optional[ConsoleSessionManager] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")
        if self.sessions is None:
            raise RuntimeError("AppConfig.sessions must be initialized.")

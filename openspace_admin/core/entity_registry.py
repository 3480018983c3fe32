from __future__ import annotations
from typing import Dict, List

from .entity_profile import EntityProfile
from .profiles import OPEN_SPACES, REPORTS


class EntityRegistry:
    """
    Registry of entity profiles so the app can build one tab per entity type

    Design Notes:
    - Every profile drives the same generic store/controller/panel code, so
      adding an entity type means registering one more profile
    - Profile keys are unique; they namespace component ids in the UI
    - Registration order is the tab order
    """

    def __init__(self):
        self._profiles: Dict[str, EntityProfile] = {}

    def register(self, profile: EntityProfile) -> None:
        """
        Register an EntityProfile

        Raises:
            TypeError: if profile is not an EntityProfile
            ValueError: if a profile with the same 'key' already exists
        """
        if not isinstance(profile, EntityProfile):
            raise TypeError(f"Expected an EntityProfile, got {type(profile).__name__}")

        if profile.key in self._profiles:
            raise ValueError(f"Entity '{profile.key}' already registered")

        self._profiles[profile.key] = profile

    def get(self, key: str) -> EntityProfile:
        try:
            return self._profiles[key]
        except KeyError:
            raise KeyError(f"Entity '{key}' not found")

    def all_profiles(self) -> List[EntityProfile]:
        return list(self._profiles.values())


def default_registry() -> EntityRegistry:
    registry = EntityRegistry()
    registry.register(REPORTS)
    registry.register(OPEN_SPACES)
    return registry

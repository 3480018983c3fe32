"""
Top-level package for the open space admin console.

This package exposes the core architecture (domain, sources, services, UI adapters).
Most code should import from submodules such as:
    openspace_admin.core
    openspace_admin.sources
    openspace_admin.services
    openspace_admin.ui
"""

__all__: list[str] = []

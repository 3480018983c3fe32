"""
Record sources: where an entity's collection comes from.
"""

from .base import RecordSource
from .factory import build_source
from .fixtures import FixtureSource
from .json_file import JsonFileSource

__all__ = ["RecordSource", "FixtureSource", "JsonFileSource", "build_source"]

from .model import GlobalConfig, SourceConfig
from .loader import load_global_config

__all__ = ["GlobalConfig", "SourceConfig", "load_global_config"]

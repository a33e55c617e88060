from .loader import load_settings
from .schema import LoggingConfig, PathsConfig, Settings

__all__ = ["LoggingConfig", "PathsConfig", "Settings", "load_settings"]

from .loader import ConfigError, load_config
from .models import AppConfig, LoggingConfig, ReaderConfig

# Config exports are intentionally small.
__all__ = ["AppConfig", "ConfigError", "LoggingConfig", "ReaderConfig", "load_config"]

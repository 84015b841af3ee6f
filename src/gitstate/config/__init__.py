"""Configuration loading, schema, and defaults."""

from gitstate.config.loader import ConfigError, load_config
from gitstate.config.schema import GitStateConfig, HistoryConfig, LoggingConfig, StatusConfig

__all__ = [
    "ConfigError",
    "GitStateConfig",
    "HistoryConfig",
    "LoggingConfig",
    "StatusConfig",
    "load_config",
]

"""InnSync configuration loading."""

from innsync.config.global_config import (
    DEFAULT_CONFIG_PATH,
    ConfigError,
    InnsyncConfig,
    LogLevel,
    load_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigError",
    "InnsyncConfig",
    "LogLevel",
    "load_config",
]

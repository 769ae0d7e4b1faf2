"""CLI bootstrap helpers: logging and registry construction."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.logging import RichHandler

from innsync.commands.registry import CommandRegistry
from innsync.config import DEFAULT_CONFIG_PATH, InnsyncConfig, LogLevel, load_config

_LOGGING_CONFIGURED = False


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root logging level from config.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.value.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def load_effective_config(config_file: Path | None) -> InnsyncConfig:
    """Load config from an explicit path or the default workspace location.

    Args:
        config_file: Optional config file path override.

    Returns:
        Effective config.

    Raises:
        ConfigError: If the config file is invalid.
    """
    return load_config(config_file or Path.cwd() / DEFAULT_CONFIG_PATH)


def build_registry(config: InnsyncConfig) -> CommandRegistry:
    """Build the command registry with configured aliases.

    Args:
        config: Effective config.

    Returns:
        Registry ready to parse input lines.

    Raises:
        ValueError: If an alias is invalid.
    """
    return CommandRegistry(aliases=config.aliases)

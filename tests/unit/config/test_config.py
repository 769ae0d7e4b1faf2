"""Unit tests for InnSync config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from innsync.config import ConfigError, InnsyncConfig, LogLevel, load_config


@pytest.mark.unit
def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    """Missing config file should yield deterministic defaults."""
    config = load_config(tmp_path / "missing.yaml")

    assert config == InnsyncConfig()
    assert config.log_level == LogLevel.WARNING
    assert config.prompt == "innsync"
    assert config.aliases == {}


@pytest.mark.unit
def test_load_config_reads_yaml(tmp_path: Path) -> None:
    """YAML configs should override defaults."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        yaml.safe_dump(
            {"log_level": "debug", "prompt": "hotel", "aliases": {"ls": "list"}}
        ),
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.log_level == LogLevel.DEBUG
    assert config.prompt == "hotel"
    assert config.aliases == {"ls": "list"}


@pytest.mark.unit
def test_load_config_reads_json(tmp_path: Path) -> None:
    """JSON configs should be decoded by suffix."""
    config_path = tmp_path / "config.json"
    config_path.write_text('{"log_level":"error"}', encoding="utf-8")

    assert load_config(config_path).log_level == LogLevel.ERROR


@pytest.mark.unit
def test_empty_yaml_file_yields_defaults(tmp_path: Path) -> None:
    """An empty YAML document should behave like a missing file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(config_path) == InnsyncConfig()


@pytest.mark.unit
@pytest.mark.parametrize(
    ("filename", "content", "message"),
    [
        ("config.yaml", "- a\n- b\n", "root must be an object"),
        ("config.json", "{not json", "Invalid config JSON"),
        ("config.yaml", "log_level: [unclosed", "Invalid config YAML"),
        ("config.yaml", "log_level: loud\n", "Invalid config payload"),
        ("config.yaml", "colour: blue\n", "Invalid config payload"),
        ("config.yaml", "prompt: ''\n", "Invalid config payload"),
    ],
)
def test_invalid_config_raises_config_error(
    tmp_path: Path, filename: str, content: str, message: str
) -> None:
    """Undecodable or invalid payloads should raise ConfigError."""
    config_path = tmp_path / filename
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(config_path)

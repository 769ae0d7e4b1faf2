"""Pytest configuration and shared fixtures."""

import pytest

from innsync.commands.registry import CommandRegistry


@pytest.fixture
def registry() -> CommandRegistry:
    """Command registry with built-in parsers and no aliases."""
    return CommandRegistry()

"""Shared pytest fixtures for all tests."""

import tempfile
from pathlib import Path

import pytest

from tw_prefixer.config.settings import PrefixerConfig, PrefixerOptions
from tw_prefixer.plugin import PrefixerPlugin


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def tw_config() -> PrefixerConfig:
    """Build-cycle config with the conventional ``tw-`` prefix."""
    return PrefixerConfig(prefix="tw-")


@pytest.fixture
def make_plugin(temp_dir):
    """Factory for started plugins rooted in a temporary directory."""

    def _make(**kwargs) -> PrefixerPlugin:
        kwargs.setdefault("root", temp_dir)
        plugin = PrefixerPlugin(PrefixerOptions(**kwargs))
        plugin.build_start()
        return plugin

    return _make

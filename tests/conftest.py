"""Pytest configuration and shared fixtures."""

import pytest

from babysql import BuilderSettings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point babysql at an empty config directory and clear BABYSQL_DEBUG.

    Keeps a developer's ~/.babysql or shell environment from leaking into tests.
    """
    config_dir = tmp_path / "babysql_conf"
    config_dir.mkdir()
    monkeypatch.setenv("BABYSQL_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("BABYSQL_DEBUG", raising=False)
    return config_dir


@pytest.fixture
def config_file(isolated_config):
    """A babysql.toml with a few profiles in the isolated config directory."""
    content = """
[default]
debug = false

[dev]
debug = true
count_alias = "n"

[quiet]
warn_bare_offset = false

[broken]
colour = "blue"
"""
    path = isolated_config / "babysql.toml"
    path.write_text(content)
    return path


@pytest.fixture
def settings() -> BuilderSettings:
    """Plain default settings, independent of the environment."""
    return BuilderSettings()

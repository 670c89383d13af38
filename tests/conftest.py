# tests/conftest.py - shared pytest fixtures
import pytest

from es_units.core import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty temp dir so a stray config.yml never leaks in"""
    monkeypatch.setenv(config.CONFIG_ENV_VAR, str(tmp_path / "config.yml"))
    config.reload_config()
    yield tmp_path / "config.yml"
    monkeypatch.undo()
    config._config = None


@pytest.fixture
def write_config(isolated_config):
    """Write YAML text to the active config file and reload it"""

    def _write(text: str):
        isolated_config.write_text(text, encoding="utf-8")
        return config.reload_config()

    return _write

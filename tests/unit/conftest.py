"""Fixtures shared by the unit tests."""

import importlib
import sys

import pytest


def _reload_config_manager(tmp_path, monkeypatch):
    state_dir = tmp_path / "state"
    monkeypatch.setenv("CAMPARAMS_STATE_DIR", str(state_dir))

    import camparams.core.paths as paths_module
    paths_module = importlib.reload(paths_module)
    sys.modules['camparams.core.paths'] = paths_module

    import camparams.core.config_manager as config_module
    config_module = importlib.reload(config_module)
    sys.modules['camparams.core.config_manager'] = config_module
    return config_module


@pytest.fixture()
def config_module(tmp_path, monkeypatch):
    """The config manager module reloaded with user state under ``tmp_path``."""
    return _reload_config_manager(tmp_path, monkeypatch)


@pytest.fixture()
def config_env(config_module):
    return config_module.ConfigManager()


@pytest.fixture()
def profile_file(tmp_path):
    path = tmp_path / "profile.txt"
    path.write_text(
        "# camera feature profile\n"
        "feature.qcom = true\n"
        "feature.sony = yes\n"
        "feature.samsung = false\n",
        encoding='utf-8',
    )
    return path

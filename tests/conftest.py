"""
Shared fixtures: every test starts from the default configuration,
whatever the environment says.
"""

import pytest

import validated_intervals.config as config_module
from validated_intervals.config import Config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    monkeypatch.setattr(config_module, "_config", Config())
    return config_module._config


@pytest.fixture
def use_config(monkeypatch):
    """Install a specific configuration for one test."""
    def install(**kwargs):
        config = Config(**kwargs)
        monkeypatch.setattr(config_module, "_config", config)
        return config
    return install

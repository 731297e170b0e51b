"""
Pytest configuration for weather-kit tests.
"""

import os

import pytest

from core import config as core_config
from core.config import ENV_PREFIX, AppSettings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the developer's real env vars and .env files."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)

    user_dir = tmp_path / "user-config"
    monkeypatch.setattr(core_config, "get_user_config_dir", lambda: user_dir)
    monkeypatch.setitem(
        AppSettings.model_config,
        "env_file",
        (".env", str(user_dir / ".env")),
    )
    monkeypatch.chdir(tmp_path)
    return user_dir

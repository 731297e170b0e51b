"""
Unit tests for settings and the user .env helpers.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, _parse_env_lines, get_user_env_file, write_user_env_vars
from core.domain.models import Currency
from core.domain.output_format import OutputFormat


def test_defaults():
    settings = AppSettings()

    assert settings.log_level == "WARNING"
    assert settings.output_format is OutputFormat.TABLE
    assert settings.default_currency is Currency.EUR
    assert settings.export_dir == Path("exports")


def test_env_vars_override_defaults(monkeypatch):
    monkeypatch.setenv("WEATHER_KIT_OUTPUT_FORMAT", "json")
    monkeypatch.setenv("WEATHER_KIT_DEFAULT_CURRENCY", "usd")
    monkeypatch.setenv("weather_kit_log_level", "debug")

    settings = AppSettings()

    assert settings.output_format is OutputFormat.JSON
    assert settings.default_currency is Currency.USD
    assert settings.log_level == "DEBUG"


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("WEATHER_KIT_LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        AppSettings()


def test_project_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("WEATHER_KIT_OUTPUT_FORMAT=json\n", encoding="utf-8")

    assert AppSettings().output_format is OutputFormat.JSON


def test_write_user_env_vars_merges_and_sorts(isolated_settings):
    path = write_user_env_vars({"WEATHER_KIT_OUTPUT_FORMAT": "json"})
    write_user_env_vars({"WEATHER_KIT_DEFAULT_CURRENCY": "USD", "WEATHER_KIT_LOG_LEVEL": None})

    assert path == isolated_settings / ".env" == get_user_env_file()
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == [
        "WEATHER_KIT_DEFAULT_CURRENCY=USD",
        "WEATHER_KIT_OUTPUT_FORMAT=json",
    ]

    settings = AppSettings()
    assert settings.output_format is OutputFormat.JSON
    assert settings.default_currency is Currency.USD


def test_parse_env_lines_skips_noise():
    text = '# comment\n\nno_equals\nA = "1"\nB=\'two\'\n=orphan\n'

    assert _parse_env_lines(text) == {"A": "1", "B": "two"}


def test_resolve_export_path():
    settings = AppSettings(export_dir=Path("out"))

    assert settings.resolve_export_path(Path("r.json")) == Path("out") / "r.json"
    assert settings.resolve_export_path(Path("here") / "r.json") == Path("here") / "r.json"


def test_output_format_choices():
    assert [f.value for f in OutputFormat] == ["table", "json"]

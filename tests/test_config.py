from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from numbers_validator.config import CONFIG_PATH_ENV_VAR, ConfigError, Settings, load_settings


def test_defaults_when_no_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    settings = load_settings()
    assert settings == Settings()
    assert settings.log_level_number == logging.WARNING


def test_load_explicit_file(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"output_format": "markdown", "fail_on_error": False, "log_level": "debug"}),
        encoding="utf-8",
    )
    settings = load_settings(path)
    assert settings.output_format == "markdown"
    assert settings.fail_on_error is False
    assert settings.log_level == "DEBUG"


def test_env_var_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"output_format": "markdown"}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))
    assert load_settings().output_format == "markdown"


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Configuration file not found"):
        load_settings(tmp_path / "nope.json")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ([], "must be a JSON object"),
        ({"output_format": "xml"}, "Invalid 'output_format'"),
        ({"fail_on_error": "no"}, "must be boolean"),
        ({"log_level": "LOUD"}, "Invalid 'log_level'"),
        ({"colour": True}, "Unknown configuration field"),
    ],
)
def test_invalid_settings(tmp_path: Path, payload: object, message: str) -> None:
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        load_settings(path)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_settings(path)

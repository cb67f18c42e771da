from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from infopathreader.exceptions import SettingsError
from infopathreader.settings import Settings, ensure_env_file_exists, get_settings

if TYPE_CHECKING:
    from pathlib import Path


def test_settings_load_from_env_file(tmp_path: Path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "APP_ENV=test\nLOG_LEVEL=DEBUG\nLOG_JSON=false\nCABEXTRACT_PATH=/opt/bin/cabextract\nGROUP_CHECKBOXES=false\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.app_env == "test"
    assert settings.log_level == "DEBUG"
    assert settings.log_json is False
    assert settings.cabextract_path == "/opt/bin/cabextract"
    assert settings.group_checkboxes is False


def test_settings_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.cabextract_path == "cabextract"
    assert settings.group_checkboxes is True
    assert settings.log_file is None


def test_settings_environment_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GROUP_CHECKBOXES", "0")

    assert Settings().group_checkboxes is False


def test_ensure_env_file_exists_copies_template(tmp_path: Path) -> None:
    template = tmp_path / ".env.template"
    template.write_text("LOG_LEVEL=WARNING\n", encoding="utf-8")
    env_path = tmp_path / ".env"

    ensure_env_file_exists(env_path=env_path, template_path=template)

    assert env_path.read_text(encoding="utf-8") == "LOG_LEVEL=WARNING\n"


def test_ensure_env_file_exists_keeps_existing_file(tmp_path: Path) -> None:
    template = tmp_path / ".env.template"
    template.write_text("LOG_LEVEL=WARNING\n", encoding="utf-8")
    env_path = tmp_path / ".env"
    env_path.write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")

    ensure_env_file_exists(env_path=env_path, template_path=template)

    assert env_path.read_text(encoding="utf-8") == "LOG_LEVEL=ERROR\n"


def test_get_settings_wraps_validation_errors(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_JSON", "not-a-bool")
    get_settings.cache_clear()

    try:
        with pytest.raises(SettingsError):
            get_settings()
    finally:
        get_settings.cache_clear()

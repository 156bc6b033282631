from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars


def test_defaults() -> None:
    settings = AppSettings(_env_file=None)
    assert settings.log_level == "WARNING"
    assert settings.reject_negatives is False
    assert settings.unescape_input is True
    assert settings.show_banner is True


def test_env_vars_override_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_CALC_REJECT_NEGATIVES", "true")
    monkeypatch.setenv("TEXT_CALC_LOG_LEVEL", "debug")
    settings = AppSettings(_env_file=None)
    assert settings.reject_negatives is True
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="chatty")


def test_project_env_file_is_read(tmp_path) -> None:
    env = tmp_path / ".env"
    env.write_text("TEXT_CALC_SHOW_BANNER=false\n", encoding="utf-8")
    settings = AppSettings(_env_file=env)
    assert settings.show_banner is False


def test_write_user_env_vars_merges_existing_values() -> None:
    path = write_user_env_vars({"TEXT_CALC_REJECT_NEGATIVES": "true"})
    assert path == get_user_env_file()

    write_user_env_vars({"TEXT_CALC_LOG_LEVEL": "INFO"})
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "TEXT_CALC_LOG_LEVEL=INFO" in lines
    assert "TEXT_CALC_REJECT_NEGATIVES=true" in lines

    settings = AppSettings(_env_file=path)
    assert settings.reject_negatives is True
    assert settings.log_level == "INFO"

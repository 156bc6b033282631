from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep tests away from real .env files and TEXT_CALC_* variables."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("core.config.get_user_config_dir", lambda: tmp_path / "user-config")
    for name in (
        "TEXT_CALC_LOG_LEVEL",
        "TEXT_CALC_REJECT_NEGATIVES",
        "TEXT_CALC_UNESCAPE_INPUT",
        "TEXT_CALC_SHOW_BANNER",
    ):
        monkeypatch.delenv(name, raising=False)

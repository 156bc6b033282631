from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_banner(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_CALC_SHOW_BANNER", "false")


def test_calc_prints_total() -> None:
    result = runner.invoke(app, ["calc", "1,2:3"])
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_calc_unescapes_typed_newline() -> None:
    result = runner.invoke(app, ["calc", "//;\\n1;2;3"])
    assert result.exit_code == 0
    assert result.output.strip() == "6"


def test_calc_raw_keeps_backslash_n() -> None:
    result = runner.invoke(app, ["calc", "--raw", "//;\\n1;2;3"])
    assert result.exit_code == 1


def test_calc_failure_exits_with_error() -> None:
    result = runner.invoke(app, ["calc", "abc"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_calc_json_output() -> None:
    result = runner.invoke(app, ["calc", "--json", "1,2"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["total"] == 3
    assert payload["shape"] == "comma_separated"


def test_calc_reject_negatives_flag() -> None:
    result = runner.invoke(app, ["calc", "--reject-negatives", "--", "-1,2"])
    assert result.exit_code == 1
    assert "negatives not allowed" in result.output


def test_calc_reject_negatives_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_CALC_REJECT_NEGATIVES", "true")
    assert runner.invoke(app, ["calc", "--", "-1,2"]).exit_code == 1

    result = runner.invoke(app, ["calc", "--allow-negatives", "--", "-1,2"])
    assert result.exit_code == 0
    assert result.output.strip() == "1"


def test_classify_shows_shape() -> None:
    result = runner.invoke(app, ["classify", "5"])
    assert result.exit_code == 0
    assert "Single value" in result.output


def test_batch_exports_results(tmp_path) -> None:
    src = tmp_path / "batch.json"
    src.write_text(json.dumps(["1,2", "//;\n1;2", None]), encoding="utf-8")
    out = tmp_path / "results.json"

    result = runner.invoke(app, ["batch", str(src), "--output", str(out)])
    assert result.exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert [r["total"] for r in payload["results"]] == [3, 3, 0]
    assert payload["failed"] == 0


def test_batch_with_failures_exits_nonzero(tmp_path) -> None:
    src = tmp_path / "batch.json"
    src.write_text(json.dumps({"expressions": ["1,2", "abc"]}), encoding="utf-8")

    result = runner.invoke(app, ["batch", str(src)])
    assert result.exit_code == 1


def test_doctor_run_passes_self_check() -> None:
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 0
    assert "Self-check" in result.output
    assert "FAIL" not in result.output


def test_doctor_set_writes_user_env(tmp_path) -> None:
    result = runner.invoke(app, ["doctor", "set", "reject_negatives", "true"])
    assert result.exit_code == 0
    env = (tmp_path / "user-config" / ".env").read_text(encoding="utf-8")
    assert "TEXT_CALC_REJECT_NEGATIVES=true" in env


def test_doctor_set_unknown_key() -> None:
    result = runner.invoke(app, ["doctor", "set", "nope", "1"])
    assert result.exit_code == 2


def test_unknown_log_level_option_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "chatty", "calc", "1,2"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)


def test_known_log_level_option_is_accepted() -> None:
    result = runner.invoke(app, ["--log-level", "debug", "calc", "1,2"])
    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "3"


def test_invalid_log_level_setting_exits_cleanly(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_CALC_LOG_LEVEL", "chatty")
    result = runner.invoke(app, ["calc", "1,2"])
    assert result.exit_code == 2
    assert "Invalid setting" in result.output
    assert "log_level" in result.output


def test_invalid_setting_exits_cleanly_in_doctor(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_CALC_REJECT_NEGATIVES", "maybe")
    result = runner.invoke(app, ["doctor", "run"])
    assert result.exit_code == 2
    assert "reject_negatives" in result.output


def test_batch_with_invalid_json_is_rejected(tmp_path) -> None:
    src = tmp_path / "batch.json"
    src.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["batch", str(src)])
    assert result.exit_code == 2
    assert "Invalid batch file" in result.output


def test_batch_with_non_string_entry_is_rejected(tmp_path) -> None:
    src = tmp_path / "batch.json"
    src.write_text(json.dumps({"expressions": ["1,2", 3]}), encoding="utf-8")

    result = runner.invoke(app, ["batch", str(src)])
    assert result.exit_code == 2
    assert "Invalid batch file" in result.output

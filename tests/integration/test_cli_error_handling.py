"""CLI error-handling tests for concise command diagnostics."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from casekit.cli import app
from casekit.errors import CommandStageError


def test_convert_reports_unknown_format_option() -> None:
    result = CliRunner().invoke(app, ["convert", "first name", "--to", "snake"])

    assert result.exit_code == 1
    assert "convert failed at stage `options`" in result.output
    assert "Hint: Use one of `camel`, `kebab` or `dot`." in result.output


def test_convert_reports_missing_config_file() -> None:
    """Convert should fail with stage-aware diagnostics when `--config` path is missing."""

    result = CliRunner().invoke(
        app, ["convert", "first name", "--config", "missing-casekit.yaml"]
    )

    assert result.exit_code == 1
    assert "convert failed at stage `config`" in result.output
    assert "Config file not found: `missing-casekit.yaml`." in result.output


def test_single_format_command_reports_invalid_config_payload(tmp_path: Path) -> None:
    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("colour: red\n", encoding="utf-8")

    result = CliRunner().invoke(
        app, ["kebab", "first name", "--config", str(config_path)]
    )

    assert result.exit_code == 1
    assert "kebab failed at stage `config`" in result.output
    assert "unsupported key(s): colour" in result.output


def test_explain_reports_invalid_environment() -> None:
    result = CliRunner().invoke(
        app, ["explain", "first name"], env={"CASEKIT_VERBOSE": "loud"}
    )

    assert result.exit_code == 1
    assert "explain failed at stage `config`" in result.output
    assert "Fix or unset `CASEKIT_CASE_FORMAT` / `CASEKIT_VERBOSE`." in result.output


def test_convert_reports_non_stage_error(monkeypatch: MonkeyPatch) -> None:
    """Unexpected converter failures should still exit with code 1."""

    def _failing_convert(*_: object, **__: object) -> str:
        raise RuntimeError("unexpected converter failure")

    monkeypatch.setattr("casekit.cli.CaseConverter.convert", _failing_convert)

    result = CliRunner().invoke(app, ["convert", "first name"])

    assert result.exit_code == 1
    assert "convert failed: unexpected converter failure" in result.output


def test_command_stage_error_keeps_detail_as_message() -> None:
    error = CommandStageError(stage="options", detail="bad option")

    assert str(error) == "bad option"
    assert error.hint is None

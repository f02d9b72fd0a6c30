"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from casekit.config import CasekitConfig, ConfigLoader
from casekit.models.datatypes import CaseFormat


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize blank-padded values."""

    config_path = tmp_path / "casekit.yml"
    config_path.write_text(
        """
case_format: " Kebab-Case "
verbose: " yes "
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.case_format is CaseFormat.KEBAB
    assert config.verbose is True


def test_config_loader_from_yaml_keeps_defaults_for_missing_keys(tmp_path: Path) -> None:
    """Keys absent from YAML should fall back to the supplied defaults."""

    config_path = tmp_path / "partial.yml"
    config_path.write_text("verbose: false\n", encoding="utf-8")
    defaults = CasekitConfig(case_format=CaseFormat.DOT, verbose=True)

    config = ConfigLoader.from_yaml(config_path, defaults=defaults)

    assert config.case_format is CaseFormat.DOT
    assert config.verbose is False


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == CasekitConfig()


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "unknown.yml"
    config_path.write_text("case_format: dot\ncolour: red\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): colour"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_rejects_invalid_values(tmp_path: Path) -> None:
    """YAML loader should reject invalid typed tokens with actionable errors."""

    invalid_bool_path = tmp_path / "invalid-bool.yml"
    invalid_bool_path.write_text("verbose: maybe\n", encoding="utf-8")
    with pytest.raises(ValueError, match="field `verbose` must be a boolean"):
        ConfigLoader.from_yaml(invalid_bool_path)

    invalid_format_path = tmp_path / "invalid-format.yml"
    invalid_format_path.write_text("case_format: snake\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported `case_format` value `snake`"):
        ConfigLoader.from_yaml(invalid_format_path)


def test_config_loader_from_yaml_rejects_non_mapping_root(tmp_path: Path) -> None:
    config_path = tmp_path / "list.yml"
    config_path.write_text("- camel\n- kebab\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a top-level mapping"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_yaml_reports_syntax_errors(tmp_path: Path) -> None:
    config_path = tmp_path / "broken.yml"
    config_path.write_text("case_format: [kebab\n", encoding="utf-8")

    with pytest.raises(ValueError, match="could not be parsed"):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_loads_values_and_ignores_blanks() -> None:
    """Environment loader should parse set keys and treat blanks as missing."""

    config = ConfigLoader.from_env(
        {"CASEKIT_CASE_FORMAT": " dot.case ", "CASEKIT_VERBOSE": " on "}
    )
    assert config.case_format is CaseFormat.DOT
    assert config.verbose is True

    blank = ConfigLoader.from_env({"CASEKIT_CASE_FORMAT": "  ", "CASEKIT_VERBOSE": ""})
    assert blank == CasekitConfig()


def test_config_loader_from_env_rejects_invalid_values() -> None:
    with pytest.raises(ValueError, match="`CASEKIT_VERBOSE` must be a boolean"):
        ConfigLoader.from_env({"CASEKIT_VERBOSE": "loud"})

    with pytest.raises(ValueError, match="Unsupported `CASEKIT_CASE_FORMAT` value"):
        ConfigLoader.from_env({"CASEKIT_CASE_FORMAT": "pascal"})


def test_config_loader_from_env_reads_process_environment(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("CASEKIT_CASE_FORMAT", "kebab")

    assert ConfigLoader.from_env().case_format is CaseFormat.KEBAB

"""Configuration model and loaders for casekit.

Responsibilities:
- Define CLI runtime settings as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `CasekitConfig`: normalized settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `CasekitConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import CaseFormat
from .parsing import (
    normalize_optional_string,
    parse_case_format,
    parse_permissive_boolean,
)


_DEFAULT_CASE_FORMAT = CaseFormat.CAMEL


@dataclass(slots=True)
class CasekitConfig:
    """Runtime configuration for the command-line surface.

    Attributes:
        case_format: Target format used by `convert` when `--to` is absent.
        verbose: Whether stage logs are written to stderr.
    """

    case_format: CaseFormat = _DEFAULT_CASE_FORMAT
    verbose: bool = False


class ConfigLoader:
    """Factory methods for creating `CasekitConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"case_format", "verbose"})

    @staticmethod
    def from_yaml(path: Path, defaults: CasekitConfig | None = None) -> CasekitConfig:
        """Create a validated config from a YAML file.

        Keys absent from the file keep the values of `defaults`, which lets callers
        layer a YAML file over environment-derived settings.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            defaults=defaults or CasekitConfig(),
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CasekitConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        raw_format = normalize_optional_string(env_map.get("CASEKIT_CASE_FORMAT"))
        case_format = (
            parse_case_format(raw_format, "CASEKIT_CASE_FORMAT")
            if raw_format is not None
            else _DEFAULT_CASE_FORMAT
        )
        verbose = ConfigLoader._optional_env_boolean(env_map, "CASEKIT_VERBOSE") or False
        return CasekitConfig(case_format=case_format, verbose=verbose)

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, defaults: CasekitConfig
    ) -> CasekitConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(str(key) for key in set(payload) - ConfigLoader._SUPPORTED_YAML_KEYS)
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        raw_format = normalize_optional_string(payload.get("case_format"))
        case_format = (
            parse_case_format(raw_format)
            if raw_format is not None
            else defaults.case_format
        )
        verbose = ConfigLoader._optional_boolean(
            payload, "verbose", source_label, default=defaults.verbose
        )
        return CasekitConfig(case_format=case_format, verbose=verbose)

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean environment value, rejecting invalid tokens."""

        raw = normalize_optional_string(env.get(key))
        if raw is None:
            return None
        parsed = parse_permissive_boolean(raw)
        if parsed is None:
            raise ValueError(f"Environment variable `{key}` must be a boolean value.")
        return parsed

"""Command-line interface for casekit.

Responsibilities:
- Expose user-facing commands for camelCase, kebab-case and dot.case conversion.
- Resolve the target format from CLI options, YAML config and environment.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from .cli_rendering import echo_conversion_report, exit_with_command_error
from .config import CasekitConfig, ConfigLoader
from .errors import CommandStageError
from .models.datatypes import CaseFormat
from .parsing import parse_case_format
from .pipeline import CaseConverter
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="casekit",
    no_args_is_help=True,
    help="casekit CLI.",
)

_TextsArgument = Annotated[
    list[str],
    typer.Argument(help="Input strings; each one is converted and printed on its own line."),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Optional YAML config file path."),
]
_VerboseOption = Annotated[
    bool | None,
    typer.Option("--verbose/--quiet", help="Write stage logs to stderr."),
]
_FormatOption = Annotated[
    str | None,
    typer.Option("--to", help="Target format: camel, kebab or dot."),
]


def _load_config(config_path: Path | None) -> CasekitConfig:
    """Load env settings, overlay an optional YAML file, and map failures to stage errors."""

    try:
        env_config = ConfigLoader.from_env()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix or unset `CASEKIT_CASE_FORMAT` / `CASEKIT_VERBOSE`.",
        ) from exc

    if config_path is None:
        return env_config

    try:
        return ConfigLoader.from_yaml(config_path, defaults=env_config)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to read config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_case_format(option_value: str | None, config: CasekitConfig) -> CaseFormat:
    """Resolve the target format with `--to` taking precedence over config."""

    if option_value is None:
        return config.case_format
    try:
        return parse_case_format(option_value, "--to")
    except ValueError as exc:
        raise CommandStageError(
            stage="options",
            detail=str(exc),
            hint="Use one of `camel`, `kebab` or `dot`.",
        ) from exc


def _echo_conversions(texts: list[str], case_format: CaseFormat, verbose: bool) -> None:
    """Convert each input and print one result per line."""

    run_logger = RunLogger() if verbose else None
    converter = CaseConverter(run_logger=run_logger)
    try:
        for text in texts:
            typer.echo(converter.convert(text, case_format))
    finally:
        if run_logger is not None:
            run_logger.close()


def _run_fixed_format(
    command_name: str,
    texts: list[str],
    case_format: CaseFormat,
    config_file: Path | None,
    verbose: bool | None,
) -> None:
    """Run one of the single-format commands with shared error handling."""

    try:
        config = _load_config(config_file)
        _echo_conversions(
            texts, case_format, verbose if verbose is not None else config.verbose
        )
    except Exception as exc:
        exit_with_command_error(command_name, exc)


@app.command("camel")
def camel_command(
    texts: _TextsArgument,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = None,
) -> None:
    """Convert inputs to camelCase."""

    _run_fixed_format("camel", texts, CaseFormat.CAMEL, config_file, verbose)


@app.command("kebab")
def kebab_command(
    texts: _TextsArgument,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = None,
) -> None:
    """Convert inputs to kebab-case."""

    _run_fixed_format("kebab", texts, CaseFormat.KEBAB, config_file, verbose)


@app.command("dot")
def dot_command(
    texts: _TextsArgument,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = None,
) -> None:
    """Convert inputs to dot.case."""

    _run_fixed_format("dot", texts, CaseFormat.DOT, config_file, verbose)


@app.command("convert")
def convert_command(
    texts: _TextsArgument,
    to: _FormatOption = None,
    config_file: _ConfigOption = None,
    verbose: _VerboseOption = None,
) -> None:
    """Convert inputs to the format chosen by `--to`, config or environment."""

    try:
        config = _load_config(config_file)
        case_format = _resolve_case_format(to, config)
        _echo_conversions(
            texts, case_format, verbose if verbose is not None else config.verbose
        )
    except Exception as exc:
        exit_with_command_error("convert", exc)


@app.command("explain")
def explain_command(
    text: Annotated[str, typer.Argument(help="Input string to trace through the pipeline.")],
    to: _FormatOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Show normalized text, tokens and output for one input."""

    try:
        config = _load_config(config_file)
        case_format = _resolve_case_format(to, config)
        report = CaseConverter().explain(text, case_format)
    except Exception as exc:
        exit_with_command_error("explain", exc)
    echo_conversion_report(report)


def main() -> None:
    """Run the casekit CLI application with stage logs limited to `--verbose` output."""

    logger.remove()
    app()

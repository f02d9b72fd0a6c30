"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and conversion reports.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError
from .models.datatypes import ConversionReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_conversion_report(report: ConversionReport) -> None:
    """Print normalized text, tokens and output of one conversion."""

    typer.echo(f"Format: {report.case_format.label}")
    typer.echo(f"Normalized: {report.normalized!r}")
    typer.echo(f"Tokens: {', '.join(report.tokens) if report.tokens else '(none)'}")
    typer.echo(f"Output: {report.output}")

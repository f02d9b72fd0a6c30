"""Structured stage logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level conversion logs through `loguru`.
- Route each logger's events only to its own sink, leaving other handlers intact.
- Never include converted text in log lines.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic stage logs for observable conversion activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Attach a bare-message `loguru` handler that only accepts this logger's events."""

        self._sink = sink or sys.stderr
        self._logger_id = id(self)
        self._logger = logger.bind(run_logger_id=self._logger_id)
        self._handler_id: int | None = logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=lambda record: record["extra"].get("run_logger_id") == self._logger_id,
        )

    def close(self) -> None:
        """Remove this logger's handler; other `loguru` handlers are untouched."""

        if self._handler_id is not None:
            logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured stage log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        self._logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without input payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

"""Telemetry and observability helpers.

This package emits stage-level conversion events for diagnostics.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]

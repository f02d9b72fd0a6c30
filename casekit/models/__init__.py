"""Shared typed data models for casekit.

This package contains the format enumeration and report records used across
pipeline modules to avoid circular imports.
"""

from .datatypes import CaseFormat, ConversionReport

__all__ = ["CaseFormat", "ConversionReport"]

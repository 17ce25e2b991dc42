"""Custom exception hierarchy for the lido pricing library."""

from __future__ import annotations


class LidoError(Exception):
    """Base exception for all lido errors."""


class SettingsFileError(LidoError):
    """Raised when a rate schedule file cannot be read, parsed or written."""


class BreakdownError(LidoError):
    """Raised when a breakdown key is written with two different entry kinds."""

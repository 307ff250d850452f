"""Custom exceptions for command exit mapping."""

from __future__ import annotations


class UserInputError(Exception):
    """Raised when user input or environment is invalid."""


class ConfigurationError(UserInputError):
    """Raised when rule, ignore or plugin configuration cannot be honoured."""


class ExtractionError(Exception):
    """Raised when the requested schemas cannot be extracted."""

"""Custom exceptions for firstmillion."""

from __future__ import annotations


class FirstMillionError(Exception):
    """Base exception for firstmillion."""


class ConfigError(FirstMillionError):
    """Invalid configuration."""


class InputParseError(ConfigError):
    """User text that cannot be read as a number."""

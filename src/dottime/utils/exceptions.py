"""Custom exceptions for dottime."""

from __future__ import annotations


class DottimeError(Exception):
    """Base exception for dottime."""


class ConfigError(DottimeError):
    """Invalid configuration or input value."""


class UnsupportedViewModeError(ConfigError):
    """View mode is not one of month, year, or life."""

    def __init__(self, view_mode: object) -> None:
        super().__init__(f"Unsupported view mode: {view_mode!r}")
        self.view_mode = view_mode


class StorageError(DottimeError):
    """The preference store could not be read or written."""

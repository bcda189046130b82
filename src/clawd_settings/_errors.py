"""Error types for settings loading."""

from pathlib import Path
from typing import Any


class SettingsError(Exception):
    """Base exception for all settings errors."""


class SettingsFileNotFoundError(SettingsError):
    """Raised when a settings file does not exist."""

    def __init__(self, path: str | Path, message: str = "Settings file not found"):
        self.path = Path(path)
        super().__init__(f"{message}: {path}")


class SettingsReadError(SettingsError):
    """Raised when a settings file exists but can't be read (directory, permissions)."""

    def __init__(self, path: str | Path, original_error: OSError):
        self.path = Path(path)
        self.original_error = original_error
        super().__init__(f"Failed to read settings file {path}: {original_error}")


class SettingsJSONDecodeError(SettingsError):
    """Raised when settings text is not valid JSON."""

    def __init__(self, text: str, original_error: Exception):
        self.text = text
        self.original_error = original_error
        super().__init__(f"Failed to decode settings JSON: {text[:100]}...")


class SettingsParseError(SettingsError):
    """Raised when decoded settings don't match the settings schema."""

    def __init__(self, message: str, data: Any = None):
        self.data = data
        super().__init__(message)

"""Settings schema for the Claude Code CLI."""

from __future__ import annotations


from ._errors import (
    SettingsError,
    SettingsFileNotFoundError,
    SettingsJSONDecodeError,
    SettingsParseError,
    SettingsReadError,
)
from ._version import __version__
from .loader import build_settings_arg, load_settings, merge_sandbox
from .models import (
    SANDBOX_DEFAULTS,
    JsonSettings,
    ObjectSettings,
    PathSettings,
    SandboxIgnoreViolations,
    SandboxIgnoreViolationsBuilder,
    SandboxNetworkConfig,
    SandboxNetworkConfigBuilder,
    SandboxSettings,
    SandboxSettingsBuilder,
    Settings,
    SettingsObject,
    SettingsObjectBuilder,
    as_settings,
)


__all__ = [
    "__version__",
    # Settings sources
    "Settings",
    "PathSettings",
    "JsonSettings",
    "ObjectSettings",
    "as_settings",
    # Settings schema
    "SettingsObject",
    "SandboxSettings",
    "SandboxNetworkConfig",
    "SandboxIgnoreViolations",
    "SANDBOX_DEFAULTS",
    # Builders
    "SettingsObjectBuilder",
    "SandboxSettingsBuilder",
    "SandboxNetworkConfigBuilder",
    "SandboxIgnoreViolationsBuilder",
    # Loading
    "load_settings",
    "build_settings_arg",
    "merge_sandbox",
    # Errors
    "SettingsError",
    "SettingsFileNotFoundError",
    "SettingsJSONDecodeError",
    "SettingsParseError",
    "SettingsReadError",
]

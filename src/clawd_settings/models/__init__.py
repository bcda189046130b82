"""Settings schema models."""

from .base import CamelSettingsModel, SettingsModel
from .builders import (
    SandboxIgnoreViolationsBuilder,
    SandboxNetworkConfigBuilder,
    SandboxSettingsBuilder,
    SettingsObjectBuilder,
)
from .sandbox import (
    SANDBOX_DEFAULTS,
    SandboxIgnoreViolations,
    SandboxNetworkConfig,
    SandboxSettings,
)
from .settings import (
    JsonSettings,
    ObjectSettings,
    PathSettings,
    Settings,
    SettingsObject,
    as_settings,
)

__all__ = [
    "SANDBOX_DEFAULTS",
    "CamelSettingsModel",
    "JsonSettings",
    "ObjectSettings",
    "PathSettings",
    "SandboxIgnoreViolations",
    "SandboxIgnoreViolationsBuilder",
    "SandboxNetworkConfig",
    "SandboxNetworkConfigBuilder",
    "SandboxSettings",
    "SandboxSettingsBuilder",
    "Settings",
    "SettingsModel",
    "SettingsObject",
    "SettingsObjectBuilder",
    "as_settings",
]

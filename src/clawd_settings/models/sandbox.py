"""Sandbox configuration types."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

from pydantic import StrictBool, StrictInt, StrictStr

from .base import CamelSettingsModel, SettingsModel


if TYPE_CHECKING:
    from .builders import (
        SandboxIgnoreViolationsBuilder,
        SandboxNetworkConfigBuilder,
        SandboxSettingsBuilder,
    )


# Defaults the CLI applies when a sandbox field is left out.
SANDBOX_DEFAULTS: dict[str, Any] = {
    "enabled": False,
    "auto_allow_bash_if_sandboxed": True,
    "excluded_commands": [],
    "allow_unsandboxed_commands": True,
    "network": None,
    "ignore_violations": None,
    "enable_weaker_nested_sandbox": False,
}


class SandboxNetworkConfig(CamelSettingsModel):
    """Network configuration for sandbox.

    Attributes:
        allow_unix_sockets: Unix socket paths accessible in sandbox (e.g., SSH agents).
        allow_all_unix_sockets: Allow all Unix sockets (less secure).
        allow_local_binding: Allow binding to localhost ports (macOS only).
        http_proxy_port: HTTP proxy port if bringing your own proxy.
        socks_proxy_port: SOCKS5 proxy port if bringing your own proxy.
    """

    allow_unix_sockets: list[StrictStr] | None = None
    allow_all_unix_sockets: StrictBool | None = None
    allow_local_binding: StrictBool | None = None
    # Ports are taken as given, range checks belong to the proxy owner.
    http_proxy_port: StrictInt | None = None
    socks_proxy_port: StrictInt | None = None

    @classmethod
    def builder(cls) -> SandboxNetworkConfigBuilder:
        from .builders import SandboxNetworkConfigBuilder

        return SandboxNetworkConfigBuilder()


class SandboxIgnoreViolations(SettingsModel):
    """Violations to ignore in sandbox.

    Keys are not camelCased: `file` and `network` go over the wire as-is.

    Attributes:
        file: File paths for which violations should be ignored.
        network: Network hosts for which violations should be ignored.
    """

    file: list[StrictStr] | None = None
    network: list[StrictStr] | None = None

    @classmethod
    def builder(cls) -> SandboxIgnoreViolationsBuilder:
        from .builders import SandboxIgnoreViolationsBuilder

        return SandboxIgnoreViolationsBuilder()


class SandboxSettings(CamelSettingsModel):
    """Sandbox settings configuration.

    This controls how Claude Code sandboxes bash commands for filesystem
    and network isolation.

    **Important:** Filesystem and network restrictions are configured via permission
    rules, not via these sandbox settings:
    - Filesystem read restrictions: Use Read deny rules
    - Filesystem write restrictions: Use Edit allow/deny rules
    - Network restrictions: Use WebFetch allow/deny rules

    Every field is optional. A missing field is stored as None and left out when
    serialized; the CLI then applies its own default (see `resolved`).

    Attributes:
        enabled: Enable bash sandboxing (macOS/Linux only). Default: False
        auto_allow_bash_if_sandboxed: Auto-approve bash commands when sandboxed. Default: True
        excluded_commands: Commands that should run outside the sandbox (e.g., ["git", "docker"])
        allow_unsandboxed_commands: Allow commands to bypass sandbox via dangerouslyDisableSandbox.
            When False, all commands must run sandboxed (or be in excludedCommands). Default: True
        network: Network configuration for sandbox.
        ignore_violations: Violations to ignore.
        enable_weaker_nested_sandbox: Enable weaker sandbox for unprivileged Docker environments
            (Linux only). Reduces security. Default: False

    Example:
        ```python
        sandbox = SandboxSettings(
            enabled=True,
            auto_allow_bash_if_sandboxed=True,
            excluded_commands=["docker"],
            network=SandboxNetworkConfig(
                allow_unix_sockets=["/var/run/docker.sock"],
                allow_local_binding=True,
            ),
        )
        sandbox.to_dict()
        # {"enabled": True, "autoAllowBashIfSandboxed": True, "excludedCommands": ["docker"],
        #  "network": {"allowUnixSockets": ["/var/run/docker.sock"], "allowLocalBinding": True}}
        ```
    """

    enabled: StrictBool | None = None
    auto_allow_bash_if_sandboxed: StrictBool | None = None
    excluded_commands: list[StrictStr] | None = None
    allow_unsandboxed_commands: StrictBool | None = None
    network: SandboxNetworkConfig | None = None
    ignore_violations: SandboxIgnoreViolations | None = None
    enable_weaker_nested_sandbox: StrictBool | None = None

    @classmethod
    def builder(cls) -> SandboxSettingsBuilder:
        from .builders import SandboxSettingsBuilder

        return SandboxSettingsBuilder()

    def resolved(self) -> dict[str, Any]:
        """Return field values with the CLI defaults filled in for missing ones.

        Keys are the Python field names. The model itself is not changed.
        """
        values: dict[str, Any] = {}
        for name, default in SANDBOX_DEFAULTS.items():
            value = getattr(self, name)
            values[name] = copy.copy(default) if value is None else value
        return values

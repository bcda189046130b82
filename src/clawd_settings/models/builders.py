"""Fluent builders for the settings models.

Each setter takes the plain value (no None wrapping), marks the field as set and
returns the builder, so construction reads as a single chain:

```python
sandbox = (
    SandboxSettings.builder()
    .enabled(True)
    .excluded_commands(["git", "docker"])
    .network(SandboxNetworkConfig.builder().http_proxy_port(8080).build())
    .build()
)
```

Fields that are never set stay absent. Nothing is validated beyond what the
model itself checks on `build()`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

from .sandbox import SandboxIgnoreViolations, SandboxNetworkConfig, SandboxSettings
from .settings import SettingsObject


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from .base import SettingsModel


class _ModelBuilder[M: SettingsModel]:
    model: type[M]

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> Self:
        self._values[name] = value
        return self

    def build(self) -> M:
        """Create the model from the values set so far."""
        return self.model(**self._values)


class SandboxNetworkConfigBuilder(_ModelBuilder[SandboxNetworkConfig]):
    """Builder for `SandboxNetworkConfig`."""

    model = SandboxNetworkConfig

    def allow_unix_sockets(self, paths: Iterable[str]) -> Self:
        return self._set("allow_unix_sockets", list(paths))

    def allow_all_unix_sockets(self, value: bool) -> Self:
        return self._set("allow_all_unix_sockets", value)

    def allow_local_binding(self, value: bool) -> Self:
        return self._set("allow_local_binding", value)

    def http_proxy_port(self, port: int) -> Self:
        return self._set("http_proxy_port", port)

    def socks_proxy_port(self, port: int) -> Self:
        return self._set("socks_proxy_port", port)


class SandboxIgnoreViolationsBuilder(_ModelBuilder[SandboxIgnoreViolations]):
    """Builder for `SandboxIgnoreViolations`."""

    model = SandboxIgnoreViolations

    def file(self, paths: Iterable[str]) -> Self:
        return self._set("file", list(paths))

    def network(self, hosts: Iterable[str]) -> Self:
        return self._set("network", list(hosts))


class SandboxSettingsBuilder(_ModelBuilder[SandboxSettings]):
    """Builder for `SandboxSettings`."""

    model = SandboxSettings

    def enabled(self, value: bool) -> Self:
        return self._set("enabled", value)

    def auto_allow_bash_if_sandboxed(self, value: bool) -> Self:
        return self._set("auto_allow_bash_if_sandboxed", value)

    def excluded_commands(self, commands: Iterable[str]) -> Self:
        return self._set("excluded_commands", list(commands))

    def allow_unsandboxed_commands(self, value: bool) -> Self:
        return self._set("allow_unsandboxed_commands", value)

    def network(self, config: SandboxNetworkConfig) -> Self:
        return self._set("network", config)

    def ignore_violations(self, violations: SandboxIgnoreViolations) -> Self:
        return self._set("ignore_violations", violations)

    def enable_weaker_nested_sandbox(self, value: bool) -> Self:
        return self._set("enable_weaker_nested_sandbox", value)


class SettingsObjectBuilder(_ModelBuilder[SettingsObject]):
    """Builder for `SettingsObject`."""

    model = SettingsObject

    def __init__(self) -> None:
        super().__init__()
        self._extra: dict[str, Any] = {}

    def sandbox(self, sandbox: SandboxSettings) -> Self:
        return self._set("sandbox", sandbox)

    def extra(self, values: Mapping[str, Any]) -> Self:
        """Replace all unmodeled settings keys."""
        self._extra = dict(values)
        return self

    def extra_field(self, key: str, value: Any) -> Self:
        """Add a single unmodeled settings key."""
        self._extra[key] = value
        return self

    def build(self) -> SettingsObject:
        return SettingsObject(extra=self._extra, **self._values)

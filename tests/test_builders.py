"""Tests for fluent settings builders."""

from __future__ import annotations

from clawd_settings import (
    SandboxIgnoreViolations,
    SandboxNetworkConfig,
    SandboxSettings,
    SettingsObject,
)


class TestSandboxNetworkConfigBuilder:
    """Builder for the sandbox network configuration."""

    def test_single_field(self):
        """Setting one field yields a config with only that key."""
        config = SandboxNetworkConfig.builder().http_proxy_port(8080).build()
        assert config == SandboxNetworkConfig(http_proxy_port=8080)
        assert config.to_json() == '{"httpProxyPort":8080}'

    def test_all_fields(self):
        """Every network setter lands in its field."""
        config = (
            SandboxNetworkConfig.builder()
            .allow_unix_sockets(["/var/run/docker.sock"])
            .allow_all_unix_sockets(False)
            .allow_local_binding(True)
            .http_proxy_port(3128)
            .socks_proxy_port(1080)
            .build()
        )
        assert config.allow_unix_sockets == ["/var/run/docker.sock"]
        assert config.allow_all_unix_sockets is False
        assert config.allow_local_binding is True
        assert config.http_proxy_port == 3128
        assert config.socks_proxy_port == 1080

    def test_sequence_setter_accepts_iterables(self):
        """Tuples and generators are stored as lists."""
        config = SandboxNetworkConfig.builder().allow_unix_sockets(("/a", "/b")).build()
        assert config.allow_unix_sockets == ["/a", "/b"]


class TestSandboxIgnoreViolationsBuilder:
    """Builder for ignored sandbox violations."""

    def test_fields(self):
        """File and network lists are set, keys stay uncased."""
        violations = (
            SandboxIgnoreViolations.builder()
            .file(p for p in ["/tmp/a", "/tmp/b"])
            .network(["example.com"])
            .build()
        )
        assert violations.to_dict() == {"file": ["/tmp/a", "/tmp/b"], "network": ["example.com"]}


class TestSandboxSettingsBuilder:
    """Builder for sandbox settings."""

    def test_nothing_set_encodes_to_empty_object(self):
        """A builder with nothing set gives an empty object."""
        sandbox = SandboxSettings.builder().build()
        assert sandbox.to_dict() == {}
        assert sandbox == SandboxSettings()

    def test_nested_builders(self):
        """Nested configs built with their own builders are embedded as-is."""
        sandbox = (
            SandboxSettings.builder()
            .enabled(True)
            .auto_allow_bash_if_sandboxed(False)
            .excluded_commands(["git", "docker"])
            .allow_unsandboxed_commands(False)
            .network(SandboxNetworkConfig.builder().allow_local_binding(True).build())
            .ignore_violations(SandboxIgnoreViolations.builder().file(["/dev/null"]).build())
            .enable_weaker_nested_sandbox(True)
            .build()
        )
        assert sandbox.to_dict() == {
            "enabled": True,
            "autoAllowBashIfSandboxed": False,
            "excludedCommands": ["git", "docker"],
            "allowUnsandboxedCommands": False,
            "network": {"allowLocalBinding": True},
            "ignoreViolations": {"file": ["/dev/null"]},
            "enableWeakerNestedSandbox": True,
        }

    def test_setter_overrides_previous_value(self):
        """Calling a setter twice keeps the last value."""
        sandbox = SandboxSettings.builder().enabled(True).enabled(False).build()
        assert sandbox.enabled is False

    def test_builders_are_independent(self):
        """Each builder's values are its own."""
        first = SandboxSettings.builder().enabled(True)
        second = SandboxSettings.builder()
        assert second.build().enabled is None
        assert first.build().enabled is True


class TestSettingsObjectBuilder:
    """Builder for the top-level settings object."""

    def test_defaults(self):
        """Untouched builder leaves sandbox absent and extra empty."""
        obj = SettingsObject.builder().build()
        assert obj.sandbox is None
        assert dict(obj.extra) == {}

    def test_sandbox_and_extra(self):
        """Sandbox and extra keys end up side by side."""
        obj = (
            SettingsObject.builder()
            .sandbox(SandboxSettings.builder().enabled(True).build())
            .extra({"verbose": True})
            .extra_field("model", "opus")
            .build()
        )
        assert obj.to_dict() == {"sandbox": {"enabled": True}, "verbose": True, "model": "opus"}

    def test_extra_replaces_previous_entries(self):
        """extra() replaces what extra_field() added before."""
        obj = SettingsObject.builder().extra_field("a", 1).extra({"b": 2}).build()
        assert dict(obj.extra) == {"b": 2}

    def test_extra_mapping_is_copied(self):
        """Mutating the passed mapping later does not change the build."""
        values = {"a": 1}
        builder = SettingsObject.builder().extra(values)
        values["b"] = 2
        assert dict(builder.build().extra) == {"a": 1}

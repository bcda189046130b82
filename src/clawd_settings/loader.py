"""Loading settings sources and rendering the CLI `--settings` value."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, assert_never

import anyenv
from pydantic import ValidationError

from clawd_settings._errors import (
    SettingsFileNotFoundError,
    SettingsJSONDecodeError,
    SettingsParseError,
    SettingsReadError,
)
from clawd_settings.models.settings import (
    JsonSettings,
    ObjectSettings,
    PathSettings,
    SettingsObject,
    as_settings,
)


if TYPE_CHECKING:
    import os

    from clawd_settings.models.sandbox import SandboxSettings
    from clawd_settings.models.settings import Settings

    SettingsLike = Settings | SettingsObject | os.PathLike[str]

logger = logging.getLogger(__name__)


def _read_text(source: PathSettings | JsonSettings) -> str:
    match source:
        case JsonSettings(json=text):
            return text
        case PathSettings(path=path):
            try:
                raw = path.read_bytes()
            except FileNotFoundError as e:
                raise SettingsFileNotFoundError(path) from e
            except OSError as e:
                raise SettingsReadError(path, e) from e
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise SettingsJSONDecodeError(raw.decode("utf-8", errors="replace"), e) from e
        case _:
            assert_never(source)


def _load_dict(source: PathSettings | JsonSettings) -> dict[str, Any]:
    text = _read_text(source)
    try:
        data = anyenv.load_json(text)
    except anyenv.JsonLoadError as e:
        raise SettingsJSONDecodeError(text, e) from e
    if not isinstance(data, dict):
        msg = f"Settings must be a JSON object, got {type(data).__name__}"
        raise SettingsParseError(msg, data=data)
    return data


def load_settings(source: SettingsLike) -> SettingsObject:
    """Resolve a settings source into a structured settings object.

    Args:
        source: A `Settings` variant, a `SettingsObject` or a path-like object.

    Returns:
        The parsed settings. A wrapped `SettingsObject` is returned as-is.

    Raises:
        SettingsFileNotFoundError: If a settings path does not exist.
        SettingsReadError: If a settings path can't be read (e.g. it is a directory).
        SettingsJSONDecodeError: If the settings text is not valid UTF-8 JSON.
        SettingsParseError: If the JSON does not match the settings schema.
    """
    match settings := as_settings(source):
        case ObjectSettings(settings=obj):
            return obj
        case PathSettings() | JsonSettings():
            data = _load_dict(settings)
            try:
                return SettingsObject.from_dict(data)
            except ValidationError as e:
                msg = f"Invalid settings: {e}"
                raise SettingsParseError(msg, data=data) from e
        case _:
            assert_never(settings)


def merge_sandbox(settings: SettingsObject, sandbox: SandboxSettings) -> SettingsObject:
    """Return a copy of `settings` with its sandbox replaced. Extra keys are kept."""
    return settings.model_copy(update={"sandbox": sandbox})


def build_settings_arg(
    settings: SettingsLike | None = None,
    sandbox: SandboxSettings | None = None,
) -> str | None:
    """Build the value for the CLI `--settings` flag.

    Without sandbox settings, paths and raw JSON are passed through untouched.
    With sandbox settings, the settings are loaded and the sandbox is merged in
    under the `sandbox` key, replacing any sandbox already configured. A settings
    file or JSON text that can't be read is logged and treated as empty.

    Args:
        settings: Settings source, if any.
        sandbox: Sandbox settings to merge in, if any.

    Returns:
        The flag value, or None if there is nothing to pass.
    """
    if settings is None and sandbox is None:
        return None
    source = as_settings(settings) if settings is not None else None
    if sandbox is None:
        match source:
            case PathSettings(path=path):
                return str(path)
            case JsonSettings(json=text):
                return text
            case ObjectSettings(settings=obj):
                return obj.to_json()
            case _:
                return None

    settings_obj: dict[str, Any] = {}
    match source:
        case None:
            pass
        case ObjectSettings(settings=obj):
            settings_obj = obj.to_dict()
        case PathSettings() | JsonSettings():
            try:
                settings_obj = _load_dict(source)
            except SettingsFileNotFoundError as e:
                logger.warning("Settings file not found: %s", e.path)
            except SettingsReadError as e:
                logger.warning("Failed to read settings file, using sandbox only: %s", e)
            except (SettingsJSONDecodeError, SettingsParseError) as e:
                logger.warning("Failed to parse settings, using sandbox only: %s", e)
    logger.debug("Merging sandbox settings into --settings value")
    settings_obj["sandbox"] = sandbox.to_dict()
    return anyenv.dump_json(settings_obj)

"""Settings object and the settings source union."""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Literal

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from .base import CamelSettingsModel
from .sandbox import SandboxSettings  # noqa: TC001


if TYPE_CHECKING:
    from collections.abc import Mapping

    from .builders import SettingsObjectBuilder


class SettingsObject(CamelSettingsModel):
    """Structured settings object.

    Only `sandbox` is modeled. Any other top-level key is kept in `extra` and
    written back next to `sandbox` (not nested under an "extra" key), so
    settings this package doesn't know about survive a round trip.

    Example:
        ```python
        obj = SettingsObject(
            sandbox=SandboxSettings(enabled=True),
            extra={"permissions": {"allow": ["Bash(ls:*)"]}},
        )
        obj.to_dict()
        # {"sandbox": {"enabled": True}, "permissions": {"allow": ["Bash(ls:*)"]}}
        ```
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel, extra="allow"
    )

    sandbox: SandboxSettings | None = None
    """Sandbox settings for bash command isolation."""

    def __init__(
        self,
        *,
        sandbox: SandboxSettings | None = None,
        extra: Mapping[str, Any] | None = None,
        **data: Any,
    ) -> None:
        values = {**(extra or {}), **data}
        if sandbox is not None:
            values["sandbox"] = sandbox
        super().__init__(**values)

    @property
    def extra(self) -> Mapping[str, Any]:
        """Settings keys not modeled by this class, as a read-only mapping."""
        return MappingProxyType(self.__pydantic_extra__ or {})

    @classmethod
    def builder(cls) -> SettingsObjectBuilder:
        from .builders import SettingsObjectBuilder

        return SettingsObjectBuilder()


@dataclass(frozen=True)
class PathSettings:
    """Path to a settings JSON file. Loaded by the consumer, never checked here."""

    type: Literal["path"] = field(default="path", init=False, repr=False)
    path: Path


@dataclass(frozen=True)
class JsonSettings:
    """Raw settings JSON, passed along unparsed.

    There is deliberately no automatic conversion from `str`: build this
    variant explicitly and make sure the text is valid JSON.
    """

    type: Literal["json"] = field(default="json", init=False, repr=False)
    json: str


@dataclass(frozen=True)
class ObjectSettings:
    """Structured settings object."""

    type: Literal["object"] = field(default="object", init=False, repr=False)
    settings: SettingsObject


Settings = PathSettings | JsonSettings | ObjectSettings
"""Settings configuration for the CLI: a file, raw JSON or a structured object."""


def as_settings(value: Settings | SettingsObject | os.PathLike[str]) -> Settings:
    """Wrap a path or settings object into the matching `Settings` variant.

    Args:
        value: A path-like object, a `SettingsObject`, or an existing variant
            (returned unchanged).

    Returns:
        The `Settings` variant holding the value.

    Raises:
        TypeError: For plain strings and any other type. Use `PathSettings`
            or `JsonSettings` to say which one a string is.
    """
    match value:
        case PathSettings() | JsonSettings() | ObjectSettings():
            return value
        case SettingsObject():
            return ObjectSettings(settings=value)
        case str():
            msg = (
                "Ambiguous settings string, wrap it in PathSettings(...) for a file "
                "or JsonSettings(...) for raw JSON"
            )
            raise TypeError(msg)
        case os.PathLike():
            return PathSettings(path=Path(value))
        case _:
            msg = f"Cannot build settings from {type(value).__name__}"
            raise TypeError(msg)

"""Base models and the omission rule shared by all settings types."""

from __future__ import annotations

from typing import Any, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel


class SettingsModel(BaseModel):
    """Immutable settings record whose absent fields never get serialized.

    Keys are emitted exactly as the field names. Subclasses that need the
    camelCase wire format derive from `CamelSettingsModel` instead.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_absent(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        for name, field_info in type(self).model_fields.items():
            if getattr(self, name) is not None:
                continue
            key = field_info.alias if info.by_alias and field_info.alias else name
            data.pop(key, None)
        return data

    def to_dict(self) -> dict[str, Any]:
        """Encode into a JSON-compatible dict using the external key names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Encode into compact JSON text."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Decode from the external representation."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str) -> Self:
        """Decode from JSON text."""
        return cls.model_validate_json(text)


class CamelSettingsModel(SettingsModel):
    """Settings record with camelCase external keys (e.g. excluded_commands -> excludedCommands)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

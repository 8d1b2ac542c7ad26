"""Shared base for provider configuration read models."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Self
from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    """Immutable model bound to camelCase wire keys through field aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Return the wire representation, omitting unset values."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ProviderConfig(WireModel):
    """Fields common to every identity provider configuration."""

    name: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    enabled: bool = False

    @property
    def provider_id(self) -> str | None:
        """Return the trailing segment of the resource name."""
        if self.name is None:
            return None
        return self.name.split("/")[-1]

    @classmethod
    def from_wire(cls, document: Mapping[str, Any]) -> Self:
        """Decode an already parsed wire document."""
        return cls.model_validate(document)

    @classmethod
    def from_json(cls, payload: str | bytes) -> Self:
        """Decode a JSON wire document."""
        return cls.model_validate_json(payload)


__all__ = ["ProviderConfig", "WireModel"]

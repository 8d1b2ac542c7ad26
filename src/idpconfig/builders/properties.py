"""Nested property accumulator shared by the provider config builders."""

from __future__ import annotations
import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol
from idpconfig.validation import check_argument, require_non_empty


class ProviderIdFormat(Protocol):
    """Variant-specific provider ID rule injected into a request."""

    def validate_provider_id(self, provider_id: str) -> None:
        """Raise :class:`InvalidArgumentError` for unsupported provider IDs."""


@dataclass(frozen=True, slots=True)
class PrefixedProviderIdFormat:
    """Accept provider IDs that start with a protocol prefix such as ``saml.``."""

    prefix: str
    label: str

    def validate_provider_id(self, provider_id: str) -> None:
        """Reject provider IDs that lack the configured prefix."""
        check_argument(
            provider_id.startswith(self.prefix),
            f"Invalid {self.label} provider ID: {provider_id}",
        )


SAML_PROVIDER_ID = PrefixedProviderIdFormat(prefix="saml.", label="SAML")
OIDC_PROVIDER_ID = PrefixedProviderIdFormat(prefix="oidc.", label="OIDC")


def validate_provider_id(provider_id: Any, id_format: ProviderIdFormat) -> str:
    """Apply the generic non-empty check followed by the variant rule."""
    value = require_non_empty(provider_id, "Provider ID")
    check_argument("/" not in value, f"Provider ID must not contain '/': {value}")
    id_format.validate_provider_id(value)
    return value


def generate_update_mask(properties: Mapping[str, Any]) -> list[str]:
    """Return the sorted dotted paths of every leaf in ``properties``.

    Nested mappings are expanded; sequences count as leaves, so a list of
    certificates contributes a single ``idpConfig.idpCertificates`` entry.
    """
    mask: list[str] = []
    for key, value in properties.items():
        if isinstance(value, Mapping):
            mask.extend(f"{key}.{child}" for child in generate_update_mask(value))
        else:
            mask.append(key)
    return sorted(mask)


class PropertyTree:
    """Nested mapping whose intermediate nodes are created on first access."""

    def __init__(self) -> None:
        """Start with an empty tree."""
        self._root: dict[str, Any] = {}

    def __len__(self) -> int:
        """Return the number of top-level keys."""
        return len(self._root)

    def nested_map(self, path: str) -> dict[str, Any]:
        """Return the mapping stored at dotted ``path``, creating it if absent."""
        node = self._root
        for key in path.split("."):
            child = node.get(key)
            if child is None:
                child = {}
                node[key] = child
            node = child
        return node

    def nested_list(self, path: str) -> list[Any]:
        """Return the list stored at dotted ``path``, creating it if absent."""
        parent_path, _, key = path.rpartition(".")
        parent = self.nested_map(parent_path) if parent_path else self._root
        items = parent.get(key)
        if items is None:
            items = []
            parent[key] = items
        return items

    def set(self, path: str, value: Any) -> None:
        """Write ``value`` under dotted ``path``."""
        parent_path, _, key = path.rpartition(".")
        parent = self.nested_map(parent_path) if parent_path else self._root
        parent[key] = value

    def append(self, path: str, *values: Any) -> None:
        """Append ``values`` in order to the list stored at dotted ``path``."""
        self.nested_list(path).extend(values)

    def to_dict(self) -> dict[str, Any]:
        """Return a deep copy of the accumulated properties."""
        return copy.deepcopy(self._root)


class ProviderRequestState:
    """Provider ID and property tree owned by a single request builder."""

    def __init__(self, id_format: ProviderIdFormat) -> None:
        """Bind the state to the provider ID rule of one config variant."""
        self._id_format = id_format
        self.provider_id: str | None = None
        self.tree = PropertyTree()

    def set_provider_id(self, provider_id: Any) -> None:
        """Validate and store the provider ID outside of the property tree."""
        self.provider_id = validate_provider_id(provider_id, self._id_format)

    def set_display_name(self, display_name: Any) -> None:
        """Validate and store the display name."""
        self.tree.set("displayName", require_non_empty(display_name, "Display name"))

    def set_enabled(self, enabled: bool) -> None:
        """Store the enabled flag."""
        self.tree.set("enabled", enabled)

    def properties(self) -> dict[str, Any]:
        """Return a copy of the request body accumulated so far."""
        return self.tree.to_dict()

    def update_mask(self) -> list[str]:
        """Return the update mask for the accumulated properties."""
        return generate_update_mask(self.tree.to_dict())


__all__ = [
    "OIDC_PROVIDER_ID",
    "PrefixedProviderIdFormat",
    "PropertyTree",
    "ProviderIdFormat",
    "ProviderRequestState",
    "SAML_PROVIDER_ID",
    "generate_update_mask",
    "validate_provider_id",
]

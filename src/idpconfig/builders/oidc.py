"""Fluent builders for OIDC provider configuration requests."""

from __future__ import annotations
from typing import Any, Self
from idpconfig.builders.properties import OIDC_PROVIDER_ID, ProviderRequestState
from idpconfig.validation import assert_valid_url, require_non_empty


class _OidcProviderConfigRequest:
    def __init__(self) -> None:
        self._state = ProviderRequestState(OIDC_PROVIDER_ID)

    @property
    def provider_id(self) -> str | None:
        """Return the provider ID the request targets."""
        return self._state.provider_id

    @property
    def properties(self) -> dict[str, Any]:
        """Return a copy of the request body accumulated so far."""
        return self._state.properties()

    def set_display_name(self, display_name: str) -> Self:
        """Set the user-facing name of the provider."""
        self._state.set_display_name(display_name)
        return self

    def set_enabled(self, enabled: bool) -> Self:
        """Enable or disable the provider."""
        self._state.set_enabled(enabled)
        return self

    def set_client_id(self, client_id: str) -> Self:
        """Set the OAuth client ID registered with the issuer."""
        self._state.tree.set("clientId", require_non_empty(client_id, "Client ID"))
        return self

    def set_issuer(self, issuer: str) -> Self:
        """Set the issuer URL of the OpenID Connect provider."""
        value = require_non_empty(issuer, "Issuer")
        assert_valid_url(value)
        self._state.tree.set("issuer", value)
        return self


class OidcProviderConfigCreateRequest(_OidcProviderConfigRequest):
    """Request for creating a new OIDC provider."""

    def set_provider_id(self, provider_id: str) -> Self:
        """Set the provider ID; it must start with ``oidc.``."""
        self._state.set_provider_id(provider_id)
        return self


class OidcProviderConfigUpdateRequest(_OidcProviderConfigRequest):
    """Request for updating an existing OIDC provider."""

    def __init__(self, provider_id: str) -> None:
        """Create an update request targeting ``provider_id``."""
        super().__init__()
        self._state.set_provider_id(provider_id)

    def update_mask(self) -> list[str]:
        """Return the sorted field paths modified by this request."""
        return self._state.update_mask()


__all__ = ["OidcProviderConfigCreateRequest", "OidcProviderConfigUpdateRequest"]

"""Fluent builders for SAML provider configuration requests."""

from __future__ import annotations
from collections.abc import Iterable
from typing import Any, Self
from idpconfig.builders.properties import SAML_PROVIDER_ID, ProviderRequestState
from idpconfig.validation import assert_valid_url, check_argument, require_non_empty


class _SamlProviderConfigRequest:
    """Setters shared by the SAML create and update requests.

    Every setter validates its argument before touching the property tree, so
    a rejected call leaves the request exactly as it was.
    """

    def __init__(self) -> None:
        self._state = ProviderRequestState(SAML_PROVIDER_ID)

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

    def set_idp_entity_id(self, idp_entity_id: str) -> Self:
        """Set the entity ID of the identity provider."""
        value = require_non_empty(idp_entity_id, "IDP entity ID")
        self._state.tree.set("idpConfig.idpEntityId", value)
        return self

    def set_sso_url(self, sso_url: str) -> Self:
        """Set the identity provider's single sign-on URL."""
        value = require_non_empty(sso_url, "SSO URL")
        assert_valid_url(value)
        self._state.tree.set("idpConfig.ssoUrl", value)
        return self

    def add_x509_certificate(self, x509_certificate: str) -> Self:
        """Append a signing certificate of the identity provider."""
        value = require_non_empty(x509_certificate, "The x509 certificate")
        self._state.tree.append("idpConfig.idpCertificates", {"x509Certificate": value})
        return self

    def add_all_x509_certificates(self, x509_certificates: Iterable[str]) -> Self:
        """Append several certificates, validating all of them first."""
        check_argument(
            isinstance(x509_certificates, Iterable)
            and not isinstance(x509_certificates, str),
            "The x509 certificates must be a collection of strings.",
        )
        candidates = list(x509_certificates)
        check_argument(bool(candidates), "The x509 certificates must not be empty.")
        records = [
            {"x509Certificate": require_non_empty(item, "The x509 certificate")}
            for item in candidates
        ]
        self._state.tree.append("idpConfig.idpCertificates", *records)
        return self

    def set_rp_entity_id(self, rp_entity_id: str) -> Self:
        """Set the entity ID of the relying party."""
        value = require_non_empty(rp_entity_id, "RP entity ID")
        self._state.tree.set("spConfig.spEntityId", value)
        return self

    def set_callback_url(self, callback_url: str) -> Self:
        """Set the URL the identity provider posts assertions back to."""
        value = require_non_empty(callback_url, "Callback URL")
        assert_valid_url(value)
        self._state.tree.set("spConfig.callbackUri", value)
        return self


class SamlProviderConfigCreateRequest(_SamlProviderConfigRequest):
    """Request for creating a new SAML provider.

    Populate it with the chained setters and pass it to
    :meth:`idpconfig.client.ProviderConfigClient.create_saml_provider_config`.
    """

    def set_provider_id(self, provider_id: str) -> Self:
        """Set the provider ID; it must start with ``saml.``."""
        self._state.set_provider_id(provider_id)
        return self


class SamlProviderConfigUpdateRequest(_SamlProviderConfigRequest):
    """Request for updating an existing SAML provider."""

    def __init__(self, provider_id: str) -> None:
        """Create an update request targeting ``provider_id``."""
        super().__init__()
        self._state.set_provider_id(provider_id)

    def update_mask(self) -> list[str]:
        """Return the sorted field paths modified by this request."""
        return self._state.update_mask()


__all__ = ["SamlProviderConfigCreateRequest", "SamlProviderConfigUpdateRequest"]

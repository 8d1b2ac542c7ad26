"""Read model for OpenID Connect provider configurations."""

from __future__ import annotations
from pydantic import Field
from idpconfig.models.base import ProviderConfig


class OidcProviderConfig(ProviderConfig):
    """Metadata associated with an OIDC provider."""

    client_id: str | None = Field(default=None, alias="clientId")
    issuer: str | None = None


__all__ = ["OidcProviderConfig"]

"""Read models for identity provider configurations."""

from idpconfig.models.base import ProviderConfig, WireModel
from idpconfig.models.oidc import OidcProviderConfig
from idpconfig.models.saml import (
    IdpCertificate,
    IdpConfig,
    SamlProviderConfig,
    SpConfig,
)


__all__ = [
    "IdpCertificate",
    "IdpConfig",
    "OidcProviderConfig",
    "ProviderConfig",
    "SamlProviderConfig",
    "SpConfig",
    "WireModel",
]

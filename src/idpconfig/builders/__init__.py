"""Request builders for creating and updating provider configurations."""

from idpconfig.builders.oidc import (
    OidcProviderConfigCreateRequest,
    OidcProviderConfigUpdateRequest,
)
from idpconfig.builders.properties import (
    OIDC_PROVIDER_ID,
    SAML_PROVIDER_ID,
    PrefixedProviderIdFormat,
    PropertyTree,
    ProviderIdFormat,
    generate_update_mask,
    validate_provider_id,
)
from idpconfig.builders.saml import (
    SamlProviderConfigCreateRequest,
    SamlProviderConfigUpdateRequest,
)


__all__ = [
    "OIDC_PROVIDER_ID",
    "OidcProviderConfigCreateRequest",
    "OidcProviderConfigUpdateRequest",
    "PrefixedProviderIdFormat",
    "PropertyTree",
    "ProviderIdFormat",
    "SAML_PROVIDER_ID",
    "SamlProviderConfigCreateRequest",
    "SamlProviderConfigUpdateRequest",
    "generate_update_mask",
    "validate_provider_id",
]

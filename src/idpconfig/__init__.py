"""Data binding and validation for identity provider configuration APIs."""

from idpconfig.builders import (
    OidcProviderConfigCreateRequest,
    OidcProviderConfigUpdateRequest,
    SamlProviderConfigCreateRequest,
    SamlProviderConfigUpdateRequest,
)
from idpconfig.client import ProviderConfigClient
from idpconfig.errors import ApiRequestError, IdpConfigError, InvalidArgumentError
from idpconfig.http import HttpRequestInfo
from idpconfig.models import (
    OidcProviderConfig,
    ProviderConfig,
    SamlProviderConfig,
)


__all__ = [
    "ApiRequestError",
    "HttpRequestInfo",
    "IdpConfigError",
    "InvalidArgumentError",
    "OidcProviderConfig",
    "OidcProviderConfigCreateRequest",
    "OidcProviderConfigUpdateRequest",
    "ProviderConfig",
    "ProviderConfigClient",
    "SamlProviderConfig",
    "SamlProviderConfigCreateRequest",
    "SamlProviderConfigUpdateRequest",
]

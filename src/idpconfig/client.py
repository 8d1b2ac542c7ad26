"""HTTP client for managing SAML and OIDC provider configurations."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any, Self
from urllib.parse import quote
import httpx
from dynaconf import Dynaconf
from idpconfig.builders import (
    OIDC_PROVIDER_ID,
    SAML_PROVIDER_ID,
    OidcProviderConfigCreateRequest,
    OidcProviderConfigUpdateRequest,
    ProviderIdFormat,
    SamlProviderConfigCreateRequest,
    SamlProviderConfigUpdateRequest,
    validate_provider_id,
)
from idpconfig.config import DEFAULT_BASE_URL, get_settings
from idpconfig.errors import ApiRequestError, InvalidArgumentError
from idpconfig.http import HttpRequestInfo, ResponseInterceptor
from idpconfig.models import OidcProviderConfig, SamlProviderConfig
from idpconfig.validation import require_non_empty


logger = logging.getLogger(__name__)

CLIENT_VERSION = "Python/idpconfig/0.1.0"

_SAML_COLLECTION = "inboundSamlConfigs"
_SAML_ID_PARAM = "inboundSamlConfigId"
_OIDC_COLLECTION = "oauthIdpConfigs"
_OIDC_ID_PARAM = "oauthIdpConfigId"

CreateRequest = SamlProviderConfigCreateRequest | OidcProviderConfigCreateRequest
UpdateRequest = SamlProviderConfigUpdateRequest | OidcProviderConfigUpdateRequest


class ProviderConfigClient:
    """Small wrapper around :class:`httpx.Client` for provider config resources."""

    def __init__(
        self,
        project_id: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        headers: Mapping[str, str] | None = None,
        response_interceptor: ResponseInterceptor | None = None,
    ) -> None:
        """Create a client bound to ``project_id``."""
        self._project_id = require_non_empty(project_id, "Project ID")
        self._base_url = base_url.rstrip("/")
        self._headers = dict(headers or {})
        self._interceptor = response_interceptor
        self._client = httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(
        cls, settings: Dynaconf | None = None, **kwargs: Any
    ) -> ProviderConfigClient:
        """Create a client from the environment-driven settings."""
        settings = settings or get_settings()
        project_id = settings.get("PROJECT_ID")
        if not project_id:
            msg = "IDPCONFIG_PROJECT_ID must be set to build a client from settings."
            raise InvalidArgumentError(msg)
        return cls(
            project_id,
            base_url=settings.get("BASE_URL"),
            timeout=settings.get("TIMEOUT"),
            **kwargs,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def get_saml_provider_config(self, provider_id: str) -> SamlProviderConfig:
        """Fetch the SAML provider identified by ``provider_id``."""
        data = self._get(_SAML_COLLECTION, SAML_PROVIDER_ID, provider_id)
        return SamlProviderConfig.from_wire(data)

    def create_saml_provider_config(
        self, request: SamlProviderConfigCreateRequest
    ) -> SamlProviderConfig:
        """Register a new SAML provider and return the stored configuration."""
        data = self._create(_SAML_COLLECTION, _SAML_ID_PARAM, request)
        return SamlProviderConfig.from_wire(data)

    def update_saml_provider_config(
        self, request: SamlProviderConfigUpdateRequest
    ) -> SamlProviderConfig:
        """Apply ``request`` to an existing SAML provider."""
        data = self._update(_SAML_COLLECTION, request)
        return SamlProviderConfig.from_wire(data)

    def delete_saml_provider_config(self, provider_id: str) -> None:
        """Delete the SAML provider identified by ``provider_id``."""
        self._delete(_SAML_COLLECTION, SAML_PROVIDER_ID, provider_id)

    def get_oidc_provider_config(self, provider_id: str) -> OidcProviderConfig:
        """Fetch the OIDC provider identified by ``provider_id``."""
        data = self._get(_OIDC_COLLECTION, OIDC_PROVIDER_ID, provider_id)
        return OidcProviderConfig.from_wire(data)

    def create_oidc_provider_config(
        self, request: OidcProviderConfigCreateRequest
    ) -> OidcProviderConfig:
        """Register a new OIDC provider and return the stored configuration."""
        data = self._create(_OIDC_COLLECTION, _OIDC_ID_PARAM, request)
        return OidcProviderConfig.from_wire(data)

    def update_oidc_provider_config(
        self, request: OidcProviderConfigUpdateRequest
    ) -> OidcProviderConfig:
        """Apply ``request`` to an existing OIDC provider."""
        data = self._update(_OIDC_COLLECTION, request)
        return OidcProviderConfig.from_wire(data)

    def delete_oidc_provider_config(self, provider_id: str) -> None:
        """Delete the OIDC provider identified by ``provider_id``."""
        self._delete(_OIDC_COLLECTION, OIDC_PROVIDER_ID, provider_id)

    def _collection_url(self, collection: str) -> str:
        return f"{self._base_url}/projects/{self._project_id}/{collection}"

    def _resource_url(self, collection: str, provider_id: str) -> str:
        """Return the URL of one provider, quoting the ID as a single segment."""
        return f"{self._collection_url(collection)}/{quote(provider_id, safe='')}"

    def _get(
        self, collection: str, id_format: ProviderIdFormat, provider_id: str
    ) -> Any:
        provider_id = validate_provider_id(provider_id, id_format)
        info = HttpRequestInfo.build_get_request(
            self._resource_url(collection, provider_id)
        )
        return self._execute(info, f"fetching provider config {provider_id}")

    def _create(self, collection: str, id_param: str, request: CreateRequest) -> Any:
        if request.provider_id is None:
            msg = "Provider ID must be set before creating a provider config."
            raise InvalidArgumentError(msg)
        url = httpx.URL(
            self._collection_url(collection), params={id_param: request.provider_id}
        )
        info = HttpRequestInfo.build_post_request(url, request.properties)
        return self._execute(info, f"creating provider config {request.provider_id}")

    def _update(self, collection: str, request: UpdateRequest) -> Any:
        properties = request.properties
        if not properties:
            msg = "Update request must have at least one property set."
            raise InvalidArgumentError(msg)
        mask = ",".join(request.update_mask())
        url = httpx.URL(
            self._resource_url(collection, str(request.provider_id)),
            params={"updateMask": mask},
        )
        info = HttpRequestInfo.build_patch_request(url, properties)
        return self._execute(info, f"updating provider config {request.provider_id}")

    def _delete(
        self, collection: str, id_format: ProviderIdFormat, provider_id: str
    ) -> None:
        provider_id = validate_provider_id(provider_id, id_format)
        info = HttpRequestInfo.build_delete_request(
            self._resource_url(collection, provider_id)
        )
        self._execute(
            info, f"deleting provider config {provider_id}", expect_body=False
        )

    def _execute(
        self, info: HttpRequestInfo, description: str, *, expect_body: bool = True
    ) -> Any:
        """Send ``info`` and return the decoded JSON body.

        Responses without a JSON body are an error unless ``expect_body`` is
        false, in which case the body is ignored and ``None`` is returned.
        """
        info.add_all_headers(self._headers)
        info.add_header("X-Client-Version", CLIENT_VERSION)
        info.set_response_interceptor(self._interceptor)
        request = info.new_http_request(self._client)
        logger.debug("Dispatching %s %s", request.method, request.url)

        try:
            response = self._client.send(request)
        except httpx.HTTPError as exc:
            logger.warning("Transport failure while %s: %s", description, exc)
            msg = f"Unable to reach the identity toolkit API while {description}"
            raise ApiRequestError(msg) from exc

        if info.response_interceptor is not None:
            info.response_interceptor(response)

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning(
                "Request failed with status %s while %s", status, description
            )
            msg = f"API request failed with status {status} while {description}"
            raise ApiRequestError(msg, response=exc.response) from exc

        if not expect_body:
            return None
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("Response was not valid JSON while %s", description)
            msg = f"API returned a response without a JSON body while {description}"
            raise ApiRequestError(msg, response=response) from exc


__all__ = ["CLIENT_VERSION", "ProviderConfigClient"]

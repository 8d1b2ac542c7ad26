"""Read model for SAML provider configurations."""

from __future__ import annotations
from pydantic import Field, field_validator
from idpconfig.models.base import ProviderConfig, WireModel


class IdpCertificate(WireModel):
    """Certificate used to verify assertions signed by the identity provider."""

    x509_certificate: str | None = Field(default=None, alias="x509Certificate")


class IdpConfig(WireModel):
    """Identity provider half of a SAML configuration."""

    idp_entity_id: str | None = Field(default=None, alias="idpEntityId")
    sso_url: str | None = Field(default=None, alias="ssoUrl")
    idp_certificates: tuple[IdpCertificate, ...] = Field(
        default=(), alias="idpCertificates"
    )

    @field_validator("idp_certificates", mode="before")
    @classmethod
    def _default_certificates(cls, value: object) -> object:
        return () if value is None else value


class SpConfig(WireModel):
    """Relying party half of a SAML configuration."""

    rp_entity_id: str | None = Field(default=None, alias="spEntityId")
    callback_url: str | None = Field(default=None, alias="callbackUri")


class SamlProviderConfig(ProviderConfig):
    """Metadata associated with a SAML provider.

    Instances are frozen. Documents missing ``idpConfig`` or ``spConfig``
    decode to empty sections whose accessors return ``None``.
    """

    idp_config: IdpConfig = Field(default_factory=IdpConfig, alias="idpConfig")
    sp_config: SpConfig = Field(default_factory=SpConfig, alias="spConfig")

    @field_validator("idp_config", "sp_config", mode="before")
    @classmethod
    def _default_section(cls, value: object) -> object:
        return {} if value is None else value

    @property
    def idp_entity_id(self) -> str | None:
        return self.idp_config.idp_entity_id

    @property
    def sso_url(self) -> str | None:
        return self.idp_config.sso_url

    @property
    def x509_certificates(self) -> list[str]:
        """Return the certificate strings in the order the provider lists them."""
        return [
            certificate.x509_certificate
            for certificate in self.idp_config.idp_certificates
            if certificate.x509_certificate is not None
        ]

    @property
    def rp_entity_id(self) -> str | None:
        return self.sp_config.rp_entity_id

    @property
    def callback_url(self) -> str | None:
        return self.sp_config.callback_url


__all__ = ["IdpCertificate", "IdpConfig", "SamlProviderConfig", "SpConfig"]

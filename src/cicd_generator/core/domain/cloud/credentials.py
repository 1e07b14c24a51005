from typing import Any, ClassVar

from pydantic import Field, SecretStr, SerializationInfo, field_serializer

from cicd_generator.core.domain.profile_model import ProfileModel

REVEAL_SECRETS = "reveal_secrets"


class CredentialSet(ProfileModel):
    """Credential material for one provider.

    Secret fields are ``SecretStr`` and dump masked unless the serialization
    context carries ``{"reveal_secrets": True}``; only the vault codec asks for that.
    """

    secret_fields: ClassVar[tuple[str, ...]] = ()
    plain_fields: ClassVar[tuple[str, ...]] = ()

    @field_serializer("*", when_used="json")
    def _serialize_field(self, value: Any, info: SerializationInfo) -> Any:
        if isinstance(value, SecretStr):
            if info.context and info.context.get(REVEAL_SECRETS):
                return value.get_secret_value()
            return str(value)
        return value

    def secret_values(self) -> list[str]:
        return [getattr(self, name).get_secret_value() for name in self.secret_fields]


class AwsCredentials(CredentialSet):
    secret_fields: ClassVar[tuple[str, ...]] = ("access_key_id", "secret_access_key")
    plain_fields: ClassVar[tuple[str, ...]] = ("region",)

    access_key_id: SecretStr = Field(..., min_length=1)
    secret_access_key: SecretStr = Field(..., min_length=1)
    region: str


class AzureCredentials(CredentialSet):
    secret_fields: ClassVar[tuple[str, ...]] = (
        "client_id",
        "client_secret",
        "tenant_id",
        "subscription_id",
    )

    subscription_id: SecretStr = Field(..., min_length=1)
    client_id: SecretStr = Field(..., min_length=1)
    client_secret: SecretStr = Field(..., min_length=1)
    tenant_id: SecretStr = Field(..., min_length=1)


class GcpCredentials(CredentialSet):
    secret_fields: ClassVar[tuple[str, ...]] = ("project_id", "key_file")
    plain_fields: ClassVar[tuple[str, ...]] = ("region",)

    project_id: SecretStr = Field(..., min_length=1)
    key_file: SecretStr = Field(..., min_length=1)
    region: str


class DigitalOceanCredentials(CredentialSet):
    secret_fields: ClassVar[tuple[str, ...]] = ("api_token",)
    plain_fields: ClassVar[tuple[str, ...]] = ("region",)

    api_token: SecretStr = Field(..., min_length=1)
    region: str


CloudCredentials = AwsCredentials | AzureCredentials | GcpCredentials | DigitalOceanCredentials

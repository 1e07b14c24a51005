import logging
from typing import TypeVar

from cicd_generator.core.domain.artifacts.credential_binding import CredentialBinding
from cicd_generator.core.domain.cloud.cloud_profile import CloudProfile
from cicd_generator.core.domain.cloud.cloud_provider_type import CloudProviderType
from cicd_generator.core.domain.cloud.credentials import (
    AwsCredentials,
    AzureCredentials,
    CredentialSet,
    DigitalOceanCredentials,
    GcpCredentials,
)
from cicd_generator.core.domain.notification.notification_profile import NotificationProfile
from cicd_generator.core.exceptions.malformed_input_error import MalformedInputError
from cicd_generator.templates.template_renderer_service import TemplateRendererService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CredentialSet)


class CredentialBindingResolver:
    """Maps credential sets to Jenkins ``credentials('<id>')`` references.

    The resolver only ever reads which fields a credential variant has; secret
    values are never copied into a binding.
    """

    def __init__(self, renderer: TemplateRendererService):
        self.renderer = renderer

    def enumerate_credential_bindings(self, cloud: CloudProfile) -> list[CredentialBinding]:
        credentials = cloud.credentials
        match cloud.provider:
            case CloudProviderType.AWS:
                aws = self._expect(cloud, credentials, AwsCredentials)
                return [
                    CredentialBinding(
                        env_var="AWS_ACCESS_KEY_ID",
                        credential_id="aws-access-key-id",
                        description="Access key id of the IAM user that deploys to ECS",
                    ),
                    CredentialBinding(
                        env_var="AWS_SECRET_ACCESS_KEY",
                        credential_id="aws-secret-access-key",
                        description="Secret access key paired with the access key id",
                    ),
                    CredentialBinding(
                        env_var="AWS_REGION",
                        literal=aws.region,
                        description="Default region for the AWS CLI",
                    ),
                ]
            case CloudProviderType.AZURE:
                self._expect(cloud, credentials, AzureCredentials)
                return [
                    CredentialBinding(
                        env_var="AZURE_CLIENT_ID",
                        credential_id="azure-client-id",
                        description="Application (client) id of the service principal",
                    ),
                    CredentialBinding(
                        env_var="AZURE_CLIENT_SECRET",
                        credential_id="azure-client-secret",
                        description="Client secret of the service principal",
                    ),
                    CredentialBinding(
                        env_var="AZURE_TENANT_ID",
                        credential_id="azure-tenant-id",
                        description="Directory (tenant) id of the service principal",
                    ),
                    CredentialBinding(
                        env_var="AZURE_SUBSCRIPTION_ID",
                        credential_id="azure-subscription-id",
                        description="Subscription that hosts the container app",
                    ),
                ]
            case CloudProviderType.GCP:
                gcp = self._expect(cloud, credentials, GcpCredentials)
                return [
                    CredentialBinding(
                        env_var="GCP_PROJECT_ID",
                        credential_id="gcp-project-id",
                        description="Google Cloud project that hosts the Cloud Run service",
                    ),
                    CredentialBinding(
                        env_var="GCP_KEY_FILE",
                        credential_id="gcp-key-file",
                        credential_kind="Secret file",
                        description="Service account JSON key; Jenkins exposes it as a file path",
                    ),
                    CredentialBinding(
                        env_var="GCP_REGION",
                        literal=gcp.region,
                        description="Default region for gcloud",
                    ),
                ]
            case CloudProviderType.DIGITALOCEAN:
                do = self._expect(cloud, credentials, DigitalOceanCredentials)
                return [
                    CredentialBinding(
                        env_var="DO_API_TOKEN",
                        credential_id="do-api-token",
                        description="Personal access token with read/write scope",
                    ),
                    CredentialBinding(
                        env_var="DO_REGION",
                        literal=do.region,
                        description="Default region for doctl",
                    ),
                ]
            case _:
                logger.warning("No credential bindings defined for provider %s", cloud.provider)
                return []

    def enumerate_notification_bindings(
        self, notifications: NotificationProfile
    ) -> list[CredentialBinding]:
        return [
            CredentialBinding(
                env_var=f"{platform.type.upper()}_WEBHOOK_URL",
                credential_id=f"{platform.type}-webhook-url",
                description=f"Incoming webhook URL for {platform.type.capitalize()} notifications",
            )
            for platform in notifications.platforms
        ]

    def resolve_credential_bindings(self, cloud: CloudProfile) -> str:
        return self.render_binding_block(self.enumerate_credential_bindings(cloud))

    def resolve_notification_bindings(self, notifications: NotificationProfile) -> str:
        return self.render_binding_block(self.enumerate_notification_bindings(notifications))

    def render_binding_block(self, bindings: list[CredentialBinding]) -> str:
        if not bindings:
            return ""
        return self.renderer.render("credential_bindings", {"bindings": bindings})

    @staticmethod
    def _expect(
        cloud: CloudProfile, credentials: CredentialSet, expected: type[T]
    ) -> T:
        if not isinstance(credentials, expected):
            raise MalformedInputError(
                f"Provider '{cloud.provider}' requires {expected.__name__}, "
                f"got {type(credentials).__name__}",
                context={"provider": str(cloud.provider), "credentials": type(credentials).__name__},
            )
        return credentials

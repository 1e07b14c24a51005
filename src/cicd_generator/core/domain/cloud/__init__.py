from cicd_generator.core.domain.cloud.cloud_profile import CloudProfile
from cicd_generator.core.domain.cloud.cloud_provider_type import CloudProviderType
from cicd_generator.core.domain.cloud.credentials import (
    AwsCredentials,
    AzureCredentials,
    CloudCredentials,
    CredentialSet,
    DigitalOceanCredentials,
    GcpCredentials,
)
from cicd_generator.core.domain.cloud.deployment_profile import DeploymentProfile

__all__ = [
    "AwsCredentials",
    "AzureCredentials",
    "CloudCredentials",
    "CloudProfile",
    "CloudProviderType",
    "CredentialSet",
    "DeploymentProfile",
    "DigitalOceanCredentials",
    "GcpCredentials",
]

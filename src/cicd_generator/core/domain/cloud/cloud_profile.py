import re

from pydantic import Field, field_validator, model_validator

from cicd_generator.core.domain.cloud.cloud_provider_type import CloudProviderType
from cicd_generator.core.domain.cloud.credentials import CloudCredentials
from cicd_generator.core.domain.cloud.deployment_profile import DeploymentProfile
from cicd_generator.core.domain.profile_model import ProfileModel

# Provider region ids: us-east-1, eastus, us-central1, nyc1
_REGION_PATTERN = re.compile(r"[a-z0-9][a-z0-9-]*")


class CloudProfile(ProfileModel):
    provider: CloudProviderType
    credentials: CloudCredentials = Field(..., description="Credential variant matching the provider")
    region: str = Field(..., min_length=1)
    instance_type: str = Field(..., min_length=1)
    deployment_config: DeploymentProfile = Field(default_factory=DeploymentProfile)

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        if not _REGION_PATTERN.fullmatch(v):
            raise ValueError("region must be a provider region id such as 'us-east-1'")
        return v

    @model_validator(mode="after")
    def validate_credentials_region(self) -> "CloudProfile":
        # Bindings export the credential region, scripts deploy to cloud.region
        credentials_region = getattr(self.credentials, "region", None)
        if credentials_region is not None and credentials_region != self.region:
            raise ValueError(
                f"credentials.region '{credentials_region}' must equal region '{self.region}'"
            )
        return self


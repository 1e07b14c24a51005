import re

from pydantic import Field, field_validator, model_validator

from cicd_generator.core.domain.profile_model import ProfileModel

_HEALTH_CHECK_PATTERN = re.compile(r"/[A-Za-z0-9._~/?=&%-]*")


class DeploymentProfile(ProfileModel):
    tier: str = "production"
    auto_scaling: bool = False
    min_instances: int | None = None
    max_instances: int | None = None
    health_check_path: str = "/health"
    port: int = Field(default=3000, ge=1, le=65535)

    @field_validator("health_check_path")
    @classmethod
    def validate_health_check_path(cls, v: str) -> str:
        if not _HEALTH_CHECK_PATTERN.fullmatch(v):
            raise ValueError("health_check_path must be a URL path starting with '/'")
        return v

    @model_validator(mode="after")
    def validate_scaling_bounds(self) -> "DeploymentProfile":
        if not self.auto_scaling:
            return self
        if self.min_instances is None or self.max_instances is None:
            raise ValueError("min_instances and max_instances are required when auto_scaling is enabled")
        if self.min_instances <= 0 or self.max_instances <= 0:
            raise ValueError("min_instances and max_instances must be greater than 0")
        if self.min_instances > self.max_instances:
            raise ValueError("min_instances cannot exceed max_instances")
        return self

    @property
    def desired_min_instances(self) -> int:
        # Without auto-scaling the service always runs a single instance.
        return self.min_instances if self.auto_scaling and self.min_instances else 1

    @property
    def desired_max_instances(self) -> int:
        return self.max_instances if self.auto_scaling and self.max_instances else 1

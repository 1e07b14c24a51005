from pydantic import Field, field_validator

from cicd_generator.core.domain.profile_model import ProfileModel, SingleLineStr


class PipelineProfile(ProfileModel):
    agent_label: SingleLineStr = "docker"
    timeout: int = Field(default=60, gt=0, description="Overall pipeline timeout in minutes")
    retry_count: int = Field(default=2, ge=0, description="Attempts applied to every stage")

    @field_validator("agent_label")
    @classmethod
    def validate_agent_label(cls, v: str) -> str:
        if not v.strip() or "'" in v:
            raise ValueError("agent_label cannot be empty or contain quotes")
        return v.strip()

from enum import StrEnum

from pydantic import BaseModel, Field


class ArtifactName(StrEnum):
    PIPELINE = "pipeline"
    CREDENTIALS_GUIDE = "credentials_guide"
    README = "readme"
    ENV_TEMPLATE = "env_template"
    SNAPSHOT = "snapshot"


class ArtifactErrorModel(BaseModel):
    type: str
    message: str


class ArtifactBundle(BaseModel):
    pipeline: str | None = None
    credentials_guide: str | None = None
    readme: str | None = None
    env_template: str | None = None
    snapshot: str | None = Field(default=None, description="Encrypted configuration snapshot")
    snapshot_recoverable: bool = False

    errors: dict[ArtifactName, ArtifactErrorModel] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def failed(self, name: ArtifactName) -> bool:
        return name in self.errors

import re
from enum import StrEnum, auto

from pydantic import Field, field_validator, model_validator

from cicd_generator.core.domain.profile_model import ProfileModel, SingleLineStr

_REPOSITORY_PATTERN = re.compile(r"(https?://|git@|ssh://)\S+")


class ProjectType(StrEnum):
    FRONTEND = auto()
    BACKEND = auto()
    FULLSTACK = auto()


class LanguageType(StrEnum):
    JAVASCRIPT = auto()
    TYPESCRIPT = auto()


class ServiceKind(StrEnum):
    DATABASE = auto()
    CACHE = auto()
    MESSAGE_QUEUE = auto()
    STORAGE = auto()
    API = auto()


class ExternalService(ProfileModel):
    name: SingleLineStr = Field(..., min_length=1, description="Service name, e.g. 'orders-db'")
    kind: ServiceKind

    @property
    def env_var(self) -> str:
        """Environment variable that carries the connection string for this service."""
        stem = re.sub(r"[^A-Z0-9]+", "_", self.name.upper()).strip("_")
        return f"{stem}_URL"


class ProjectProfile(ProfileModel):
    project_name: SingleLineStr = Field(..., min_length=1)
    project_type: ProjectType
    language: LanguageType
    repository: str = Field(..., description="Git repository URL")
    branch: SingleLineStr = Field(default="main", min_length=1)
    has_dockerfile: bool = False
    dockerfile_path: SingleLineStr | None = None
    run_tests: bool = False
    test_command: SingleLineStr | None = None
    build_command: SingleLineStr = "npm run build"
    external_services: tuple[ExternalService, ...] = ()

    @property
    def image_name(self) -> str:
        """Deterministic container image identifier derived from the project name."""
        slug = re.sub(r"[^a-z0-9]+", "-", self.project_name.lower()).strip("-")
        return slug or "app"

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str) -> str:
        if not _REPOSITORY_PATTERN.fullmatch(v):
            raise ValueError("repository must be an http(s), ssh or git@ URL")
        return v

    @model_validator(mode="after")
    def validate_optional_pairs(self) -> "ProjectProfile":
        if self.run_tests != bool(self.test_command):
            raise ValueError("test_command must be set if and only if run_tests is true")
        if self.has_dockerfile != bool(self.dockerfile_path):
            raise ValueError("dockerfile_path must be set if and only if has_dockerfile is true")
        names = [service.env_var for service in self.external_services]
        if len(names) != len(set(names)):
            raise ValueError("external_services names must be unique")
        return self

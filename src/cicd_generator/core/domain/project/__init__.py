from cicd_generator.core.domain.project.project_profile import (
    ExternalService,
    LanguageType,
    ProjectProfile,
    ProjectType,
    ServiceKind,
)

__all__ = ["ExternalService", "LanguageType", "ProjectProfile", "ProjectType", "ServiceKind"]

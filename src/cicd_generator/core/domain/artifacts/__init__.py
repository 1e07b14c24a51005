from cicd_generator.core.domain.artifacts.artifact_bundle import (
    ArtifactBundle,
    ArtifactErrorModel,
    ArtifactName,
)
from cicd_generator.core.domain.artifacts.credential_binding import CredentialBinding

__all__ = ["ArtifactBundle", "ArtifactErrorModel", "ArtifactName", "CredentialBinding"]

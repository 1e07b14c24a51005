import logging
from collections.abc import Callable

from cicd_generator.core.application.documentation.documentation_renderer_service import (
    DocumentationRendererService,
)
from cicd_generator.core.application.pipeline.pipeline_assembler_service import (
    PipelineAssemblerService,
)
from cicd_generator.core.application.vault.credential_vault_codec import CredentialVaultCodec
from cicd_generator.core.domain.artifacts.artifact_bundle import (
    ArtifactBundle,
    ArtifactErrorModel,
    ArtifactName,
)
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.core.exceptions.generator_error import GeneratorError

logger = logging.getLogger(__name__)


class GenerateArtifactsUseCase:
    """
    Produces every artifact for one configuration.
    Pipeline -> Credentials guide -> README -> Env template -> Encrypted snapshot.
    Each artifact is generated independently; a failure is recorded against that
    artifact and the others are still produced.
    """

    def __init__(
        self,
        assembler: PipelineAssemblerService,
        documentation: DocumentationRendererService,
        codec: CredentialVaultCodec,
    ):
        self.assembler = assembler
        self.documentation = documentation
        self.codec = codec

    def execute(self, generator_input: GeneratorInput) -> ArtifactBundle:
        project_name = generator_input.project.project_name
        logger.info(f"Generating artifacts for project '{project_name}' on {generator_input.cloud.provider}")

        steps: list[tuple[ArtifactName, Callable[[GeneratorInput], str | None]]] = [
            (ArtifactName.PIPELINE, self.assembler.assemble_pipeline),
            (ArtifactName.CREDENTIALS_GUIDE, self.documentation.generate_credentials_setup_guide),
            (ArtifactName.README, self.documentation.generate_readme),
            (ArtifactName.ENV_TEMPLATE, self.documentation.generate_env_template),
            (ArtifactName.SNAPSHOT, self.codec.encrypt),
        ]

        outputs: dict[str, str | None] = {}
        errors: dict[ArtifactName, ArtifactErrorModel] = {}
        for name, generate in steps:
            try:
                outputs[name.value] = generate(generator_input)
            except GeneratorError as e:
                logger.error(f"Artifact '{name}' failed: {type(e).__name__}: {e.message}")
                errors[name] = ArtifactErrorModel(type=type(e).__name__, message=e.message)

        bundle = ArtifactBundle(
            **outputs,
            snapshot_recoverable=self.codec.snapshot_is_recoverable
            and ArtifactName.SNAPSHOT not in errors,
            errors=errors,
        )
        if bundle.ok:
            logger.info(f"Generated all artifacts for project '{project_name}'")
        else:
            logger.warning(f"Generated artifacts for '{project_name}' with failures: {sorted(errors)}")
        return bundle

from cicd_generator.core.application.credentials.credential_binding_resolver import (
    CredentialBindingResolver,
)
from cicd_generator.core.application.deployment.provider_script_catalog import (
    ProviderScriptCatalog,
)
from cicd_generator.core.application.documentation.documentation_renderer_service import (
    DocumentationRendererService,
)
from cicd_generator.core.application.pipeline.pipeline_assembler_service import (
    PipelineAssemblerService,
)
from cicd_generator.core.application.usecases.generate_artifacts_usecase import (
    GenerateArtifactsUseCase,
)
from cicd_generator.core.application.vault.credential_vault_codec import (
    CredentialVaultCodec,
    build_vault_codec,
)
from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.templates.template_file_loader_service import TemplateFileLoaderService
from cicd_generator.templates.template_registry_service import TemplateRegistryService
from cicd_generator.templates.template_renderer_service import TemplateRendererService


def build_template_renderer(settings: GeneratorSettings) -> TemplateRendererService:
    registry = TemplateRegistryService(settings.template_catalog_root)
    return TemplateRendererService(registry, TemplateFileLoaderService())


def build_pipeline_assembler(renderer: TemplateRendererService) -> PipelineAssemblerService:
    return PipelineAssemblerService(
        renderer,
        ProviderScriptCatalog(renderer),
        CredentialBindingResolver(renderer),
    )


def build_vault(settings: GeneratorSettings) -> CredentialVaultCodec:
    return build_vault_codec(settings.encryption_key)


def build_generate_artifacts_usecase(
    settings: GeneratorSettings,
    codec: CredentialVaultCodec | None = None,
) -> GenerateArtifactsUseCase:
    """Wire the whole engine from settings. A codec may be passed to share one key across calls."""
    renderer = build_template_renderer(settings)
    assembler = build_pipeline_assembler(renderer)
    documentation = DocumentationRendererService(
        renderer, assembler.binding_resolver, assembler
    )
    return GenerateArtifactsUseCase(
        assembler=assembler,
        documentation=documentation,
        codec=codec or build_vault(settings),
    )

from .template_file_loader_service import TemplateFileLoaderService
from .template_manifest_model import TemplateEntryModel, TemplateManifestModel
from .template_registry_service import TemplateRegistryService
from .template_renderer_service import TemplateRendererService

__all__ = [
    "TemplateEntryModel",
    "TemplateManifestModel",
    "TemplateRegistryService",
    "TemplateFileLoaderService",
    "TemplateRendererService",
]

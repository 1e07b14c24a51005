from collections.abc import Mapping
from typing import Any

from jinja2 import BaseLoader, Environment, StrictUndefined, Template, TemplateError
from pydantic import SecretBytes, SecretStr

from cicd_generator.core.exceptions.template_render_error import TemplateRenderError
from cicd_generator.templates.template_file_loader_service import TemplateFileLoaderService
from cicd_generator.templates.template_filters import FILTERS
from cicd_generator.templates.template_registry_service import TemplateRegistryService


class TemplateRendererService:
    """Renders catalog templates through their declared slots.

    A render context must provide exactly the slots the manifest declares for the
    template, and may not contain secret values anywhere inside it.
    """

    def __init__(
        self,
        registry: TemplateRegistryService,
        loader: TemplateFileLoaderService,
    ):
        self.registry = registry
        self.loader = loader
        # Use StrictUndefined to raise errors for missing variables
        self.jinja_env = Environment(
            loader=BaseLoader(),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        self.jinja_env.filters.update(FILTERS)

        self._catalog_dir = self.registry.resolve_catalog_dir()
        self._manifest = self.loader.load_manifest(self._catalog_dir)
        self._compiled: dict[str, Template] = {}

    def declared_slots(self, template_id: str) -> list[str]:
        return list(self._entry(template_id).slots)

    def render(self, template_id: str, context: Mapping[str, Any]) -> str:
        entry = self._entry(template_id)
        self._validate_slots(template_id, entry.slots, context)
        self._reject_secrets(template_id, context)

        try:
            template = self._template(template_id, entry.path)
            return template.render(**context)
        except TemplateError as e:
            # Wrap errors with context
            raise TemplateRenderError(
                f"Error rendering {template_id}: {e}", context={"template_id": template_id}
            ) from e
        except ValueError as e:
            raise TemplateRenderError(
                f"Error rendering {template_id}: {e}", context={"template_id": template_id}
            ) from e

    def _entry(self, template_id: str):
        try:
            return self._manifest.entry(template_id)
        except KeyError:
            raise TemplateRenderError(
                f"Unknown template '{template_id}'", context={"template_id": template_id}
            ) from None

    def _template(self, template_id: str, relative_path: str) -> Template:
        if template_id not in self._compiled:
            source = self.loader.load_template_source(self._catalog_dir, relative_path)
            self._compiled[template_id] = self.jinja_env.from_string(source)
        return self._compiled[template_id]

    @staticmethod
    def _validate_slots(template_id: str, slots: list[str], context: Mapping[str, Any]) -> None:
        missing = sorted(set(slots) - set(context))
        unexpected = sorted(set(context) - set(slots))
        if missing or unexpected:
            raise TemplateRenderError(
                f"Template '{template_id}' slot mismatch: missing={missing} unexpected={unexpected}",
                context={"template_id": template_id, "missing": missing, "unexpected": unexpected},
            )

    @classmethod
    def _reject_secrets(cls, template_id: str, value: Any, path: str = "context") -> None:
        if isinstance(value, (SecretStr, SecretBytes)):
            raise TemplateRenderError(
                f"Secret value passed to template '{template_id}' at {path}",
                context={"template_id": template_id, "path": path},
            )
        if isinstance(value, Mapping):
            for key, item in value.items():
                cls._reject_secrets(template_id, item, f"{path}.{key}")
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                cls._reject_secrets(template_id, item, f"{path}[{index}]")

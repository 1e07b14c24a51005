from pathlib import Path

import yaml
from pydantic import ValidationError

from cicd_generator.templates.template_manifest_model import TemplateManifestModel

MANIFEST_FILE_NAME = "template_manifest.yaml"


class TemplateFileLoaderService:
    def load_manifest(self, catalog_dir: Path) -> TemplateManifestModel:
        """
        Loads and validates the template_manifest.yaml of a catalog.
        """
        manifest_path = catalog_dir / MANIFEST_FILE_NAME
        if not manifest_path.exists():
            raise FileNotFoundError(f"Manifest not found in {catalog_dir}")

        with open(manifest_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in manifest: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Manifest in {catalog_dir} must be a mapping")
        try:
            return TemplateManifestModel(**data)
        except ValidationError as e:
            raise ValueError(f"Invalid manifest in {catalog_dir}: {e}") from e

    def load_template_source(self, catalog_dir: Path, relative_path: str) -> str:
        """
        Reads the raw Jinja source of one template declared in the manifest.
        """
        path = catalog_dir / relative_path
        if not path.is_file():
            raise FileNotFoundError(f"Template file not found: {path}")
        return path.read_text(encoding="utf-8")

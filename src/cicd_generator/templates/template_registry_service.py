from pathlib import Path

DEFAULT_CATALOG_ROOT = Path(__file__).parent / "catalog"


class TemplateRegistryService:
    def __init__(self, catalog_root: Path | None = None):
        self.catalog_root = catalog_root or DEFAULT_CATALOG_ROOT

    def resolve_catalog_dir(self) -> Path:
        """
        Resolves the template catalog directory and strictly verifies it exists.
        """
        catalog_dir = self.catalog_root

        if not catalog_dir.exists():
            raise FileNotFoundError(f"Template catalog not found: {catalog_dir}")

        if not catalog_dir.is_dir():
            raise NotADirectoryError(f"Template catalog is not a directory: {catalog_dir}")

        return catalog_dir

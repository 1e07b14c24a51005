import os
import tempfile
from pathlib import Path

from cicd_generator.core.application.vault.credential_vault_codec import CredentialVaultCodec
from cicd_generator.core.domain.artifacts.artifact_bundle import ArtifactBundle
from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("artifact_writer")

CREDENTIALS_GUIDE_FILE = "CREDENTIALS_SETUP.md"
README_FILE = "README.md"
SNAPSHOT_FILE = "config.encrypted.json"
ENV_TEMPLATE_FILE = ".env.template"
GITIGNORE_CONTENT = f"{SNAPSHOT_FILE}\n*.log\n"


class ArtifactFileWriterAdapter:
    """Places a generated bundle inside a project directory.

    The pipeline and env template go to the project root; the guide, README and
    encrypted snapshot go to the CI/CD directory next to a .gitignore that keeps
    the snapshot out of version control.
    """

    def __init__(self, settings: GeneratorSettings):
        self.jenkinsfile_name = settings.jenkinsfile_name
        self.cicd_dir_name = settings.cicd_dir_name

    def planned_files(self, root: Path, bundle: ArtifactBundle) -> dict[Path, str]:
        cicd_dir = root / self.cicd_dir_name
        files: dict[Path, str] = {}
        if bundle.pipeline is not None:
            files[root / self.jenkinsfile_name] = bundle.pipeline
        if bundle.credentials_guide is not None:
            files[cicd_dir / CREDENTIALS_GUIDE_FILE] = bundle.credentials_guide
        if bundle.readme is not None:
            files[cicd_dir / README_FILE] = bundle.readme
        if bundle.snapshot is not None:
            files[cicd_dir / SNAPSHOT_FILE] = CredentialVaultCodec.dump_snapshot_file(bundle.snapshot)
            files[cicd_dir / ".gitignore"] = GITIGNORE_CONTENT
        if bundle.env_template is not None:
            files[root / ENV_TEMPLATE_FILE] = bundle.env_template
        return files

    def write(self, root: Path, bundle: ArtifactBundle) -> list[Path]:
        written = []
        for path, content in self.planned_files(root, bundle).items():
            path.parent.mkdir(parents=True, exist_ok=True)
            self._write_atomic(path, content)
            written.append(path)
        logger.info(
            "Artifacts written",
            context_project=str(root),
            files=[str(path.relative_to(root)) for path in written],
        )
        return written

    @staticmethod
    def _write_atomic(path: Path, content: str) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        # Temp file in the target directory so the rename stays on one filesystem
        tmp = tempfile.NamedTemporaryFile(
            "w", dir=path.parent, delete=False, encoding="utf-8", newline="\n"
        )
        try:
            with tmp:
                tmp.write(content)
            os.replace(tmp.name, path)
        except Exception as exc:
            logger.error(
                "Failed to write artifact",
                error_type=type(exc).__name__,
                error_details=str(path),
            )
            Path(tmp.name).unlink(missing_ok=True)
            raise

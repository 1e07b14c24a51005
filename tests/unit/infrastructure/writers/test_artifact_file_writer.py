import json

import pytest

from cicd_generator.core.domain.artifacts.artifact_bundle import ArtifactBundle
from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.writers.artifact_file_writer_adapter import (
    ArtifactFileWriterAdapter,
)


def full_bundle(**overrides) -> ArtifactBundle:
    values = {
        "pipeline": "pipeline {}\n",
        "credentials_guide": "# guide\n",
        "readme": "# readme\n",
        "env_template": "DB_URL=\n",
        "snapshot": "gAAAAAB-token",
        "snapshot_recoverable": True,
    }
    values.update(overrides)
    return ArtifactBundle(**values)


def test_writes_original_layout(tmp_path, settings):
    writer = ArtifactFileWriterAdapter(settings)

    written = writer.write(tmp_path, full_bundle())

    assert sorted(str(path.relative_to(tmp_path)) for path in written) == [
        ".cicd/.gitignore",
        ".cicd/CREDENTIALS_SETUP.md",
        ".cicd/README.md",
        ".cicd/config.encrypted.json",
        ".env.template",
        "Jenkinsfile",
    ]
    assert (tmp_path / "Jenkinsfile").read_text() == "pipeline {}\n"
    assert json.loads((tmp_path / ".cicd" / "config.encrypted.json").read_text()) == {
        "encrypted": "gAAAAAB-token"
    }
    assert (tmp_path / ".cicd" / ".gitignore").read_text() == "config.encrypted.json\n*.log\n"


def test_skips_missing_artifacts(tmp_path, settings):
    writer = ArtifactFileWriterAdapter(settings)

    writer.write(tmp_path, full_bundle(env_template=None, snapshot=None))

    assert not (tmp_path / ".env.template").exists()
    assert not (tmp_path / ".cicd" / "config.encrypted.json").exists()
    assert not (tmp_path / ".cicd" / ".gitignore").exists()
    assert (tmp_path / ".cicd" / "README.md").exists()


def test_overwrites_existing_files_without_leftovers(tmp_path, settings):
    writer = ArtifactFileWriterAdapter(settings)
    (tmp_path / "Jenkinsfile").write_text("old")

    writer.write(tmp_path, full_bundle())

    assert (tmp_path / "Jenkinsfile").read_text() == "pipeline {}\n"
    assert sorted(p.name for p in tmp_path.iterdir()) == [".cicd", ".env.template", "Jenkinsfile"]


def test_layout_follows_settings(tmp_path, encryption_key):
    settings = GeneratorSettings(
        _env_file=None,
        encryption_key=encryption_key,
        jenkinsfile_name="Jenkinsfile.deploy",
        cicd_dir_name="ci",
    )

    written = ArtifactFileWriterAdapter(settings).write(tmp_path, full_bundle(env_template=None))

    assert tmp_path / "Jenkinsfile.deploy" in written
    assert tmp_path / "ci" / "README.md" in written


def test_failed_write_leaves_no_temp_file(tmp_path):
    with pytest.raises(UnicodeEncodeError):
        ArtifactFileWriterAdapter._write_atomic(tmp_path / "Jenkinsfile", "pipeline \ud800")

    assert list(tmp_path.iterdir()) == []

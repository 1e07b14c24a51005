"""CLI entrypoints for cicd-generator commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from cicd_generator.core.application.vault.credential_vault_codec import CredentialVaultCodec
from cicd_generator.core.domain.artifacts.artifact_bundle import ArtifactBundle, ArtifactName
from cicd_generator.core.domain.cloud.credentials import REVEAL_SECRETS
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.core.exceptions.generator_error import GeneratorError
from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.loaders.generator_input_parser_service import (
    GeneratorInputParserService,
)
from cicd_generator.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from cicd_generator.infrastructure.observability.redaction_service import mask_secret
from cicd_generator.infrastructure.resolution.container import (
    build_generate_artifacts_usecase,
    build_vault,
)
from cicd_generator.infrastructure.writers.artifact_file_writer_adapter import (
    ArtifactFileWriterAdapter,
)

logger = get_logger("cli")


def _add_verbose_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log at debug level.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cicd-generator",
        description="Generate a Jenkins pipeline, deployment script and setup docs from a configuration file.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate artifacts from a YAML or JSON configuration file.",
    )
    generate_parser.add_argument("config", type=Path, help="Path to the configuration file.")
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path("."),
        help="Project directory that receives the artifacts (defaults to current directory).",
    )

    decrypt_parser = subparsers.add_parser(
        "decrypt",
        help="Print the configuration stored in an encrypted snapshot file.",
    )
    decrypt_parser.add_argument("snapshot", type=Path, help="Path to config.encrypted.json.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for cicd-generator commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = GeneratorSettings()
    configure_logging(
        "DEBUG" if args.verbose else settings.log_level,
        log_format=settings.log_format,
        app_env=settings.app_env,
    )

    if args.command == "generate":
        _run_generate(parser, settings, args.config, args.output)
    elif args.command == "decrypt":
        _run_decrypt(parser, settings, args.snapshot)


def _run_generate(
    parser: argparse.ArgumentParser,
    settings: GeneratorSettings,
    config_path: Path,
    output_dir: Path,
) -> None:
    try:
        generator_input = GeneratorInputParserService().parse_file(config_path)
    except GeneratorError as exc:
        parser.exit(1, f"Invalid configuration: {exc.message}\n")

    bundle = build_generate_artifacts_usecase(settings).execute(generator_input)
    if bundle.failed(ArtifactName.PIPELINE):
        error = bundle.errors[ArtifactName.PIPELINE]
        parser.exit(1, f"Pipeline generation failed: {error.type}: {error.message}\n")

    written = ArtifactFileWriterAdapter(settings).write(output_dir, bundle)
    print(_summary(generator_input, bundle, written, output_dir))

    hard_failures = [name for name in bundle.errors if name != ArtifactName.SNAPSHOT]
    if hard_failures:
        parser.exit(1, f"Artifacts failed: {', '.join(sorted(hard_failures))}\n")
    if bundle.failed(ArtifactName.SNAPSHOT):
        logger.warning(
            "Encrypted snapshot was not written",
            error_type=bundle.errors[ArtifactName.SNAPSHOT].type,
            error_details=bundle.errors[ArtifactName.SNAPSHOT].message,
        )


def _run_decrypt(parser: argparse.ArgumentParser, settings: GeneratorSettings, snapshot_path: Path) -> None:
    if settings.encryption_key is None:
        parser.exit(1, "ENCRYPTION_KEY is not set; a snapshot can only be decrypted with the key that wrote it.\n")

    codec = build_vault(settings)
    try:
        content = snapshot_path.read_text(encoding="utf-8")
    except OSError as exc:
        parser.exit(1, f"Could not read snapshot {snapshot_path}: {exc.strerror}\n")
    try:
        generator_input = codec.decrypt(CredentialVaultCodec.load_snapshot_file(content))
    except GeneratorError as exc:
        parser.exit(1, f"Decryption failed: {exc.message}\n")

    payload = generator_input.model_dump(mode="json", context={REVEAL_SECRETS: True})
    print(json.dumps(payload, indent=2, sort_keys=True))


def _summary(
    generator_input: GeneratorInput,
    bundle: ArtifactBundle,
    written: list[Path],
    output_dir: Path,
) -> str:
    project = generator_input.project
    cloud = generator_input.cloud
    lines = [
        f"Project: {project.project_name} ({project.project_type}, {project.language})",
        f"Cloud: {cloud.provider} in {cloud.region} ({cloud.instance_type})",
        "Credentials:",
    ]
    credentials = cloud.credentials
    for field_name in credentials.secret_fields:
        secret = getattr(credentials, field_name).get_secret_value()
        lines.append(f"  {field_name}: {mask_secret(secret)}")
    for field_name in credentials.plain_fields:
        lines.append(f"  {field_name}: {getattr(credentials, field_name)}")

    lines.append(f"Notifications: {generator_input.notifications.email}")
    for platform in generator_input.notifications.platforms:
        lines.append(f"  {platform.type}: {'webhook configured' if platform.webhook else 'no webhook'}")

    lines.append("Files:")
    lines.extend(f"  {path.relative_to(output_dir)}" for path in written)
    if bundle.snapshot is not None and not bundle.snapshot_recoverable:
        lines.append("Warning: snapshot was encrypted with an ephemeral key and cannot be decrypted later.")
    return "\n".join(lines)


if __name__ == "__main__":
    main()

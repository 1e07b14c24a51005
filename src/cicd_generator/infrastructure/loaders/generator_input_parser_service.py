import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.core.exceptions.malformed_input_error import MalformedInputError
from cicd_generator.infrastructure.observability.redaction_service import redact_text

SNIPPET_LENGTH = 200


class GeneratorInputParserService:
    """Parses a YAML or JSON configuration document into a GeneratorInput."""

    def parse(self, text: str) -> GeneratorInput:
        if not text or not text.strip():
            raise MalformedInputError("Configuration document is empty.")

        # Normalize line endings
        cleaned_text = text.replace("\r\n", "\n")

        try:
            data = self._load_mapping(cleaned_text)
        except ValueError as e:
            raise MalformedInputError(
                "Could not parse valid YAML or JSON from configuration document.",
                safe_snippet=self._snippet(cleaned_text),
            ) from e

        try:
            return GeneratorInput.model_validate(data)
        except ValidationError as e:
            cleaned_errors = []
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"])
                cleaned_errors.append(f"{loc}: {err['msg']}")

            raise MalformedInputError(
                f"Configuration validation failed: {'; '.join(cleaned_errors)}",
                safe_snippet=self._snippet(cleaned_text),
                context={"error_count": e.error_count()},
            ) from e

    def parse_file(self, path: Path) -> GeneratorInput:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise MalformedInputError(
                f"Could not read configuration file {path}: {e.strerror}",
                context={"path": str(path)},
            ) from e
        return self.parse(text)

    @staticmethod
    def _load_mapping(content: str) -> dict[str, Any]:
        # YAML first; JSON documents are YAML too, the JSON pass only covers edge cases
        try:
            parsed = yaml.safe_load(content)
            if isinstance(parsed, dict):
                return parsed
        except yaml.YAMLError:
            pass

        try:
            parsed = json.loads(content)
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass

        raise ValueError("Content is not a YAML or JSON mapping.")

    @staticmethod
    def _snippet(content: str) -> str:
        snippet = content[:SNIPPET_LENGTH] + ("..." if len(content) > SNIPPET_LENGTH else "")
        return redact_text(snippet)

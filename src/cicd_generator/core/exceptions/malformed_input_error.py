from typing import Any

from cicd_generator.core.exceptions.generator_error import GeneratorError


class MalformedInputError(GeneratorError):
    """Raised when a configuration violates one of its invariants."""

    def __init__(
        self,
        message: str,
        *,
        safe_snippet: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.safe_snippet = safe_snippet

from typing import Any


class GeneratorError(Exception):
    """Base exception for every failure raised by the artifact generation engine."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}

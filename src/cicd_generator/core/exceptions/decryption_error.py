from cicd_generator.core.exceptions.generator_error import GeneratorError


class DecryptionError(GeneratorError):
    """Raised when a snapshot was produced under another key, was tampered with, or is malformed."""

from cicd_generator.core.exceptions.generator_error import GeneratorError


class EncryptionError(GeneratorError):
    """Raised when a configuration cannot be serialized or encrypted."""

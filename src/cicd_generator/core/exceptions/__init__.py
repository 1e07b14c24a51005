from cicd_generator.core.exceptions.decryption_error import DecryptionError
from cicd_generator.core.exceptions.encryption_error import EncryptionError
from cicd_generator.core.exceptions.generator_error import GeneratorError
from cicd_generator.core.exceptions.malformed_input_error import MalformedInputError
from cicd_generator.core.exceptions.template_render_error import TemplateRenderError
from cicd_generator.core.exceptions.unsupported_provider_error import UnsupportedProviderError

__all__ = [
    "DecryptionError",
    "EncryptionError",
    "GeneratorError",
    "MalformedInputError",
    "TemplateRenderError",
    "UnsupportedProviderError",
]

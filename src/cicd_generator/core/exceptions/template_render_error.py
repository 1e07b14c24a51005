from cicd_generator.core.exceptions.generator_error import GeneratorError


class TemplateRenderError(GeneratorError):
    """Raised when a template cannot be rendered with the supplied slots."""

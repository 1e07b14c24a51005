from cicd_generator.core.exceptions.generator_error import GeneratorError


class UnsupportedProviderError(GeneratorError):
    """Raised when a cloud provider discriminator has no deployment script."""

    def __init__(self, provider: str) -> None:
        super().__init__(
            f"Unsupported cloud provider: '{provider}'",
            context={"provider": provider},
        )
        self.provider = provider

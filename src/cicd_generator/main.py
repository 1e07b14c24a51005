import uvicorn

from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.entrypoints.api.app_factory import create_app


def dev():
    """Serve the generation API; auto-reload only outside deployed environments."""
    uvicorn.run(
        "cicd_generator.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.app_env == "local",
        log_level=settings.log_level.lower(),
    )


# ASGI target for uvicorn/gunicorn
settings = GeneratorSettings()
app = create_app(settings)

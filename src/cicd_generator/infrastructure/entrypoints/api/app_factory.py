from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.entrypoints.api.artifacts_router import (
    router as artifacts_router,
)
from cicd_generator.infrastructure.entrypoints.api.health_router import (
    router as health_router,
)
from cicd_generator.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from cicd_generator.infrastructure.observability.redaction_service import redact_dict
from cicd_generator.infrastructure.resolution.container import build_generate_artifacts_usecase

logger = get_logger("app_factory")


def create_app(settings: GeneratorSettings) -> FastAPI:
    configure_logging(settings.log_level, log_format=settings.log_format, app_env=settings.app_env)
    usecase = build_generate_artifacts_usecase(settings)

    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        env=settings.app_env,
        catalog=str(settings.template_catalog_root),
        snapshot_recoverable=usecase.codec.snapshot_is_recoverable,
    )

    app = FastAPI(title=settings.app_name)
    app.state.generate_artifacts_usecase = usecase

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # The rejected input may hold credentials; it is neither echoed nor logged
        errors = [
            redact_dict({key: value for key, value in error.items() if key != "input"})
            for error in jsonable_encoder(exc.errors())
        ]
        logger.error(
            "Request validation failed",
            context_endpoint=str(request.url.path),
            error_type="RequestValidationError",
            error_details=errors,
        )
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": errors},
        )

    app.include_router(health_router)
    app.include_router(artifacts_router, prefix="/api/v1")

    return app

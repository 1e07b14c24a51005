from fastapi import APIRouter, Depends, Request, status
from structlog.contextvars import bound_contextvars

from cicd_generator.core.application.usecases.generate_artifacts_usecase import (
    GenerateArtifactsUseCase,
)
from cicd_generator.core.domain.artifacts.artifact_bundle import ArtifactBundle
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("artifacts_router")
router = APIRouter()

_ENDPOINT = "/api/v1/artifacts"


def get_usecase(request: Request) -> GenerateArtifactsUseCase:
    return request.app.state.generate_artifacts_usecase


@router.post(
    "/artifacts",
    status_code=status.HTTP_200_OK,
    response_model=ArtifactBundle,
)
def generate_artifacts(
    generator_input: GeneratorInput,
    usecase: GenerateArtifactsUseCase = Depends(get_usecase),
) -> ArtifactBundle:
    with bound_contextvars(
        context_project=generator_input.project.project_name,
        context_provider=str(generator_input.cloud.provider),
        context_endpoint=_ENDPOINT,
    ):
        bundle = usecase.execute(generator_input)
        for name, error in bundle.errors.items():
            logger.warning(
                "Artifact generation failed",
                error_type=error.type,
                error_details=error.message,
                error_artifact=str(name),
            )
        logger.info("Artifact request served", artifacts_failed=len(bundle.errors))
    return bundle

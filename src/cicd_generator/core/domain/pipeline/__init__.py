from cicd_generator.core.domain.pipeline.pipeline_profile import PipelineProfile
from cicd_generator.core.domain.pipeline.pipeline_stage import PipelineStage, StageKind

__all__ = ["PipelineProfile", "PipelineStage", "StageKind"]

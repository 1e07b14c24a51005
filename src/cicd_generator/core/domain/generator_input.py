from pydantic import Field

from cicd_generator.core.domain.cloud.cloud_profile import CloudProfile
from cicd_generator.core.domain.notification.notification_profile import NotificationProfile
from cicd_generator.core.domain.pipeline.pipeline_profile import PipelineProfile
from cicd_generator.core.domain.profile_model import ProfileModel
from cicd_generator.core.domain.project.project_profile import ProjectProfile


class GeneratorInput(ProfileModel):
    """The complete, validated configuration that drives every generated artifact."""

    project: ProjectProfile
    cloud: CloudProfile
    notifications: NotificationProfile
    jenkins_config: PipelineProfile = Field(default_factory=PipelineProfile)

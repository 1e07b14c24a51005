import logging

from cicd_generator.core.domain.cloud.cloud_profile import CloudProfile
from cicd_generator.core.domain.cloud.cloud_provider_type import CloudProviderType
from cicd_generator.core.exceptions.unsupported_provider_error import UnsupportedProviderError
from cicd_generator.templates.template_renderer_service import TemplateRendererService

logger = logging.getLogger(__name__)

PROVIDER_LABELS: dict[CloudProviderType, str] = {
    CloudProviderType.AWS: "AWS",
    CloudProviderType.AZURE: "Azure",
    CloudProviderType.GCP: "Google Cloud",
    CloudProviderType.DIGITALOCEAN: "DigitalOcean",
}

# Non-secret variables a script reads from the agent besides its credential bindings.
RUNTIME_VARIABLES: dict[CloudProviderType, tuple[tuple[str, str], ...]] = {
    CloudProviderType.AWS: (
        ("SUBNET_IDS", "Comma-separated subnet ids for the Fargate service"),
        ("SECURITY_GROUP_IDS", "Comma-separated security group ids for the Fargate service"),
    ),
}


class ProviderScriptCatalog:
    """Closed catalog of deployment scripts, one per supported cloud provider.

    Scripts are rendered from region, port, health-check path, instance bounds and the
    image name only. Credentials are referenced through environment variables that the
    pipeline binds at run time.
    """

    def __init__(self, renderer: TemplateRendererService):
        self.renderer = renderer

    def generate_deployment_script(self, cloud: CloudProfile, image_name: str) -> str:
        match cloud.provider:
            case CloudProviderType.AWS:
                template_id = "deploy_aws"
            case CloudProviderType.AZURE:
                template_id = "deploy_azure"
            case CloudProviderType.GCP:
                template_id = "deploy_gcp"
            case CloudProviderType.DIGITALOCEAN:
                template_id = "deploy_digitalocean"
            case unknown:
                raise UnsupportedProviderError(str(unknown))

        deployment = cloud.deployment_config
        script = self.renderer.render(
            template_id,
            {
                "image_name": image_name,
                "region": cloud.region,
                "port": deployment.port,
                "health_check_path": deployment.health_check_path,
                "min_instances": deployment.desired_min_instances,
                "max_instances": deployment.desired_max_instances,
            },
        )
        logger.debug("Rendered %s deployment script for image %s", cloud.provider, image_name)
        return script

    @staticmethod
    def provider_label(provider: CloudProviderType | str) -> str:
        return PROVIDER_LABELS.get(provider, str(provider))

    @staticmethod
    def runtime_variables(provider: CloudProviderType | str) -> tuple[tuple[str, str], ...]:
        return RUNTIME_VARIABLES.get(provider, ())

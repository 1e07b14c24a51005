from typing import Any

from cicd_generator.core.application.credentials.credential_binding_resolver import (
    CredentialBindingResolver,
)
from cicd_generator.core.application.deployment.provider_script_catalog import (
    ProviderScriptCatalog,
)
from cicd_generator.core.application.pipeline.pipeline_assembler_service import (
    PipelineAssemblerService,
)
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.templates.template_renderer_service import TemplateRendererService

JENKINSFILE_PATH = "Jenkinsfile"
CREDENTIALS_GUIDE_PATH = ".cicd/CREDENTIALS_SETUP.md"
README_PATH = ".cicd/README.md"
SNAPSHOT_PATH = ".cicd/config.encrypted.json"
ENV_TEMPLATE_PATH = ".env.template"


class DocumentationRendererService:
    """Renders the human-facing companions of the pipeline.

    The setup guide and README enumerate bindings through the same resolver calls
    the pipeline uses, so the documents cannot drift from the Jenkinsfile.
    """

    def __init__(
        self,
        renderer: TemplateRendererService,
        binding_resolver: CredentialBindingResolver,
        assembler: PipelineAssemblerService,
    ):
        self.renderer = renderer
        self.binding_resolver = binding_resolver
        self.assembler = assembler

    def generate_credentials_setup_guide(self, generator_input: GeneratorInput) -> str:
        cloud = generator_input.cloud
        bindings = self.binding_resolver.enumerate_credential_bindings(cloud)
        return self.renderer.render(
            "credentials_guide",
            {
                "project_name": generator_input.project.project_name,
                "provider_label": ProviderScriptCatalog.provider_label(cloud.provider),
                "secret_bindings": [b for b in bindings if b.is_secret],
                "plain_bindings": [b for b in bindings if not b.is_secret],
                "notification_bindings": self.binding_resolver.enumerate_notification_bindings(
                    generator_input.notifications
                ),
                "runtime_variables": ProviderScriptCatalog.runtime_variables(cloud.provider),
                "snapshot_path": SNAPSHOT_PATH,
            },
        )

    def generate_readme(self, generator_input: GeneratorInput) -> str:
        project = generator_input.project
        cloud = generator_input.cloud
        deployment = cloud.deployment_config
        notifications = generator_input.notifications
        stage_kinds = self.assembler.stage_kinds(generator_input)

        bindings = [
            *self.binding_resolver.enumerate_credential_bindings(cloud),
            *self.binding_resolver.enumerate_notification_bindings(notifications),
        ]
        return self.renderer.render(
            "readme",
            {
                "project": {
                    "name": project.project_name,
                    "type": project.project_type.value,
                    "language": project.language.value,
                    "repository": project.repository,
                    "branch": project.branch,
                    "dockerfile": project.dockerfile_path,
                    "test_command": project.test_command,
                    "build_command": project.build_command,
                    "image_name": project.image_name,
                },
                "cloud": {
                    "provider_label": ProviderScriptCatalog.provider_label(cloud.provider),
                    "region": cloud.region,
                    "instance_type": cloud.instance_type,
                    "tier": deployment.tier,
                    "auto_scaling": deployment.auto_scaling,
                    "min_instances": deployment.desired_min_instances,
                    "max_instances": deployment.desired_max_instances,
                    "health_check_path": deployment.health_check_path,
                    "port": deployment.port,
                },
                "notifications": {
                    "email": notifications.email,
                    "platforms": [
                        {
                            "label": platform.type.capitalize(),
                            "has_webhook": platform.webhook is not None,
                        }
                        for platform in notifications.platforms
                    ],
                },
                "pipeline": generator_input.jenkins_config.model_dump(),
                "stages": [kind.title for kind in stage_kinds],
                "bindings": bindings,
                "external_services": self._service_rows(generator_input),
                "files": self._generated_files(generator_input),
            },
        )

    def generate_env_template(self, generator_input: GeneratorInput) -> str | None:
        services = self._service_rows(generator_input)
        if not services:
            return None
        return self.renderer.render(
            "env_template",
            {"project_name": generator_input.project.project_name, "services": services},
        )

    @staticmethod
    def _service_rows(generator_input: GeneratorInput) -> list[dict[str, Any]]:
        return [
            {"name": service.name, "kind": service.kind.value, "env_var": service.env_var}
            for service in generator_input.project.external_services
        ]

    @staticmethod
    def _generated_files(generator_input: GeneratorInput) -> list[tuple[str, str]]:
        files = [
            (JENKINSFILE_PATH, "declarative pipeline, committed with the project"),
            (CREDENTIALS_GUIDE_PATH, "Jenkins credential setup guide"),
            (README_PATH, "this overview"),
            (SNAPSHOT_PATH, "encrypted configuration snapshot, never committed"),
        ]
        if generator_input.project.external_services:
            files.append((ENV_TEMPLATE_PATH, "placeholders for external service connection strings"))
        return files

import logging
import shlex

from cicd_generator.core.application.credentials.credential_binding_resolver import (
    CredentialBindingResolver,
)
from cicd_generator.core.application.deployment.provider_script_catalog import (
    ProviderScriptCatalog,
)
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.core.domain.notification.notification_profile import NotificationPlatform
from cicd_generator.core.domain.pipeline.pipeline_stage import PipelineStage, StageKind
from cicd_generator.templates.template_filters import groovy_string
from cicd_generator.templates.template_renderer_service import TemplateRendererService

logger = logging.getLogger(__name__)

INSTALL_COMMAND = "npm ci"


class PipelineAssemblerService:
    """Composes the declarative Jenkinsfile for a configuration.

    Stage order is fixed: Checkout, Install Dependencies, Test, Build, Docker Build,
    Deploy, Notify. Test, Docker Build and Notify are omitted entirely when their
    gating flag is off. Output is a pure function of the input.
    """

    def __init__(
        self,
        renderer: TemplateRendererService,
        script_catalog: ProviderScriptCatalog,
        binding_resolver: CredentialBindingResolver,
    ):
        self.renderer = renderer
        self.script_catalog = script_catalog
        self.binding_resolver = binding_resolver

    @staticmethod
    def stage_kinds(generator_input: GeneratorInput) -> list[StageKind]:
        """Stages the pipeline will contain, decided by the gating flags alone."""
        project = generator_input.project
        kinds = [StageKind.CHECKOUT, StageKind.INSTALL]
        if project.run_tests and project.test_command:
            kinds.append(StageKind.TEST)
        kinds.append(StageKind.BUILD)
        if project.has_dockerfile and project.dockerfile_path:
            kinds.append(StageKind.CONTAINERIZE)
        kinds.append(StageKind.DEPLOY)
        if generator_input.notifications.platforms:
            kinds.append(StageKind.NOTIFY)
        return kinds

    def plan_stages(self, generator_input: GeneratorInput) -> list[PipelineStage]:
        builders = {
            StageKind.CHECKOUT: self._checkout_stage,
            StageKind.INSTALL: self._install_stage,
            StageKind.TEST: self._test_stage,
            StageKind.BUILD: self._build_stage,
            StageKind.CONTAINERIZE: self._containerize_stage,
            StageKind.DEPLOY: self._deploy_stage,
            StageKind.NOTIFY: self._notify_stage,
        }
        return [builders[kind](generator_input) for kind in self.stage_kinds(generator_input)]

    def assemble_pipeline(self, generator_input: GeneratorInput) -> str:
        stages = self.plan_stages(generator_input)
        jenkins = generator_input.jenkins_config
        # The email rides in the Notify stage when there is one, otherwise in post { always }
        has_notify = any(stage.kind is StageKind.NOTIFY for stage in stages)
        pipeline = self.renderer.render(
            "jenkinsfile",
            {
                "agent_label": jenkins.agent_label,
                "timeout": jenkins.timeout,
                "retry_count": jenkins.retry_count,
                "image_name": generator_input.project.image_name,
                "stages": stages,
                "post_mail_step": "" if has_notify else self._mail_step(generator_input),
            },
        )
        logger.debug(
            "Assembled pipeline with stages %s", [stage.kind.value for stage in stages]
        )
        return pipeline

    def _checkout_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        project = generator_input.project
        return PipelineStage(
            kind=StageKind.CHECKOUT,
            steps=(
                f"git branch: {groovy_string(project.branch)}, "
                f"url: {groovy_string(project.repository)}",
            ),
        )

    def _install_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        return PipelineStage(kind=StageKind.INSTALL, steps=(self._sh(INSTALL_COMMAND),))

    def _test_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        return PipelineStage(
            kind=StageKind.TEST, steps=(self._sh(generator_input.project.test_command),)
        )

    def _build_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        return PipelineStage(
            kind=StageKind.BUILD, steps=(self._sh(generator_input.project.build_command),)
        )

    def _containerize_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        dockerfile = shlex.quote(generator_input.project.dockerfile_path)
        return PipelineStage(
            kind=StageKind.CONTAINERIZE,
            steps=(
                self._sh(f'docker build -f {dockerfile} -t "$DOCKER_IMAGE" .'),
                self._sh('docker push "$DOCKER_IMAGE"'),
            ),
        )

    def _deploy_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        cloud = generator_input.cloud
        return PipelineStage(
            kind=StageKind.DEPLOY,
            environment=self.binding_resolver.resolve_credential_bindings(cloud),
            script=self.script_catalog.generate_deployment_script(
                cloud, generator_input.project.image_name
            ),
        )

    def _notify_stage(self, generator_input: GeneratorInput) -> PipelineStage:
        notifications = generator_input.notifications
        bindings = self.binding_resolver.enumerate_notification_bindings(notifications)
        steps = tuple(
            self._notification_step(platform, binding.env_var)
            for platform, binding in zip(notifications.platforms, bindings, strict=True)
        )
        steps += (self._mail_step(generator_input),)
        return PipelineStage(
            kind=StageKind.NOTIFY,
            environment=self.binding_resolver.render_binding_block(bindings),
            steps=steps,
        )

    def _notification_step(self, platform: NotificationPlatform, env_var: str) -> str:
        return self.renderer.render(f"notify_{platform.type}", {"env_var": env_var})

    def _mail_step(self, generator_input: GeneratorInput) -> str:
        return self.renderer.render(
            "notify_email",
            {
                "email": generator_input.notifications.email,
                "project_name": generator_input.project.project_name,
            },
        )

    @staticmethod
    def _sh(command: str) -> str:
        return f"sh {groovy_string(command)}"

from typing import Any

import pytest
from cryptography.fernet import Fernet

from cicd_generator.core.application.credentials.credential_binding_resolver import (
    CredentialBindingResolver,
)
from cicd_generator.core.application.deployment.provider_script_catalog import (
    ProviderScriptCatalog,
)
from cicd_generator.core.application.documentation.documentation_renderer_service import (
    DocumentationRendererService,
)
from cicd_generator.core.application.pipeline.pipeline_assembler_service import (
    PipelineAssemblerService,
)
from cicd_generator.core.application.vault.credential_vault_codec import CredentialVaultCodec
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.infrastructure.configuration.generator_settings import GeneratorSettings
from cicd_generator.infrastructure.resolution.container import build_template_renderer

# Distinctive values so a leak is unambiguous when searching generated text
SECRETS: dict[str, dict[str, str]] = {
    "aws": {
        "accessKeyId": "AKIAZZLEAKCHECK00001",
        "secretAccessKey": "aws-secret-LEAKCHECK-wJalrXUtnFEMI",
    },
    "azure": {
        "subscriptionId": "azure-subscription-LEAKCHECK-0001",
        "clientId": "azure-client-LEAKCHECK-0002",
        "clientSecret": "azure-client-secret-LEAKCHECK-0003",
        "tenantId": "azure-tenant-LEAKCHECK-0004",
    },
    "gcp": {
        "projectId": "gcp-project-LEAKCHECK-0005",
        "keyFile": '{"type": "service_account", "private_key": "gcp-key-LEAKCHECK-0006"}',
    },
    "digitalocean": {
        "apiToken": "dop_v1_LEAKCHECK0007",
    },
}

REGIONS = {
    "aws": "us-east-1",
    "azure": "eastus",
    "gcp": "us-central1",
    "digitalocean": "nyc1",
}

SLACK_WEBHOOK = "https://hooks.slack.com/services/T000/B000/LEAKCHECKWEBHOOK"

PROVIDERS = ["aws", "azure", "gcp", "digitalocean"]


def all_secret_values() -> list[str]:
    values = [value for provider in SECRETS.values() for value in provider.values()]
    return [*values, SLACK_WEBHOOK]


def credentials_payload(provider: str) -> dict[str, str]:
    payload = dict(SECRETS[provider])
    if provider != "azure":
        payload["region"] = REGIONS[provider]
    return payload


def build_payload(provider: str = "aws", **sections: dict[str, Any]) -> dict[str, Any]:
    """Camel-case configuration document; ``sections`` are merged over each top-level key."""
    payload: dict[str, Any] = {
        "project": {
            "projectName": "Orders API",
            "projectType": "backend",
            "language": "typescript",
            "repository": "https://github.com/acme/orders-api.git",
            "branch": "main",
            "hasDockerfile": True,
            "dockerfilePath": "Dockerfile",
            "runTests": True,
            "testCommand": "npm test",
        },
        "cloud": {
            "provider": provider,
            "credentials": credentials_payload(provider),
            "region": REGIONS[provider],
            "instanceType": "t3.micro",
            "deploymentConfig": {
                "tier": "production",
                "autoScaling": False,
                "healthCheckPath": "/health",
                "port": 3000,
            },
        },
        "notifications": {
            "email": "team@acme.example",
            "platforms": [],
        },
        "jenkinsConfig": {
            "agentLabel": "docker",
            "timeout": 60,
            "retryCount": 2,
        },
    }
    for key, overrides in sections.items():
        payload[key] = {**payload[key], **overrides}
    return payload


def build_input(provider: str = "aws", **sections: dict[str, Any]) -> GeneratorInput:
    return GeneratorInput.model_validate(build_payload(provider, **sections))


@pytest.fixture
def encryption_key() -> str:
    return Fernet.generate_key().decode("ascii")


@pytest.fixture
def settings(encryption_key, monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    return GeneratorSettings(_env_file=None, encryption_key=encryption_key)


@pytest.fixture
def renderer(settings):
    return build_template_renderer(settings)


@pytest.fixture
def script_catalog(renderer):
    return ProviderScriptCatalog(renderer)


@pytest.fixture
def binding_resolver(renderer):
    return CredentialBindingResolver(renderer)


@pytest.fixture
def assembler(renderer, script_catalog, binding_resolver):
    return PipelineAssemblerService(renderer, script_catalog, binding_resolver)


@pytest.fixture
def documentation(renderer, binding_resolver, assembler):
    return DocumentationRendererService(renderer, binding_resolver, assembler)


@pytest.fixture
def codec(encryption_key):
    return CredentialVaultCodec(encryption_key)


@pytest.fixture(params=PROVIDERS)
def provider_input(request) -> GeneratorInput:
    return build_input(
        request.param,
        notifications={
            "platforms": [
                {"type": "slack", "webhook": SLACK_WEBHOOK},
                {"type": "discord"},
                {"type": "teams"},
                {"type": "telegram"},
            ]
        },
    )


@pytest.fixture
def make_input():
    return build_input


@pytest.fixture
def make_payload():
    return build_payload


@pytest.fixture
def secret_values() -> list[str]:
    return all_secret_values()

import re

from cicd_generator.core.exceptions.unsupported_provider_error import UnsupportedProviderError

BINDING_PATTERN = re.compile(r"^\s*([A-Z][A-Z0-9_]*) = credentials\('([a-z0-9-]+)'\)$", re.MULTILINE)
GUIDE_ROW_PATTERN = re.compile(r"^\| `([a-z0-9-]+)` \| [^|]+ \| `([A-Z][A-Z0-9_]*)` \|", re.MULTILINE)


def test_binding_parity_between_pipeline_and_guide(assembler, documentation, provider_input):
    pipeline = assembler.assemble_pipeline(provider_input)
    guide = documentation.generate_credentials_setup_guide(provider_input)

    pipeline_bindings = {(env, cid) for env, cid in BINDING_PATTERN.findall(pipeline)}
    guide_bindings = {(env, cid) for cid, env in GUIDE_ROW_PATTERN.findall(guide)}

    assert pipeline_bindings
    assert pipeline_bindings == guide_bindings


def test_documents_never_contain_secret_values(documentation, provider_input, secret_values):
    guide = documentation.generate_credentials_setup_guide(provider_input)
    readme = documentation.generate_readme(provider_input)

    for value in secret_values:
        assert value not in guide
        assert value not in readme


def test_guide_lists_plain_bindings_and_agent_variables(documentation, make_input):
    guide = documentation.generate_credentials_setup_guide(make_input("aws"))

    assert "# Jenkins Credentials Setup: Orders API" in guide
    assert "## AWS credentials" in guide
    assert "`AWS_REGION` = `us-east-1`" in guide
    assert "`SUBNET_IDS`" in guide
    assert "`SECURITY_GROUP_IDS`" in guide
    assert ".cicd/config.encrypted.json" in guide
    assert "## Notification webhooks" not in guide


def test_readme_describes_every_section(documentation, make_input):
    generator_input = make_input(
        "gcp",
        project={"externalServices": [{"name": "orders-db", "kind": "database"}]},
        notifications={"platforms": [{"type": "teams", "webhook": "https://outlook.example/hook"}]},
    )

    readme = documentation.generate_readme(generator_input)

    assert "# CI/CD Pipeline: Orders API" in readme
    assert "| Provider | Google Cloud |" in readme
    assert "| Region | us-central1 |" in readme
    assert "| Health check | `/health` |" in readme
    assert "- Agent label: `docker`" in readme
    assert "- Retries per stage: 2" in readme
    assert "1. Checkout" in readme
    assert "5. Docker Build" in readme
    assert "- `GCP_KEY_FILE` from Jenkins credential `gcp-key-file`" in readme
    assert "- Teams: webhook configured" in readme
    assert "https://outlook.example/hook" not in readme
    assert "- orders-db (database) via `ORDERS_DB_URL`" in readme
    assert "- `.env.template`:" in readme


def test_env_template_lists_one_placeholder_per_service(documentation, make_input):
    generator_input = make_input(
        project={
            "externalServices": [
                {"name": "orders-db", "kind": "database"},
                {"name": "session cache", "kind": "cache"},
            ]
        }
    )

    template = documentation.generate_env_template(generator_input)

    assert template is not None
    assert "\nORDERS_DB_URL=\n" in template
    assert "\nSESSION_CACHE_URL=\n" in template


def test_env_template_is_none_without_services(documentation, make_input):
    assert documentation.generate_env_template(make_input()) is None


def test_readme_does_not_render_the_deploy_script(documentation, script_catalog, make_input, monkeypatch):
    def failing_script(cloud, image_name):
        raise UnsupportedProviderError(cloud.provider)

    monkeypatch.setattr(script_catalog, "generate_deployment_script", failing_script)

    readme = documentation.generate_readme(make_input("aws"))

    assert "6. Deploy" in readme

import pytest
from fastapi.testclient import TestClient

from cicd_generator.core.application.vault.credential_vault_codec import CredentialVaultCodec
from cicd_generator.infrastructure.entrypoints.api.app_factory import create_app


@pytest.fixture
def client(settings, monkeypatch):
    # Leave the test runner's logging setup alone
    monkeypatch.setattr(
        "cicd_generator.infrastructure.entrypoints.api.app_factory.configure_logging",
        lambda *args, **kwargs: None,
    )
    return TestClient(create_app(settings))


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_artifacts(client, make_payload, secret_values, encryption_key):
    payload = make_payload("gcp", notifications={"platforms": [{"type": "discord"}]})

    response = client.post("/api/v1/artifacts", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["errors"] == {}
    assert "stage('Deploy')" in body["pipeline"]
    assert "discordSend(" in body["pipeline"]
    assert "gcp-key-file" in body["credentials_guide"]
    assert body["env_template"] is None
    assert body["snapshot_recoverable"] is True
    restored = CredentialVaultCodec(encryption_key).decrypt(body["snapshot"])
    assert restored.cloud.provider == "gcp"
    for field in ("pipeline", "credentials_guide", "readme"):
        for value in secret_values:
            assert value not in body[field]


def test_invalid_body_returns_422_without_secrets(client, make_payload, secret_values):
    payload = make_payload("aws")
    payload["cloud"]["deploymentConfig"]["port"] = 0
    payload["cloud"]["credentials"]["unexpected"] = "x"

    response = client.post("/api/v1/artifacts", json=payload)

    assert response.status_code == 422
    for value in secret_values:
        assert value not in response.text


def test_mismatched_credentials_are_reported_as_artifact_errors(client, make_payload):
    payload = make_payload("aws")
    payload["cloud"]["credentials"] = make_payload("digitalocean")["cloud"]["credentials"]
    payload["cloud"]["region"] = payload["cloud"]["credentials"]["region"]

    response = client.post("/api/v1/artifacts", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert body["pipeline"] is None
    assert body["errors"]["pipeline"]["type"] == "MalformedInputError"
    assert body["snapshot"]

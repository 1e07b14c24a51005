import binascii
import json
import logging

from cryptography.fernet import Fernet, InvalidToken
from pydantic import SecretStr, ValidationError

from cicd_generator.core.domain.cloud.credentials import REVEAL_SECRETS
from cicd_generator.core.domain.generator_input import GeneratorInput
from cicd_generator.core.exceptions.decryption_error import DecryptionError
from cicd_generator.core.exceptions.encryption_error import EncryptionError

logger = logging.getLogger(__name__)

SNAPSHOT_FIELD = "encrypted"


class CredentialVaultCodec:
    """Symmetric codec between a GeneratorInput and an opaque snapshot string.

    The plaintext is canonical JSON (sorted keys) of the full configuration with
    secret values revealed; they exist in clear only inside the ciphertext.
    """

    def __init__(self, key: str | bytes, *, recoverable: bool = True):
        try:
            self._fernet = Fernet(key)
        except (ValueError, TypeError, binascii.Error) as e:
            raise EncryptionError(
                "Encryption key must be 32 url-safe base64-encoded bytes",
                context={"reason": type(e).__name__},
            ) from e
        self.snapshot_is_recoverable = recoverable

    def encrypt(self, generator_input: GeneratorInput) -> str:
        try:
            payload = generator_input.model_dump(mode="json", context={REVEAL_SECRETS: True})
            plaintext = json.dumps(payload, sort_keys=True, separators=(",", ":"))
            return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")
        except (TypeError, ValueError) as e:
            raise EncryptionError(
                f"Could not serialize configuration for encryption: {type(e).__name__}"
            ) from e

    def decrypt(self, snapshot: str) -> GeneratorInput:
        if not snapshot:
            raise DecryptionError("Snapshot is empty")
        try:
            plaintext = self._fernet.decrypt(snapshot.encode("ascii"))
        except InvalidToken as e:
            raise DecryptionError(
                "Snapshot was produced under a different key, was altered, or is malformed"
            ) from e
        except UnicodeEncodeError as e:
            raise DecryptionError("Snapshot contains non-ASCII characters") from e

        try:
            return GeneratorInput.model_validate_json(plaintext)
        except ValidationError as e:
            raise DecryptionError(
                "Decrypted snapshot is not a valid configuration",
                context={"error_count": e.error_count()},
            ) from e

    @staticmethod
    def dump_snapshot_file(snapshot: str) -> str:
        return json.dumps({SNAPSHOT_FIELD: snapshot}, indent=2) + "\n"

    @staticmethod
    def load_snapshot_file(content: str) -> str:
        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise DecryptionError("Snapshot file is not valid JSON") from e
        snapshot = document.get(SNAPSHOT_FIELD) if isinstance(document, dict) else None
        if not isinstance(snapshot, str):
            raise DecryptionError(f"Snapshot file has no '{SNAPSHOT_FIELD}' string field")
        return snapshot


def build_vault_codec(encryption_key: SecretStr | None) -> CredentialVaultCodec:
    """Build the codec from the configured key, or from a per-process key when none is set.

    Snapshots written under a generated key cannot be decrypted once the process exits.
    """
    if encryption_key is not None:
        return CredentialVaultCodec(encryption_key.get_secret_value())
    logger.warning(
        "ENCRYPTION_KEY is not set; using an ephemeral key. "
        "Snapshots from this run cannot be decrypted later."
    )
    return CredentialVaultCodec(Fernet.generate_key(), recoverable=False)

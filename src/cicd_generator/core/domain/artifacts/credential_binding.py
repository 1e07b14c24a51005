from dataclasses import dataclass


@dataclass(frozen=True)
class CredentialBinding:
    """Maps a shell environment variable to either a CI secret id or a plain literal.

    Only binding names and non-secret literals are carried here, never credential values.
    """

    env_var: str
    description: str
    credential_id: str | None = None
    literal: str | None = None
    credential_kind: str = "Secret text"

    def __post_init__(self) -> None:
        if (self.credential_id is None) == (self.literal is None):
            raise ValueError("A binding needs exactly one of credential_id or literal")

    @property
    def is_secret(self) -> bool:
        return self.credential_id is not None

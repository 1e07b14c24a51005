from enum import StrEnum, auto


class CloudProviderType(StrEnum):
    AWS = auto()
    AZURE = auto()
    GCP = auto()
    DIGITALOCEAN = auto()

from pathlib import Path
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from cicd_generator.templates.template_registry_service import DEFAULT_CATALOG_ROOT


class GeneratorSettings(BaseSettings):
    """
    Runtime settings for the artifact generator.
    Read once from the environment (and an optional .env file).
    """
    app_name: str = "Auto CI/CD Generator"
    app_env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_format: Literal["auto", "json", "console"] = Field(default="auto", alias="LOG_FORMAT")

    encryption_key: SecretStr | None = Field(
        default=None,
        alias="ENCRYPTION_KEY",
        description="Fernet key for configuration snapshots; generated per process when unset",
    )

    template_catalog_root: Path = Field(default=DEFAULT_CATALOG_ROOT)
    jenkinsfile_name: str = "Jenkinsfile"
    cicd_dir_name: str = ".cicd"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

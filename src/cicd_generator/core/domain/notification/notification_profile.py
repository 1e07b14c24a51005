import re
from enum import StrEnum, auto

from pydantic import Field, field_validator

from cicd_generator.core.domain.profile_model import ProfileModel

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


class NotificationPlatformType(StrEnum):
    SLACK = auto()
    DISCORD = auto()
    TEAMS = auto()
    TELEGRAM = auto()


class NotificationPlatform(ProfileModel):
    type: NotificationPlatformType
    webhook: str | None = Field(default=None, description="Incoming webhook URL for the platform")

    @field_validator("webhook")
    @classmethod
    def validate_webhook(cls, v: str | None) -> str | None:
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("webhook must be an http(s) URL")
        return v


class NotificationProfile(ProfileModel):
    email: str
    platforms: tuple[NotificationPlatform, ...] = ()

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not _EMAIL_PATTERN.fullmatch(v):
            raise ValueError("invalid email format")
        return v

    @field_validator("platforms")
    @classmethod
    def validate_unique_platforms(
        cls, v: tuple[NotificationPlatform, ...]
    ) -> tuple[NotificationPlatform, ...]:
        types = [platform.type for platform in v]
        if len(types) != len(set(types)):
            raise ValueError("each notification platform may be configured once")
        return v

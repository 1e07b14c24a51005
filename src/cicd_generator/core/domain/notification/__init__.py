from cicd_generator.core.domain.notification.notification_profile import (
    NotificationPlatform,
    NotificationPlatformType,
    NotificationProfile,
)

__all__ = ["NotificationPlatform", "NotificationPlatformType", "NotificationProfile"]

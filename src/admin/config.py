from dataclasses import dataclass

from src.config.settings import Settings, settings


@dataclass(frozen=True)
class AdminAuthConfig:
    """Secrets guarding the admin routes. ``None`` means not configured."""

    password: str | None
    token: str | None
    secure_cookies: bool = False

    @classmethod
    def from_settings(cls, app_settings: Settings) -> "AdminAuthConfig":
        # An empty environment variable counts as unset
        return cls(
            password=app_settings.admin_password or None,
            token=app_settings.admin_token or None,
            secure_cookies=app_settings.is_production,
        )


def get_admin_auth_config() -> AdminAuthConfig:
    """Dependency to get the admin auth config. Override in tests."""
    return AdminAuthConfig.from_settings(settings)

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_host: str = "0.0.0.0"
    app_port: int = 5000
    debug: bool = False
    allowed_origin: str = "*"
    trust_proxy_headers: bool = False

    ENVIRONMENT: str = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./rsvp.db"
    store_timeout_seconds: float = 10.0
    LOG_DB: bool = False

    # Admin access
    admin_password: str | None = None
    admin_token: str | None = None

    # Rate limits (requests per window, per client IP)
    api_rate_limit: int = 120
    login_rate_limit: int = 6
    rate_limit_window_seconds: int = 60

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    RUN_MIGRATIONS_ON_STARTUP: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in {"production", "prod"}

    @property
    def cors_origins(self) -> list[str]:
        return [self.allowed_origin]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

"""
Admin sessions.

A session is a bearer token held in a cookie. The only implementation today
hands every successful login the same configured token, but callers depend on
the ``SessionStore`` protocol so a per-user store can replace it.
"""

import hmac
import logging
from typing import Protocol

from fastapi import Depends

from src.admin.config import AdminAuthConfig, get_admin_auth_config
from src.errors import AuthError, AuthErrorKind, ConfigError

logger = logging.getLogger(__name__)

ADMIN_COOKIE_NAME = "admin_token"
SESSION_MAX_AGE_SECONDS = 60 * 60 * 24


class SessionStore(Protocol):
    def issue(self, password: object) -> str:
        """Check the credential and return the session token to hand out."""
        ...

    def verify(self, token: str | None) -> None:
        """Raise unless ``token`` is a live session."""
        ...

    def revoke(self, token: str | None) -> None:
        """Forget ``token``. Revoking an unknown or absent token is not an error."""
        ...


def _matches(candidate: str, secret: str) -> bool:
    return hmac.compare_digest(candidate.encode("utf-8"), secret.encode("utf-8"))


class ConstantTokenSessionStore:
    """Every login yields the configured token; validity is plain equality."""

    def __init__(self, config: AdminAuthConfig) -> None:
        self._config = config

    def issue(self, password: object) -> str:
        if not self._config.password:
            raise ConfigError("ADMIN_PASSWORD")
        if not self._config.token:
            raise ConfigError("ADMIN_TOKEN")
        if not isinstance(password, str) or not _matches(password, self._config.password):
            raise AuthError(AuthErrorKind.INVALID_CREDENTIAL)
        return self._config.token

    def verify(self, token: str | None) -> None:
        # Fail closed: without a configured token nothing is admitted
        if not self._config.token:
            raise ConfigError("ADMIN_TOKEN")
        if not token or not _matches(token, self._config.token):
            raise AuthError(AuthErrorKind.UNAUTHORIZED)

    def revoke(self, token: str | None) -> None:
        # The token is shared and static; revocation is the client dropping its cookie
        return None


def get_session_store(
    config: AdminAuthConfig = Depends(get_admin_auth_config),
) -> SessionStore:
    """Dependency to get the session store instance."""
    return ConstantTokenSessionStore(config)

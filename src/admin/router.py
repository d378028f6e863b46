import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from pydantic import BaseModel

from src.admin.config import AdminAuthConfig, get_admin_auth_config
from src.admin.dependencies import extract_session_token, require_admin
from src.admin.sessions import (
    ADMIN_COOKIE_NAME,
    SESSION_MAX_AGE_SECONDS,
    SessionStore,
    get_session_store,
)
from src.admin.urls import LOGIN_URL, LOGOUT_URL, VERIFY_URL
from src.errors import AuthError
from src.rate_limit import client_ip, login_rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    # Type is checked by the session store
    password: Any = None


class OkResponse(BaseModel):
    ok: bool = True


@router.post(LOGIN_URL, response_model=OkResponse, dependencies=[Depends(login_rate_limit)])
async def login(
    request: Request,
    response: Response,
    credentials: LoginRequest | None = Body(None),
    sessions: SessionStore = Depends(get_session_store),
    config: AdminAuthConfig = Depends(get_admin_auth_config),
) -> OkResponse:
    """
    Exchange the admin password for a session cookie.

    The cookie is HttpOnly and SameSite=Lax, lives for a day and is marked
    Secure in production.
    """
    try:
        token = sessions.issue(credentials.password if credentials else None)
    except AuthError:
        logger.warning("Failed admin login from %s", client_ip(request))
        raise

    response.set_cookie(
        key=ADMIN_COOKIE_NAME,
        value=token,
        max_age=SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=config.secure_cookies,
    )
    logger.info("Admin logged in from %s", client_ip(request))
    return OkResponse()


@router.post(LOGOUT_URL, response_model=OkResponse)
async def logout(
    request: Request,
    response: Response,
    sessions: SessionStore = Depends(get_session_store),
    config: AdminAuthConfig = Depends(get_admin_auth_config),
) -> OkResponse:
    """Clear the admin cookie. Safe to call without a session."""
    sessions.revoke(extract_session_token(request))
    response.delete_cookie(
        key=ADMIN_COOKIE_NAME,
        httponly=True,
        samesite="lax",
        secure=config.secure_cookies,
    )
    return OkResponse()


@router.get(VERIFY_URL, response_model=OkResponse, dependencies=[Depends(require_admin)])
async def verify_session() -> OkResponse:
    """Lets the admin UI check whether its cookie still opens the protected routes."""
    return OkResponse()

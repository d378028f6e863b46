from fastapi import Depends, Request

from src.admin.sessions import ADMIN_COOKIE_NAME, SessionStore, get_session_store

ADMIN_TOKEN_HEADER = "x-admin-token"


def extract_session_token(request: Request) -> str | None:
    """
    Find the candidate session token, first non-empty wins:
    the admin cookie, then ``Authorization: Bearer``, then ``X-Admin-Token``.
    """
    cookie_token = request.cookies.get(ADMIN_COOKIE_NAME)
    if cookie_token:
        return cookie_token

    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    header_token = request.headers.get(ADMIN_TOKEN_HEADER)
    if header_token:
        return header_token

    return None


async def require_admin(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
) -> None:
    """Guard for admin-only routes. Runs before any store access."""
    sessions.verify(extract_session_token(request))

"""Shared route dependencies.

get_identity resolves the stand-in user for each request and normalizes
the identity cookie on the response. The signed value is also kept on
request.state so error responses built by exception handlers carry it too.
"""

from typing import Annotated

from fastapi import Depends, Request, Response

from app.services.identity import Identity, resolve_stand_in_user, sign_value, unsign_value
from app.settings import get_settings


def set_identity_cookie(response: Response, value: str) -> None:
    """Replace any identity cookie on the client with the signed value."""
    settings = get_settings()
    response.delete_cookie(settings.cookie_name)
    response.set_cookie(
        key=settings.cookie_name,
        value=value,
        httponly=True,
        samesite="lax",
    )


def apply_pending_identity_cookie(request: Request, response: Response) -> None:
    """Copy a cookie rewrite decided by get_identity onto another response."""
    value = getattr(request.state, "identity_cookie", None)
    if value:
        set_identity_cookie(response, value)


async def get_identity(request: Request, response: Response) -> Identity:
    """Resolve the request identity.

    The signed cookie is forcibly rewritten to the stand-in user's id if it is
    missing, tampered with, or names someone else.
    """
    settings = get_settings()
    identity = await resolve_stand_in_user(settings.current_user_name)
    if not identity.is_authenticated:
        return identity

    raw = request.cookies.get(settings.cookie_name)
    cookie_user_id = unsign_value(raw, settings.cookie_secret) if raw else None
    if cookie_user_id != identity.user_id:
        value = sign_value(identity.user_id, settings.cookie_secret)
        request.state.identity_cookie = value
        set_identity_cookie(response, value)
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_identity)]

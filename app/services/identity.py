"""Identity stand-in.

There is no real authentication: every request acts as one fixed user,
looked up by display name (settings.current_user_name). The user is
resolved per request and carried as an explicit Identity instead of
process-wide state.

The user id travels in a cookie signed with HMAC-SHA256
("<user_id>.<signature>"). Cookies that are missing, tampered with, or
name a different user are replaced with the stand-in's.
"""

import base64
import hashlib
import hmac
from dataclasses import dataclass

from sqlalchemy import select

from app.models import User
from app.services.errors import AuthorizationError
from app.services.session import store_session


@dataclass(frozen=True)
class Identity:
    """Request-scoped identity. `user_id` is None when no stand-in user exists."""

    user_id: str | None = None
    name: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self.user_id, str) and self.user_id.strip() != ""


ANONYMOUS = Identity()


def _signature(value: str, secret: str) -> str:
    digest = hmac.new(secret.encode(), value.encode(), hashlib.sha256).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


def sign_value(value: str, secret: str) -> str:
    """Return `value` with an appended HMAC signature."""
    return f"{value}.{_signature(value, secret)}"


def unsign_value(signed: str, secret: str) -> str | None:
    """Return the original value, or None if the signature does not match."""
    value, sep, signature = signed.rpartition(".")
    if not sep or not value:
        return None
    if not hmac.compare_digest(signature, _signature(value, secret)):
        return None
    return value


async def resolve_stand_in_user(name: str) -> Identity:
    """Look up the stand-in user by display name.

    Returns:
        Identity for the first matching user, or ANONYMOUS if none exists.
    """
    async with store_session() as session:
        result = await session.execute(
            select(User).where(User.name == name).order_by(User.id).limit(1)
        )
        user = result.scalar_one_or_none()

    if user is None:
        return ANONYMOUS
    return Identity(user_id=user.id, name=user.name)


def require_user(identity: Identity) -> str:
    """Return the identity's user id or fail with AuthorizationError."""
    if not identity.is_authenticated:
        raise AuthorizationError("User not authenticated or invalid userId")
    return identity.user_id

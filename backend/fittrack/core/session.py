"""Authenticated user session passed explicitly into engine code.

The gateway in front of this service authenticates the user and forwards
the id in the X-User-Id header. Route handlers turn that into a
UserSession and hand it to the services; nothing below the router layer
looks at request headers.
"""

from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException

from fittrack.core.config import settings


@dataclass(frozen=True)
class UserSession:
    user_id: str


def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Validate the shared gateway key via X-API-Key or Authorization: Bearer.

    If API_KEY is not set, passes through.
    """
    if settings.api_key is None:
        return ""

    key = x_api_key
    if key is None and authorization and authorization.startswith("Bearer "):
        key = authorization[7:].strip()

    if key != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")

    return key


def optional_user(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
    _: str = Depends(verify_api_key),
) -> Optional[UserSession]:
    if x_user_id is None or x_user_id.strip() == "":
        return None
    return UserSession(user_id=x_user_id.strip())


def require_user(session: Optional[UserSession] = Depends(optional_user)) -> UserSession:
    if session is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return session

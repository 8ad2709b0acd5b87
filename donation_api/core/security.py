# donation_api/core/security.py
from typing import Optional

from fastapi import Depends, Header

from donation_api.core.errors import Forbidden, Unauthorized
from donation_api.core.logging import get_logger
from donation_api.core.sessions import SessionRegistry
from donation_api.deps import get_sessions

logger = get_logger(__name__)


def parse_bearer(authorization: Optional[str]) -> str:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.lower().startswith("bearer "):
        raise Unauthorized()
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise Unauthorized()
    return token


async def require_admin(
    authorization: Optional[str] = Header(default=None),
    sessions: SessionRegistry = Depends(get_sessions),
) -> str:
    token = parse_bearer(authorization)
    if not sessions.is_valid(token):
        logger.warning("admin_token_rejected")
        raise Forbidden()
    return token

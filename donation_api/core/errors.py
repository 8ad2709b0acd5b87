# donation_api/core/errors.py
from typing import List, Optional

from fastapi import Request
from fastapi.responses import JSONResponse


class DonationValidationError(Exception):
    """A submitted donation is missing a required field or has a bad value."""

    def __init__(self, fields: Optional[List[str]] = None):
        self.fields = fields or []
        super().__init__(f"invalid donation fields: {', '.join(self.fields) or '<body>'}")


class StoreError(Exception):
    """The document store failed to read or write."""


class AuthError(Exception):
    status_code: int
    message: str


class Unauthorized(AuthError):
    status_code = 401
    message = "Authorization token missing"


class Forbidden(AuthError):
    status_code = 403
    message = "Invalid or expired token"


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

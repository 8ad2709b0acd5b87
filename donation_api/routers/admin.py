# donation_api/routers/admin.py
import hmac

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from donation_api.core.config import Settings
from donation_api.core.errors import StoreError
from donation_api.core.logging import get_logger
from donation_api.core.security import require_admin
from donation_api.core.sessions import SessionRegistry
from donation_api.deps import get_repo, get_sessions, get_settings
from donation_api.routers.donations import read_json
from donation_api.schemas import DonationListOut, MessageOut, TokenOut
from donation_api.services.donations import list_donations

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = get_logger(__name__)


def check_password(given, expected) -> bool:
    if not expected or not isinstance(given, str):
        return False
    return hmac.compare_digest(given.encode(), expected.encode())


@router.post("/login", response_model=TokenOut, responses={401: {"model": MessageOut}})
async def login(
    request: Request,
    settings: Settings = Depends(get_settings),
    sessions: SessionRegistry = Depends(get_sessions),
):
    payload = await read_json(request)
    password = payload.get("password") if isinstance(payload, dict) else None
    if not settings.admin_password:
        logger.warning("admin_login_disabled", reason="ADMIN_PASSWORD not set")
    if not check_password(password, settings.admin_password):
        logger.warning("admin_login_failed")
        return JSONResponse(status_code=401, content={"message": "Incorrect password"})
    token = sessions.issue()
    logger.info("admin_login", active_sessions=len(sessions))
    return {"token": token}


@router.post("/logout", response_model=MessageOut)
async def logout(
    token: str = Depends(require_admin),
    sessions: SessionRegistry = Depends(get_sessions),
):
    sessions.revoke(token)
    logger.info("admin_logout", active_sessions=len(sessions))
    return {"message": "Logged out successfully"}


@router.get("/donations", response_model=DonationListOut, responses={500: {"model": MessageOut}})
async def admin_donations(_: str = Depends(require_admin), repo=Depends(get_repo)):
    try:
        donations = await list_donations(repo)
    except StoreError as exc:
        logger.error("donation_fetch_failed", error=str(exc))
        return JSONResponse(status_code=500, content={"message": "Error fetching records"})
    return {"donations": donations}

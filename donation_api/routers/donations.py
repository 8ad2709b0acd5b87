# donation_api/routers/donations.py
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from donation_api.core.errors import DonationValidationError, StoreError
from donation_api.core.logging import get_logger
from donation_api.deps import get_repo
from donation_api.schemas import MessageOut
from donation_api.services.donations import create_donation

router = APIRouter(prefix="/api/donations", tags=["donations"])
logger = get_logger(__name__)


async def read_json(request: Request):
    """Request body as JSON, or None when the body is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MessageOut,
             responses={500: {"model": MessageOut}})
async def submit_donation(request: Request, repo=Depends(get_repo)):
    payload = await read_json(request)
    try:
        donation_id = await create_donation(repo, payload)
    except DonationValidationError as exc:
        logger.error("donation_rejected", fields=exc.fields)
        return JSONResponse(status_code=500, content={"message": "Error saving donation"})
    except StoreError as exc:
        logger.error("donation_save_failed", error=str(exc))
        return JSONResponse(status_code=500, content={"message": "Error saving donation"})
    logger.info("donation_saved", donation_id=donation_id)
    return {"message": "Donation received"}

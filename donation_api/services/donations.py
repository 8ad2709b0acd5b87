# donation_api/services/donations.py
from typing import Any, List, Mapping

from pydantic import ValidationError

from donation_api.core.errors import DonationValidationError
from donation_api.schemas import DonationOut, DonationRecord


def parse_donation(fields: Any) -> DonationRecord:
    """Build a complete record from submitted fields or raise DonationValidationError."""
    if not isinstance(fields, Mapping):
        raise DonationValidationError()
    try:
        return DonationRecord.model_validate(dict(fields))
    except ValidationError as exc:
        bad = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise DonationValidationError(bad) from exc


async def create_donation(repo, fields: Any) -> str:
    record = parse_donation(fields)
    return await repo.insert_donation(record)


async def list_donations(repo) -> List[DonationOut]:
    return await repo.list_donations()

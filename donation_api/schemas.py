from datetime import datetime, timezone
from typing import Annotated, Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# --------------------------
# Donations
# --------------------------
class DonationRecord(BaseModel):
    """One donation as stored. Field names go over the wire in camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    timestamp: datetime = Field(default_factory=utcnow)
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: NonEmptyStr
    address: NonEmptyStr
    country: NonEmptyStr
    amount: float = Field(allow_inf_nan=False)
    # Simulated card data, kept verbatim for the demo
    card_number: NonEmptyStr
    card_expiry: NonEmptyStr
    card_cvc: NonEmptyStr

    @field_validator("timestamp", mode="before")
    @classmethod
    def _default_timestamp(cls, v: Any) -> Any:
        return utcnow() if v is None else v

    @field_validator("timestamp")
    @classmethod
    def _as_utc(cls, v: datetime) -> datetime:
        # naive values are taken to be UTC so records always compare
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class DonationOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    timestamp: Optional[datetime] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    country: Optional[str] = None
    amount: Optional[float] = None
    card_number: Optional[str] = None
    card_expiry: Optional[str] = None
    card_cvc: Optional[str] = None


class DonationListOut(BaseModel):
    donations: List[DonationOut]


# --------------------------
# Admin & misc responses
# --------------------------
class TokenOut(BaseModel):
    token: str


class MessageOut(BaseModel):
    message: str


class StatusOut(BaseModel):
    status: str = "live"
    message: str

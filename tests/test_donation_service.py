from datetime import datetime, timezone

import pytest

from donation_api.core.errors import DonationValidationError, StoreError
from donation_api.repos import InMemoryDonationRepo, MongoDonationRepo
from donation_api.services.donations import create_donation, list_donations, parse_donation
from tests.conftest import SAMPLE_DONATION

pytestmark = pytest.mark.anyio


def test_parse_defaults_timestamp():
    before = datetime.now(timezone.utc)
    record = parse_donation(SAMPLE_DONATION)
    assert record.timestamp >= before
    assert record.first_name == "A"
    assert record.amount == 10

    record = parse_donation({**SAMPLE_DONATION, "timestamp": None})
    assert record.timestamp.tzinfo is not None


def test_parse_treats_naive_timestamp_as_utc():
    record = parse_donation({**SAMPLE_DONATION, "timestamp": "2024-01-01T12:00:00"})
    assert record.timestamp == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)


def test_parse_reports_missing_fields():
    payload = {k: v for k, v in SAMPLE_DONATION.items() if k not in ("email", "cardCvc")}
    with pytest.raises(DonationValidationError) as exc_info:
        parse_donation(payload)
    assert exc_info.value.fields == ["cardCvc", "email"]


@pytest.mark.parametrize("payload", [None, "text", ["a"], 42])
def test_parse_rejects_non_mapping(payload):
    with pytest.raises(DonationValidationError):
        parse_donation(payload)


def test_document_uses_wire_names():
    doc = parse_donation(SAMPLE_DONATION).to_document()
    assert set(doc) == {"timestamp", *SAMPLE_DONATION}


async def test_create_and_list_in_memory():
    repo = InMemoryDonationRepo()
    for month in (3, 1, 2):
        ts = datetime(2024, month, 1, tzinfo=timezone.utc).isoformat()
        await create_donation(repo, {**SAMPLE_DONATION, "timestamp": ts, "amount": month})

    with pytest.raises(DonationValidationError):
        await create_donation(repo, {"firstName": "only"})

    items = await list_donations(repo)
    assert [d.amount for d in items] == [3, 2, 1]
    assert len({d.id for d in items}) == 3
    assert len(repo.donations) == 3


async def test_mongo_repo_wraps_driver_errors():
    from motor.motor_asyncio import AsyncIOMotorClient

    client = AsyncIOMotorClient("mongodb://127.0.0.1:1", serverSelectionTimeoutMS=100)
    repo = MongoDonationRepo(client["donations_test"]["donations"])
    try:
        with pytest.raises(StoreError):
            await repo.ping()
        with pytest.raises(StoreError):
            await repo.insert_donation(parse_donation(SAMPLE_DONATION))
        with pytest.raises(StoreError):
            await repo.list_donations()
    finally:
        client.close()

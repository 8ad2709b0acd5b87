# donation_api/repos/inmemory.py
import asyncio
import uuid
from typing import Dict, List

from donation_api.schemas import DonationOut, DonationRecord


def _id() -> str:
    return uuid.uuid4().hex


class InMemoryDonationRepo:
    """Process-local store for running without MongoDB, and for tests."""

    def __init__(self):
        self.donations: Dict[str, dict] = {}
        self._lock = asyncio.Lock()

    async def ping(self) -> None:
        return None

    async def ensure_indexes(self) -> None:
        return None

    async def insert_donation(self, record: DonationRecord) -> str:
        did = _id()
        async with self._lock:
            self.donations[did] = record.to_document()
        return did

    async def list_donations(self) -> List[DonationOut]:
        async with self._lock:
            docs = [{**doc, "id": did} for did, doc in self.donations.items()]
        docs.sort(key=lambda d: d["timestamp"], reverse=True)
        return [DonationOut.model_validate(d) for d in docs]

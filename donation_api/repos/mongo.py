# donation_api/repos/mongo.py
from typing import List

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

from donation_api.core.errors import StoreError
from donation_api.schemas import DonationOut, DonationRecord


class MongoDonationRepo:
    def __init__(self, col: AsyncIOMotorCollection):
        self.col = col

    async def ping(self) -> None:
        try:
            await self.col.database.client.admin.command("ping")
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    async def ensure_indexes(self) -> None:
        try:
            existing = [ix["name"] async for ix in self.col.list_indexes()]
            if "timestamp_-1" not in existing:
                await self.col.create_index([("timestamp", DESCENDING)], name="timestamp_-1")
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc

    async def insert_donation(self, record: DonationRecord) -> str:
        try:
            res = await self.col.insert_one(record.to_document())
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return str(res.inserted_id)

    async def list_donations(self) -> List[DonationOut]:
        """All donations, most recent first."""
        items: List[DonationOut] = []
        try:
            cur = self.col.find({}).sort("timestamp", DESCENDING)
            async for d in cur:
                d["id"] = str(d.pop("_id"))
                items.append(DonationOut.model_validate(d))
        except PyMongoError as exc:
            raise StoreError(str(exc)) from exc
        return items

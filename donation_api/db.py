# donation_api/db.py
from functools import lru_cache

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from donation_api.core.config import Settings


@lru_cache(maxsize=1)
def get_client(mongo_uri: str) -> AsyncIOMotorClient:
    # Cached to play nicely with uvicorn --reload; no I/O happens until first use
    return AsyncIOMotorClient(mongo_uri, tz_aware=True, uuidRepresentation="standard")


def donations_col(settings: Settings) -> AsyncIOMotorCollection:
    return get_client(settings.mongo_uri)[settings.mongo_db]["donations"]


def close_client(settings: Settings) -> None:
    if get_client.cache_info().currsize:
        get_client(settings.mongo_uri).close()
        get_client.cache_clear()

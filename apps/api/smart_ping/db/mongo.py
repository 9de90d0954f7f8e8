from __future__ import annotations

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from smart_ping.core.config import settings

_client: Optional[AsyncIOMotorClient] = None

def get_client() -> AsyncIOMotorClient:
    global _client
    if _client is None:
        _client = AsyncIOMotorClient(settings.MONGODB_URI, tz_aware=False)
    return _client

def get_db() -> AsyncIOMotorDatabase:
    return get_client()[settings.MONGODB_DB]

def close_client() -> None:
    global _client
    if _client is not None:
        _client.close()
        _client = None

from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from smart_ping.core.errors import StoreError
from smart_ping.db.mongo import get_db

UPDATES = "updates"
SEARCH_FIELDS = ("user", "title", "content")

# newest first; _id breaks timestamp ties in reverse insertion order
RECENCY_SORT = [("timestamp", DESCENDING), ("_id", DESCENDING)]


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        raise StoreError(f"{action} failed: {e}") from e


def build_query(keyword: Optional[str] = None, since: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Mongo filter for the feed:
    - keyword: literal, case-insensitive substring on user/title/content
    - since: timestamp lower bound (inclusive)
    """
    query: Dict[str, Any] = {}
    if keyword:
        pattern = re.escape(keyword)
        query["$or"] = [{f: {"$regex": pattern, "$options": "i"}} for f in SEARCH_FIELDS]
    if since is not None:
        query["timestamp"] = {"$gte": since}
    return query


async def ensure_indexes():
    db = get_db()
    with _store_errors("create_index"):
        await db[UPDATES].create_index([("timestamp", DESCENDING), ("_id", DESCENDING)])
        await db[UPDATES].create_index([("user", ASCENDING)])


async def insert_update(user: str, title: str, content: str) -> Dict[str, Any]:
    db = get_db()
    doc = {
        "user": user,
        "title": title,
        "content": content,
        "timestamp": datetime.utcnow(),
    }
    with _store_errors("insert_update"):
        result = await db[UPDATES].insert_one(doc)
    doc["_id"] = result.inserted_id
    return doc


async def find_update(oid: ObjectId) -> Optional[Dict[str, Any]]:
    db = get_db()
    with _store_errors("find_update"):
        return await db[UPDATES].find_one({"_id": oid})


async def find_updates(
    keyword: Optional[str] = None,
    since: Optional[datetime] = None,
    skip: int = 0,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    db = get_db()
    cursor = db[UPDATES].find(build_query(keyword, since)).sort(RECENCY_SORT)
    if skip:
        cursor = cursor.skip(skip)
    if limit:
        cursor = cursor.limit(limit)
    with _store_errors("find_updates"):
        return await cursor.to_list(length=limit)


async def count_updates(keyword: Optional[str] = None) -> int:
    db = get_db()
    with _store_errors("count_updates"):
        return await db[UPDATES].count_documents(build_query(keyword))


async def replace_update(oid: ObjectId, fields: Dict[str, str]) -> Optional[Dict[str, Any]]:
    """Overwrite the text fields only; timestamp is never part of $set."""
    db = get_db()
    changes = {k: fields[k] for k in SEARCH_FIELDS if k in fields}
    with _store_errors("replace_update"):
        return await db[UPDATES].find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )


async def remove_update(oid: ObjectId) -> bool:
    db = get_db()
    with _store_errors("remove_update"):
        result = await db[UPDATES].delete_one({"_id": oid})
    return result.deleted_count == 1

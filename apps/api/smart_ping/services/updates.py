from __future__ import annotations

from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from loguru import logger

from smart_ping.core.errors import NotFoundError, ValidationError
from smart_ping.db import updates as store
from smart_ping.schemas.update import DeleteResult, UpdateIn, UpdateOut, UpdatePage
from smart_ping.services.pagination import PageWindow, page_window

REQUIRED_FIELDS = ("user", "title", "content")


def to_update_out(doc: Dict[str, Any]) -> UpdateOut:
    return UpdateOut(
        id=str(doc["_id"]),
        user=doc["user"],
        title=doc["title"],
        content=doc["content"],
        timestamp=doc["timestamp"],
    )


def _require_fields(payload: UpdateIn) -> Dict[str, str]:
    fields = {f: getattr(payload, f) for f in REQUIRED_FIELDS}
    if any(v is None or not v.strip() for v in fields.values()):
        raise ValidationError("Please enter all fields")
    return fields


def _parse_id(update_id: str) -> ObjectId:
    try:
        return ObjectId(update_id)
    except (InvalidId, TypeError):
        raise NotFoundError(update_id, reason=NotFoundError.MALFORMED_ID)


async def _page(window: PageWindow, keyword: Optional[str] = None) -> UpdatePage:
    total = await store.count_updates(keyword=keyword)
    docs = await store.find_updates(keyword=keyword, skip=window.skip, limit=window.limit)
    return UpdatePage(
        updates=[to_update_out(d) for d in docs],
        total=total,
        page=window.page,
        limit=window.limit,
        pages=window.pages_for(total),
    )


async def list_updates(page: Optional[int] = None, limit: Optional[int] = None) -> UpdatePage:
    return await _page(page_window(page, limit))


async def search_updates(
    keyword: Optional[str],
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> UpdatePage:
    if keyword is None or not keyword.strip():
        raise ValidationError("Keyword is required")
    return await _page(page_window(page, limit), keyword=keyword)


async def create_update(payload: UpdateIn) -> UpdateOut:
    fields = _require_fields(payload)
    doc = await store.insert_update(**fields)
    logger.info("Created update {} by {}", doc["_id"], doc["user"])
    return to_update_out(doc)


async def get_update(update_id: str) -> UpdateOut:
    oid = _parse_id(update_id)
    doc = await store.find_update(oid)
    if not doc:
        raise NotFoundError(update_id)
    return to_update_out(doc)


async def edit_update(update_id: str, payload: UpdateIn) -> UpdateOut:
    """
    Replace user/title/content in place. No version check: concurrent
    edits are last-write-wins. timestamp keeps its creation value.
    """
    fields = _require_fields(payload)
    oid = _parse_id(update_id)
    doc = await store.replace_update(oid, fields)
    if not doc:
        raise NotFoundError(update_id)
    return to_update_out(doc)


async def delete_update(update_id: str) -> DeleteResult:
    oid = _parse_id(update_id)
    if not await store.remove_update(oid):
        raise NotFoundError(update_id)
    logger.info("Deleted update {}", update_id)
    return DeleteResult(msg="Update removed")

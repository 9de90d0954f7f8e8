from typing import Optional
from fastapi import APIRouter

from smart_ping.schemas.update import DeleteResult, UpdateIn, UpdateOut, UpdatePage
from smart_ping.services import updates as update_service

router = APIRouter(tags=["updates"])

@router.get("/updates", response_model=UpdatePage)
async def list_updates(page: Optional[int] = None, limit: Optional[int] = None):
    return await update_service.list_updates(page=page, limit=limit)

# declared before /updates/{update_id} so "search" is not read as an id
@router.get("/updates/search", response_model=UpdatePage)
async def search_updates(keyword: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None):
    return await update_service.search_updates(keyword, page=page, limit=limit)

@router.post("/updates", response_model=UpdateOut)
async def create_update(payload: UpdateIn):
    return await update_service.create_update(payload)

@router.get("/updates/{update_id}", response_model=UpdateOut)
async def get_update(update_id: str):
    return await update_service.get_update(update_id)

@router.put("/updates/{update_id}", response_model=UpdateOut)
async def edit_update(update_id: str, payload: UpdateIn):
    return await update_service.edit_update(update_id, payload)

@router.delete("/updates/{update_id}", response_model=DeleteResult)
async def delete_update(update_id: str):
    return await update_service.delete_update(update_id)

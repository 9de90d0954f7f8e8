from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime

class UpdateIn(BaseModel):
    # left optional so the service can answer 400 rather than FastAPI's 422
    user: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None

class UpdateOut(BaseModel):
    id: str
    user: str
    title: str
    content: str
    timestamp: datetime

class UpdatePage(BaseModel):
    updates: List[UpdateOut]
    total: int
    page: int
    limit: int
    pages: int

class DeleteResult(BaseModel):
    msg: str

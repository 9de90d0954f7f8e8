from fastapi import APIRouter, Request
from loguru import logger
from smart_ping.db.mongo import get_db

async def mongo_ok() -> bool:
    try:
        db = get_db()
        await db.command("ping")
        return True
    except Exception as e:
        logger.warning("mongo ping failed: {!r}", e)
        return False


async def completion_ok(request: Request) -> bool:
    llm = getattr(request.app.state, "llm", None)
    if llm is None:
        return False
    try:
        return await llm.ping()
    except Exception as e:
        logger.warning("completion endpoint check failed: {!r}", e)
        return False

router = APIRouter(tags=["health"])

@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "mongo": await mongo_ok(),
        "completion": await completion_ok(request),
    }

@router.get("/health/db")
async def health_db():
    db = get_db()
    await db.command("ping")
    return {"status": "ok", "db": "mongo"}

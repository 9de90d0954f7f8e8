from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from smart_ping.core.config import settings
from smart_ping.core.errors import register_error_handlers
from smart_ping.core.logging import setup_logging
from smart_ping.db.mongo import close_client
from smart_ping.db.updates import ensure_indexes
from smart_ping.middleware.request_logging import RequestLoggingMiddleware
from smart_ping.services.llm.openrouter_chat import OpenRouterChatLLM

from smart_ping.api.v1.health import router as health_router
from smart_ping.api.v1.updates import router as updates_router
from smart_ping.api.v1.summary import router as summary_router

logger = setup_logging()

def build_llm():
    if not settings.OPENROUTER_API_KEY:
        logger.warning("OPENROUTER_API_KEY is not set; /summary will fail until it is configured")
        return None
    llm = OpenRouterChatLLM()
    logger.info("Completion client ready: {} model={}", llm.base_url, llm.model)
    return llm

def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)
    app.state.llm = None

    @app.on_event("startup")
    async def _startup():
        await ensure_indexes()
        logger.info("Indexes ensured")
        app.state.llm = build_llm()

    @app.on_event("shutdown")
    async def _shutdown():
        if app.state.llm is not None:
            await app.state.llm.close()
        close_client()

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root():
        return "Smart Ping API is running"

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    register_error_handlers(app)

    app.include_router(health_router, prefix=settings.API_PREFIX)
    app.include_router(updates_router, prefix=settings.API_PREFIX)
    app.include_router(summary_router, prefix=settings.API_PREFIX)

    return app

app = create_app()

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Protocol

from loguru import logger

from smart_ping.core.config import settings
from smart_ping.core.errors import NoContentError
from smart_ping.db import updates as store
from smart_ping.schemas.summary import SummaryOut

SUMMARY_PROMPT = """Please provide a concise summary of the following team updates from the last {hours} hours:

{updates}

Summary:"""


class CompletionLLM(Protocol):
    async def complete(self, prompt: str, model: Optional[str] = None) -> str: ...


def format_updates(docs: List[Dict[str, Any]]) -> str:
    return "\n".join(f"{d['user']}: {d['title']} - {d['content']}" for d in docs)


def build_prompt(docs: List[Dict[str, Any]], window_hours: int = 24) -> str:
    return SUMMARY_PROMPT.format(hours=window_hours, updates=format_updates(docs))


class SummaryService:
    def __init__(self, llm: CompletionLLM, window_hours: Optional[int] = None):
        self.llm = llm
        self.window_hours = settings.SUMMARY_WINDOW_HOURS if window_hours is None else window_hours
        self.window = timedelta(hours=self.window_hours)

    async def summarize(self, now: Optional[datetime] = None) -> SummaryOut:
        """
        Digest of every update with timestamp >= now - window, newest first.
        The whole set goes into one prompt; nothing is truncated.
        """
        cutoff = (now or datetime.utcnow()) - self.window
        docs = await store.find_updates(since=cutoff)
        if not docs:
            raise NoContentError(self.window_hours, f"no updates since {cutoff.isoformat()}")

        logger.info("Summarizing {} updates since {}", len(docs), cutoff.isoformat())
        text = await self.llm.complete(build_prompt(docs, self.window_hours))
        return SummaryOut(text=text, update_count=len(docs))

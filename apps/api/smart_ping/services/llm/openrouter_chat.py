from __future__ import annotations
from typing import Optional
import httpx
from openai import AsyncOpenAI, OpenAIError

from smart_ping.core.config import settings
from smart_ping.core.errors import CompletionError


class OpenRouterChatLLM:
    """Chat-completion client for an OpenAI-compatible endpoint (OpenRouter by default)."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
    ):
        key = api_key or settings.OPENROUTER_API_KEY
        if not key:
            raise RuntimeError("OPENROUTER_API_KEY is not set")
        self.base_url = base_url or settings.OPENROUTER_BASE_URL
        self.model = model or settings.OPENROUTER_MODEL
        self.headers = {
            "HTTP-Referer": settings.OPENROUTER_SITE_URL,
            "X-Title": settings.OPENROUTER_APP_TITLE,
        }
        # one attempt per call; failures go straight back to the caller
        self.client = AsyncOpenAI(api_key=key, base_url=self.base_url, max_retries=0)

    async def complete(self, prompt: str, model: Optional[str] = None) -> str:
        try:
            res = await self.client.chat.completions.create(
                model=model or self.model,
                messages=[{"role": "user", "content": prompt}],
                extra_headers=self.headers,
                extra_body={},
            )
        except OpenAIError as e:
            raise CompletionError(f"completion request failed: {e}") from e

        if not res.choices or res.choices[0].message is None:
            raise CompletionError("completion response had no choices")
        text = res.choices[0].message.content
        if text is None:
            raise CompletionError("completion response had no message content")
        return text

    async def ping(self) -> bool:
        async with httpx.AsyncClient(timeout=2) as client:
            r = await client.get(f"{self.base_url.rstrip('/')}/models")
            return r.status_code == 200

    async def close(self) -> None:
        await self.client.close()

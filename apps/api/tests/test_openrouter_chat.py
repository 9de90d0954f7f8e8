from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from smart_ping.core.config import settings
from smart_ping.core.errors import CompletionError
from smart_ping.services.llm.openrouter_chat import OpenRouterChatLLM


def _response(*contents):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents])


@pytest.fixture
def llm():
    client = OpenRouterChatLLM(api_key="test-key", base_url="https://llm.example/v1")
    client.client = MagicMock()
    client.client.chat.completions.create = AsyncMock(return_value=_response("first", "second"))
    return client


def test_requires_api_key(monkeypatch):
    monkeypatch.setattr(settings, "OPENROUTER_API_KEY", None)
    with pytest.raises(RuntimeError):
        OpenRouterChatLLM()


async def test_returns_first_choice_text(llm):
    assert await llm.complete("hello") == "first"


async def test_sends_single_user_message_with_static_headers(llm):
    await llm.complete("hello")

    kwargs = llm.client.chat.completions.create.call_args.kwargs
    assert kwargs["model"] == settings.OPENROUTER_MODEL
    assert kwargs["messages"] == [{"role": "user", "content": "hello"}]
    assert kwargs["extra_headers"] == {
        "HTTP-Referer": settings.OPENROUTER_SITE_URL,
        "X-Title": settings.OPENROUTER_APP_TITLE,
    }


async def test_model_override(llm):
    await llm.complete("hello", model="other/model")
    assert llm.client.chat.completions.create.call_args.kwargs["model"] == "other/model"


async def test_transport_error_becomes_completion_error(llm):
    request = httpx.Request("POST", "https://llm.example/v1/chat/completions")
    llm.client.chat.completions.create.side_effect = openai.APIConnectionError(request=request)

    with pytest.raises(CompletionError):
        await llm.complete("hello")
    assert llm.client.chat.completions.create.await_count == 1


@pytest.mark.parametrize("response", [_response(), _response(None)])
async def test_malformed_response_becomes_completion_error(llm, response):
    llm.client.chat.completions.create.return_value = response
    with pytest.raises(CompletionError):
        await llm.complete("hello")

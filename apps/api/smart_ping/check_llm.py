"""
Manual smoke check for the completion endpoint:

    smart-ping-check-llm "What is the meaning of life?"
"""
import asyncio
import sys

from smart_ping.core.errors import CompletionError
from smart_ping.core.logging import setup_logging
from smart_ping.services.llm.openrouter_chat import OpenRouterChatLLM

DEFAULT_PROMPT = "What is the meaning of life?"

logger = setup_logging()

async def _run(prompt: str) -> int:
    llm = OpenRouterChatLLM()
    try:
        logger.info("Sending prompt: {!r}", prompt)
        answer = await llm.complete(prompt)
    except CompletionError as e:
        logger.error("Completion failed: {}", e)
        return 1
    finally:
        await llm.close()
    print(answer)
    return 0

def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    prompt = " ".join(args) or DEFAULT_PROMPT
    return asyncio.run(_run(prompt))

if __name__ == "__main__":
    sys.exit(main())

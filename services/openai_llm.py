# services/openai_llm.py
from __future__ import annotations

import logging

from openai import AsyncOpenAI

from api.app.config import Settings

logger = logging.getLogger(__name__)


def _client(settings: Settings) -> AsyncOpenAI:
    # One attempt only; callers fall back instead of retrying
    return AsyncOpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout_seconds,
        max_retries=0,
    )


async def extract_json(settings: Settings, system_prompt: str, user_message: str) -> str:
    """Run a completion expecting JSON output and return the raw message text."""
    client = _client(settings)

    logger.info("LLM: requesting JSON from %s", settings.openai_model)
    response = await client.chat.completions.create(
        model=settings.openai_model,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_message},
        ],
        temperature=settings.openai_temperature,
        max_tokens=settings.openai_max_tokens,
        response_format={"type": "json_object"},
    )
    text = response.choices[0].message.content or ""
    logger.info("LLM: got %d chars response", len(text))
    return text

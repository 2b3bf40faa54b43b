# services/recommendation_service.py
"""
Recommendation pipeline: LLM first, static fallback on any failure.

Expected failures (no API key, provider error, unparseable output) are
reported through RecommendationOutcome.error so the route can always
answer with success and data.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from openai import OpenAIError

from ai.fallback_recommendations import generate_fallback_recommendations
from ai.prompt_builder import RecommendationPromptContext, build_system_prompt, build_user_prompt
from ai.recommendation_parser import parse_recommendations
from api.app.config import Settings
from services.errors import ExtractionError, RecommendationParseError
from services.openai_llm import extract_json

logger = logging.getLogger(__name__)

FALLBACK_ERROR_PREFIX = "Using demo recommendations. "


@dataclass(frozen=True)
class RecommendationOutcome:
    data: dict[str, Any]
    source: str  # llm | fallback
    error: str | None = None

    @property
    def degraded(self) -> bool:
        return self.source == "fallback"


def _count(data: dict, key: str) -> int:
    items = data.get(key)
    return len(items) if isinstance(items, list) else 0


def fallback_outcome(conversation_summary: str, reason: str | None = None) -> RecommendationOutcome:
    recommendations = generate_fallback_recommendations(conversation_summary)
    return RecommendationOutcome(
        data=recommendations.model_dump(by_alias=True),
        source="fallback",
        error=FALLBACK_ERROR_PREFIX + reason if reason else None,
    )


async def get_recommendations(settings: Settings, conversation_summary: str) -> RecommendationOutcome:
    """Ask the LLM for recommendations; degrade to the static catalog on failure."""
    if not settings.llm_enabled:
        logger.warning("OPENAI_API_KEY not configured, using fallback recommendations")
        return fallback_outcome(conversation_summary)

    ctx = RecommendationPromptContext(conversation_summary=conversation_summary)
    try:
        text = await extract_json(settings, build_system_prompt(), build_user_prompt(ctx))
    except OpenAIError as exc:
        logger.error("LLM request failed, falling back: %s", exc)
        return fallback_outcome(conversation_summary, "API unavailable")

    try:
        data = parse_recommendations(text)
    except ExtractionError as exc:
        logger.warning("%s; response started with %r", exc, text[:200])
        return fallback_outcome(conversation_summary, str(exc))
    except RecommendationParseError as exc:
        logger.error("%s; cleaned text: %s", exc, exc.candidate[:500])
        return fallback_outcome(conversation_summary, str(exc))

    logger.info(
        "LLM recommendations: %d activities, %d hotels, %d restaurants",
        _count(data, "activities"),
        _count(data, "hotels"),
        _count(data, "restaurants"),
    )
    return RecommendationOutcome(data=data, source="llm")

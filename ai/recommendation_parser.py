# ai/recommendation_parser.py
"""
Pull a recommendations JSON object out of free-form LLM text.

Handles the defects seen in practice:
  ```json fenced blocks      → use the fenced content
  prose around the object    → first "{" through last "}"
  trailing commas            → removed before "}" / "]"
  formatting whitespace      → collapsed to single spaces
"""
from __future__ import annotations

import json
import logging
import re
from typing import Any

from services.errors import ExtractionError, RecommendationParseError

logger = logging.getLogger(__name__)

_FENCED_JSON = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)
_BARE_OBJECT = re.compile(r"\{.*\}", re.DOTALL)
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_WHITESPACE = re.compile(r"\s+")


def extract_json_candidate(text: str) -> str:
    """Return the JSON-looking region of `text`, or raise ExtractionError."""
    match = _FENCED_JSON.search(text)
    if match:
        return match.group(1)
    match = _BARE_OBJECT.search(text)
    if match:
        return match.group(0)
    raise ExtractionError("No JSON found in LLM response")


def repair_json_text(candidate: str) -> str:
    repaired = _TRAILING_COMMA.sub(r"\1", candidate)
    repaired = _WHITESPACE.sub(" ", repaired)
    return repaired.strip()


def parse_recommendations(text: str) -> dict[str, Any]:
    """
    Extract, repair and parse LLM output into a recommendations dict.

    Raises ExtractionError when no JSON region exists and
    RecommendationParseError when the repaired region still fails to parse.
    """
    candidate = repair_json_text(extract_json_candidate(text or ""))
    logger.debug("Cleaned JSON text: %s", candidate[:500])

    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise RecommendationParseError(f"Failed to parse JSON: {exc}", candidate) from exc

    if not isinstance(parsed, dict):
        raise RecommendationParseError(
            f"Expected a JSON object, got {type(parsed).__name__}", candidate
        )
    return parsed

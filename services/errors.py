# services/errors.py
"""
Error taxonomy shared by the webhook and recommendation pipelines.

Routes map these onto HTTP status codes; the recommendation pipeline
turns ExtractionError / RecommendationParseError into fallback data.
"""
from __future__ import annotations


class TravelPlannerError(Exception):
    """Base class for domain errors."""


class AuthenticationError(TravelPlannerError):
    """Webhook signature or caller identity missing/invalid (401)."""


class PayloadShapeError(TravelPlannerError):
    """Webhook body lacks a required nested field (400)."""


class ExtractionError(TravelPlannerError):
    """No JSON-like region found in LLM output."""


class RecommendationParseError(TravelPlannerError):
    """A JSON-like region was found but did not parse after repair."""

    def __init__(self, message: str, candidate: str = "") -> None:
        super().__init__(message)
        self.candidate = candidate


class StorageError(TravelPlannerError):
    """Database write failed (500 on the webhook path)."""

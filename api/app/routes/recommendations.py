# api/app/routes/recommendations.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.app.config import Settings, get_settings
from api.app.dependencies import get_current_user_id
from api.app.schemas.recommendations import RecommendationsRequest, RecommendationsResponse
from services.recommendation_service import fallback_outcome, get_recommendations

logger = logging.getLogger(__name__)

router = APIRouter(tags=["recommendations"])


@router.post(
    "/recommendations",
    response_model=RecommendationsResponse,
    response_model_exclude_unset=True,
)
async def create_recommendations(
    body: RecommendationsRequest | None = None,
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    """Turn a conversation summary into activities, hotels and restaurants."""
    body = body or RecommendationsRequest()
    summary = body.conversation_summary.strip() if isinstance(body.conversation_summary, str) else ""
    if not summary:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Conversation summary is required")

    logger.info(
        "Recommendations for user %s (conversation=%s): %s",
        user_id,
        body.conversation_id,
        summary[:200],
    )
    try:
        outcome = await get_recommendations(settings, summary)
    except Exception:
        # Unexpected bug; the UI still gets renderable data
        logger.exception("Recommendation pipeline crashed for user %s", user_id)
        outcome = fallback_outcome(summary, "API unavailable")

    if outcome.error:
        return RecommendationsResponse(success=True, data=outcome.data, error=outcome.error)
    return RecommendationsResponse(success=True, data=outcome.data)

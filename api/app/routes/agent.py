# api/app/routes/agent.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.app.config import Settings, get_settings
from api.app.dependencies import get_current_user_id

router = APIRouter(tags=["agent"])


@router.get("/agent/config")
async def get_agent_config(
    user_id: str = Depends(get_current_user_id),
    settings: Settings = Depends(get_settings),
):
    """Values the voice widget needs to start a call tagged with the caller's id."""
    return {"agentId": settings.elevenlabs_agent_id, "userId": user_id}

# api/app/routes/saved_items.py
from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from api.app.dependencies import get_current_user_id, get_session
from api.app.schemas.saved_item import (
    SavedItemCreate,
    SavedItemListResponse,
    SavedItemResponse,
    SavedItemResult,
)
from models.saved_item import ITEM_TYPES, SavedItem
from services.observability import log_event

router = APIRouter(tags=["saved-items"])


@router.get("/saved-items", response_model=SavedItemListResponse)
async def get_saved_items(
    item_type: str | None = Query(None, alias="type"),
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    stmt = select(SavedItem).where(SavedItem.user_id == user_id)
    if item_type:
        stmt = stmt.where(SavedItem.item_type == item_type)
    stmt = stmt.order_by(SavedItem.created_at.desc())

    result = await db.execute(stmt)
    items = result.scalars().all()
    return SavedItemListResponse(data=[SavedItemResponse.model_validate(i) for i in items])


@router.post("/saved-items", response_model=SavedItemResult)
async def create_saved_item(
    body: SavedItemCreate,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    """Copy one recommended activity, hotel or restaurant into the user's list."""
    if not body.item_type or not body.item_data:
        raise HTTPException(status_code=400, detail="itemType and itemData are required")
    if body.item_type not in ITEM_TYPES:
        raise HTTPException(
            status_code=400,
            detail="Invalid itemType. Must be activity, hotel, or restaurant",
        )

    item = SavedItem(
        user_id=user_id,
        item_type=body.item_type,
        item_data=body.item_data,
        conversation_id=body.conversation_id,
    )
    db.add(item)
    await db.flush()
    await db.refresh(item)

    await log_event(db, "saved_item_created", "info", source="api", metadata={
        "user_id": user_id,
        "item_type": item.item_type,
        "item_id": str(item.id),
    })
    await db.commit()

    return SavedItemResult(data=SavedItemResponse.model_validate(item))


@router.delete("/saved-items/{item_id}")
async def delete_saved_item(
    item_id: uuid.UUID,
    user_id: str = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_session),
):
    stmt = delete(SavedItem).where(SavedItem.id == item_id, SavedItem.user_id == user_id)
    result = await db.execute(stmt)
    if result.rowcount == 0:
        raise HTTPException(status_code=404, detail="Item not found or unauthorized")
    await db.commit()
    return {"success": True, "message": "Item removed from saved list"}

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from upsc_tracker.core.auth import current_user_id
from upsc_tracker.core.notification_engine import notification_engine

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("")
async def get_notifications(limit: int = Query(default=50, ge=1, le=500), user_id: str = Depends(current_user_id)):
    return {"items": notification_engine.list_notifications(limit=limit, user_id=user_id)}

from __future__ import annotations

from fastapi import APIRouter

from upsc_tracker.memory.progress_store import get_progress_store_status
from upsc_tracker.runtime.session_manager import session_manager

router = APIRouter(prefix="/progress-store", tags=["progress-store"])


@router.get("/status")
async def progress_store_status():
    return get_progress_store_status(session_manager.store)

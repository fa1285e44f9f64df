from fastapi import APIRouter

from upsc_tracker.core.settings import settings
from upsc_tracker.runtime.session_manager import session_manager

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "upsc-tracker-api",
        "env": settings.app_env,
        "progress_store_backend": settings.progress_store_backend,
        "active_sessions": len(session_manager.list_sessions()),
    }

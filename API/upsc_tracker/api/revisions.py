from __future__ import annotations

from fastapi import APIRouter, Depends

from upsc_tracker.api.syllabus import run_transition
from upsc_tracker.core.auth import current_user_id
from upsc_tracker.revision.scheduler import collect_due
from upsc_tracker.runtime.session_manager import session_manager
from upsc_tracker.schemas.tracker import TransitionResponse

router = APIRouter(prefix="/revisions", tags=["revisions"])


@router.get("/due")
async def due_revisions(user_id: str = Depends(current_user_id)):
    session = await session_manager.get_session(user_id)
    items = collect_due(session.tree)
    return {"count": len(items), "items": [item.to_dict() for item in items]}


@router.get("/reminder")
async def daily_reminder(user_id: str = Depends(current_user_id)):
    reminder = await session_manager.daily_reminder(user_id)
    return reminder.to_dict()


@router.post("/{topic_id}/{checkpoint}/confirm", response_model=TransitionResponse)
async def confirm_revision(topic_id: str, checkpoint: str, user_id: str = Depends(current_user_id)):
    return await run_transition(user_id, topic_id, lambda wf: wf.confirm_revision(topic_id, checkpoint))

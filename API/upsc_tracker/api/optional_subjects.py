from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from upsc_tracker.core.auth import current_user_id
from upsc_tracker.data.optional_subjects import list_optional_subjects
from upsc_tracker.runtime.session_manager import session_manager
from upsc_tracker.schemas.tracker import OptionalSubjectsResponse, SelectOptionalRequest

router = APIRouter(prefix="/optional-subjects", tags=["optional-subjects"])


@router.get("", response_model=OptionalSubjectsResponse)
async def get_optional_subjects(user_id: str = Depends(current_user_id)):
    session = await session_manager.get_session(user_id)
    return OptionalSubjectsResponse(selected=session.optional_subject_id, items=list_optional_subjects())


@router.put("/selection")
async def select_optional_subject(payload: SelectOptionalRequest, user_id: str = Depends(current_user_id)):
    try:
        session = await session_manager.select_optional_subject(user_id, payload.subject_id)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {**session.describe(), "summary": session.summary()}

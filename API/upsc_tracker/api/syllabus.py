from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends

from upsc_tracker.core.auth import current_user_id
from upsc_tracker.revision.scheduler import REVISION_SCHEDULE, leaf_checkpoints, paper_label
from upsc_tracker.revision.workflow import RevisionWorkflow, TransitionRejected, TransitionResult
from upsc_tracker.runtime.session_manager import session_manager
from upsc_tracker.schemas.tracker import (
    CheckpointView,
    SetStatusRequest,
    StartTrackingRequest,
    TopicDetailResponse,
    TransitionResponse,
)
from upsc_tracker.syllabus.model import Leaf
from upsc_tracker.syllabus.progress import completion_percent

router = APIRouter(prefix="/syllabus", tags=["syllabus"])


async def run_transition(
    user_id: str,
    topic_id: str,
    operation: Callable[[RevisionWorkflow], TransitionResult],
) -> TransitionResponse:
    try:
        result = await session_manager.apply(user_id, operation)
    except TransitionRejected as exc:
        session = await session_manager.get_session(user_id)
        node = session.tree.require(topic_id)
        return TransitionResponse(
            accepted=False,
            notice=exc.notice,
            code=exc.code,
            topic_id=topic_id,
            status=node.status,
            summary=session.summary(),
        )
    session = await session_manager.get_session(user_id)
    return TransitionResponse(
        accepted=True,
        notice=result.notice,
        topic_id=result.topic_id,
        status=result.status,
        changed_leaf_ids=result.changed_leaf_ids,
        changed_parent_ids=result.changed_parent_ids,
        summary=session.summary(),
    )


@router.get("")
async def get_syllabus(user_id: str = Depends(current_user_id)):
    session = await session_manager.get_session(user_id)
    return {
        **session.describe(),
        "syllabus": session.tree.to_forest(),
        "summary": session.summary(),
    }


@router.post("/reload")
async def reload_syllabus(user_id: str = Depends(current_user_id)):
    session = await session_manager.open_session(user_id)
    return {**session.describe(), "summary": session.summary()}


@router.get("/summary")
async def get_summary(user_id: str = Depends(current_user_id)):
    session = await session_manager.get_session(user_id)
    return session.summary()


@router.get("/topics/{topic_id}", response_model=TopicDetailResponse)
async def get_topic(topic_id: str, user_id: str = Depends(current_user_id)):
    session = await session_manager.get_session(user_id)
    tree = session.tree
    node = tree.require(topic_id)
    path = [{"id": p.id, "name": p.name, "status": p.status.value} for p in reversed(tree.ancestors(topic_id))]
    checkpoints = []
    label = None
    if isinstance(node, Leaf):
        label = paper_label(tree, topic_id)
        checkpoints = [
            CheckpointView(
                checkpoint=key,
                offset_days=REVISION_SCHEDULE[key],
                status=state.status.value,
                due_date=state.due_date,
            )
            for key, state in leaf_checkpoints(node).items()
        ]
    return TopicDetailResponse(
        topic=tree.to_dict(topic_id),
        is_leaf=node.is_leaf,
        path=path,
        paper_label=label,
        completion_percent=completion_percent(tree, topic_id),
        checkpoints=checkpoints,
    )


@router.post("/topics/{topic_id}/toggle", response_model=TransitionResponse)
async def toggle_topic(topic_id: str, user_id: str = Depends(current_user_id)):
    return await run_transition(user_id, topic_id, lambda wf: wf.toggle_status(topic_id))


@router.put("/topics/{topic_id}/status", response_model=TransitionResponse)
async def set_topic_status(topic_id: str, payload: SetStatusRequest, user_id: str = Depends(current_user_id)):
    return await run_transition(user_id, topic_id, lambda wf: wf.set_status(topic_id, payload.status))


@router.post("/topics/{topic_id}/start", response_model=TransitionResponse)
async def start_tracking(topic_id: str, payload: StartTrackingRequest, user_id: str = Depends(current_user_id)):
    return await run_transition(user_id, topic_id, lambda wf: wf.start_tracking(topic_id, payload.start_date))

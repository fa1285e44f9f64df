from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from upsc_tracker.syllabus.model import Status


class StartTrackingRequest(BaseModel):
    start_date: date


class SetStatusRequest(BaseModel):
    status: Status


class SelectOptionalRequest(BaseModel):
    subject_id: str | None = Field(default=None, max_length=64)


class TransitionResponse(BaseModel):
    accepted: bool
    notice: str
    code: str | None = None
    topic_id: str
    status: Status | None = None
    changed_leaf_ids: list[str] = Field(default_factory=list)
    changed_parent_ids: list[str] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict)


class CheckpointView(BaseModel):
    checkpoint: str
    offset_days: int
    status: str
    due_date: date | None = None


class TopicDetailResponse(BaseModel):
    topic: dict
    is_leaf: bool
    path: list[dict]
    paper_label: str | None = None
    completion_percent: int
    checkpoints: list[CheckpointView] = Field(default_factory=list)


class OptionalSubjectView(BaseModel):
    id: str
    name: str
    detailed: bool


class OptionalSubjectsResponse(BaseModel):
    selected: str | None = None
    items: list[OptionalSubjectView]

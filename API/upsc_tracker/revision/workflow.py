"""
User-driven state transitions on a syllabus tree.

Every operation validates its preconditions before touching the tree, so a
rejected transition (``TransitionRejected``) leaves no partial mutation. The
workflow only changes in-memory state; persisting the affected leaves and
notifying subscribers is the caller's job (see ``runtime.session_manager``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from upsc_tracker.core.logging import DOMAIN_REVISION, get_domain_logger
from upsc_tracker.revision.scheduler import (
    FINAL_CHECKPOINT,
    REVISION_SCHEDULE,
    CheckpointStatus,
    checkpoint_state,
    resolve_today,
)
from upsc_tracker.syllabus.aggregator import bubble_up, cascade
from upsc_tracker.syllabus.model import Leaf, Parent, Status, SyllabusTree

logger = get_domain_logger(__name__, DOMAIN_REVISION)

STATUS_CYCLE = {
    Status.NOT_STARTED: Status.IN_PROGRESS,
    Status.IN_PROGRESS: Status.COMPLETED,
    Status.COMPLETED: Status.NOT_STARTED,
}


class TransitionRejected(Exception):
    def __init__(self, code: str, notice: str, *, topic_id: str | None = None):
        super().__init__(notice)
        self.code = code
        self.notice = notice
        self.topic_id = topic_id


@dataclass
class TransitionResult:
    action: str
    topic_id: str
    status: Status
    changed_leaf_ids: list[str] = field(default_factory=list)
    changed_parent_ids: list[str] = field(default_factory=list)
    notice: str = ""


class RevisionWorkflow:
    def __init__(self, tree: SyllabusTree):
        self.tree = tree

    def _leaf(self, topic_id: str, action: str) -> Leaf:
        node = self.tree.require(topic_id)
        if not isinstance(node, Leaf):
            raise TransitionRejected(
                "not_a_micro_topic",
                f"{node.name} has sub-topics; {action} applies to micro-topics only.",
                topic_id=topic_id,
            )
        return node

    def start_tracking(self, topic_id: str, start_date: date) -> TransitionResult:
        leaf = self._leaf(topic_id, "revision tracking")
        if leaf.start_date is not None:
            raise TransitionRejected(
                "already_tracking",
                f"Tracking already started on {leaf.start_date.isoformat()}.",
                topic_id=topic_id,
            )
        if leaf.status != Status.NOT_STARTED:
            raise TransitionRejected(
                "invalid_status",
                f"Tracking can only start from not-started (current: {leaf.status.value}).",
                topic_id=topic_id,
            )
        leaf.start_date = start_date
        leaf.status = Status.IN_PROGRESS
        parents = bubble_up(self.tree, topic_id)
        logger.info("Tracking started topic=%s start_date=%s", topic_id, start_date.isoformat())
        return TransitionResult(
            action="start_tracking",
            topic_id=topic_id,
            status=leaf.status,
            changed_leaf_ids=[topic_id],
            changed_parent_ids=parents,
            notice=f"Tracking started from {start_date.isoformat()}.",
        )

    def _set_leaf_status(self, leaf: Leaf, status: Status, action: str) -> TransitionResult:
        if status == Status.IN_PROGRESS and leaf.status == Status.NOT_STARTED and leaf.start_date is None:
            raise TransitionRejected(
                "start_date_required",
                "Pick a start date to begin tracking this topic.",
                topic_id=leaf.id,
            )
        if leaf.status == status:
            return TransitionResult(action=action, topic_id=leaf.id, status=status, notice="Status unchanged.")
        leaf.status = status
        parents = bubble_up(self.tree, leaf.id)
        return TransitionResult(
            action=action,
            topic_id=leaf.id,
            status=status,
            changed_leaf_ids=[leaf.id],
            changed_parent_ids=parents,
            notice=f"Status set to {status.value}.",
        )

    def _cascade(self, parent: Parent, status: Status, action: str) -> TransitionResult:
        leaves, ancestors = cascade(self.tree, parent.id, status)
        return TransitionResult(
            action=action,
            topic_id=parent.id,
            status=status,
            changed_leaf_ids=leaves,
            changed_parent_ids=ancestors,
            notice=f"{parent.name} and all sub-topics set to {status.value}.",
        )

    def toggle_status(self, topic_id: str) -> TransitionResult:
        """Cycle not-started -> in-progress -> completed -> not-started."""
        node = self.tree.require(topic_id)
        new_status = STATUS_CYCLE[node.status]
        if isinstance(node, Parent):
            return self._cascade(node, new_status, "toggle_status")
        return self._set_leaf_status(node, new_status, "toggle_status")

    def set_status(self, topic_id: str, status: Status) -> TransitionResult:
        node = self.tree.require(topic_id)
        if isinstance(node, Parent):
            return self._cascade(node, status, "set_status")
        return self._set_leaf_status(node, status, "set_status")

    def confirm_revision(self, topic_id: str, checkpoint: str, today: date | None = None) -> TransitionResult:
        if checkpoint not in REVISION_SCHEDULE:
            raise TransitionRejected(
                "unknown_checkpoint",
                f"Unknown revision checkpoint {checkpoint!r}; expected one of {', '.join(REVISION_SCHEDULE)}.",
                topic_id=topic_id,
            )
        leaf = self._leaf(topic_id, "revision confirmation")
        today = resolve_today(today)
        state = checkpoint_state(
            leaf.start_date, REVISION_SCHEDULE[checkpoint], bool(leaf.revisions.get(checkpoint)), today
        )
        if state.status == CheckpointStatus.DONE:
            raise TransitionRejected("already_done", "Revision already marked as done.", topic_id=topic_id)
        if state.status == CheckpointStatus.PENDING:
            if state.due_date is None:
                notice = "Revision pending (start date missing)."
            else:
                notice = f"Revision pending. Due: {state.due_date.isoformat()}"
            raise TransitionRejected("not_due", notice, topic_id=topic_id)

        leaf.revisions[checkpoint] = True
        if checkpoint == FINAL_CHECKPOINT:
            leaf.status = Status.COMPLETED
        parents = bubble_up(self.tree, topic_id)
        logger.info("Revision confirmed topic=%s checkpoint=%s was=%s", topic_id, checkpoint, state.status.value)
        return TransitionResult(
            action="confirm_revision",
            topic_id=topic_id,
            status=leaf.status,
            changed_leaf_ids=[topic_id],
            changed_parent_ids=parents,
            notice=f"Revision {checkpoint.upper()} confirmed!",
        )

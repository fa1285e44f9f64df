"""
Spaced-repetition revision scheduling (day 1/3/7/21 checkpoints).

Each micro-topic has four checkpoints counted from its tracking start date.
A checkpoint is ``pending`` until its due date, ``due`` on it, ``overdue``
after it, and ``done`` once the revision has been confirmed. All comparisons
are whole calendar days.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from upsc_tracker.syllabus.model import Leaf, SyllabusTree

REVISION_SCHEDULE = {"d1": 1, "d3": 3, "d7": 7, "d21": 21}
FINAL_CHECKPOINT = "d21"


class CheckpointStatus(str, Enum):
    PENDING = "pending"
    DUE = "due"
    OVERDUE = "overdue"
    DONE = "done"


@dataclass(frozen=True)
class CheckpointState:
    status: CheckpointStatus
    due_date: date | None = None

    @property
    def actionable(self) -> bool:
        return self.status in (CheckpointStatus.DUE, CheckpointStatus.OVERDUE)


@dataclass(frozen=True)
class DueRevision:
    leaf_id: str
    leaf_name: str
    paper_label: str
    checkpoint: str
    offset_days: int
    status: CheckpointStatus
    due_date: date

    def to_dict(self) -> dict:
        return {
            "leaf_id": self.leaf_id,
            "leaf_name": self.leaf_name,
            "paper_label": self.paper_label,
            "checkpoint": self.checkpoint,
            "offset_days": self.offset_days,
            "status": self.status.value,
            "due_date": self.due_date.isoformat(),
        }


def local_today() -> date:
    return date.today()


def resolve_today(today: date | None) -> date:
    return today if today is not None else local_today()


def checkpoint_state(
    start_date: date | None,
    offset_days: int,
    confirmed: bool,
    today: date | None = None,
) -> CheckpointState:
    if start_date is None:
        return CheckpointState(CheckpointStatus.PENDING)
    if confirmed:
        return CheckpointState(CheckpointStatus.DONE)
    due_date = start_date + timedelta(days=offset_days)
    today = resolve_today(today)
    if due_date > today:
        return CheckpointState(CheckpointStatus.PENDING, due_date)
    if due_date == today:
        return CheckpointState(CheckpointStatus.DUE, due_date)
    return CheckpointState(CheckpointStatus.OVERDUE, due_date)


def leaf_checkpoints(leaf: Leaf, today: date | None = None) -> dict[str, CheckpointState]:
    today = resolve_today(today)
    return {
        key: checkpoint_state(leaf.start_date, offset, bool(leaf.revisions.get(key)), today)
        for key, offset in REVISION_SCHEDULE.items()
    }


def _short_paper_name(name: str) -> str:
    # "GS Paper-I (Indian Heritage and ...)" -> "GS Paper-I"
    if name.startswith("GS Paper"):
        return name.split("(")[0].strip()
    return name


def paper_label(tree: SyllabusTree, leaf_id: str) -> str:
    """Display grouping: exam stage plus the paper (depth-1 ancestor) a leaf sits under."""
    chain = list(reversed(tree.ancestors(leaf_id)))
    if not chain:
        return tree.require(leaf_id).name
    stage = chain[0].name
    paper = chain[1] if len(chain) > 1 else tree.require(leaf_id)
    return f"{stage} {_short_paper_name(paper.name)}"


def collect_due(tree: SyllabusTree, today: date | None = None) -> list[DueRevision]:
    """Every due or overdue checkpoint across the forest, oldest due date first."""
    today = resolve_today(today)
    due: list[DueRevision] = []
    for leaf in tree.leaves():
        if leaf.start_date is None:
            continue
        label = None
        for key, state in leaf_checkpoints(leaf, today).items():
            if not state.actionable:
                continue
            label = label or paper_label(tree, leaf.id)
            due.append(
                DueRevision(
                    leaf_id=leaf.id,
                    leaf_name=leaf.name,
                    paper_label=label,
                    checkpoint=key,
                    offset_days=REVISION_SCHEDULE[key],
                    status=state.status,
                    due_date=state.due_date,
                )
            )
    due.sort(key=lambda item: (item.due_date, item.offset_days))
    return due

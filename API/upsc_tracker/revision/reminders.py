from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from upsc_tracker.revision.scheduler import DueRevision, collect_due, resolve_today
from upsc_tracker.syllabus.model import SyllabusTree


@dataclass
class DailyReminder:
    """Revisions to surface on the first visit of a calendar day."""

    date: date
    show: bool
    items: list[DueRevision] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "show": self.show,
            "count": len(self.items),
            "items": [item.to_dict() for item in self.items],
        }


def daily_reminder(tree: SyllabusTree, last_reminder_date: str | None, today: date | None = None) -> DailyReminder:
    today = resolve_today(today)
    if last_reminder_date == today.isoformat():
        return DailyReminder(date=today, show=False)
    items = collect_due(tree, today)
    return DailyReminder(date=today, show=bool(items), items=items)

from __future__ import annotations

from datetime import date

from upsc_tracker.revision import scheduler
from upsc_tracker.revision.reminders import daily_reminder
from upsc_tracker.revision.scheduler import CheckpointStatus, checkpoint_state, collect_due, leaf_checkpoints, paper_label
from upsc_tracker.syllabus.assembly import build_tree

START = date(2024, 3, 1)


def test_checkpoint_without_start_date_is_pending():
    state = checkpoint_state(None, 7, False, date(2024, 3, 8))
    assert state.status == CheckpointStatus.PENDING
    assert state.due_date is None


def test_confirmed_checkpoint_is_done_regardless_of_date():
    assert checkpoint_state(START, 21, True, date(2024, 3, 2)).status == CheckpointStatus.DONE


def test_d7_pending_due_and_overdue():
    assert checkpoint_state(START, 7, False, date(2024, 3, 7)).status == CheckpointStatus.PENDING
    due = checkpoint_state(START, 7, False, date(2024, 3, 8))
    assert due.status == CheckpointStatus.DUE
    assert due.due_date == date(2024, 3, 8)
    assert checkpoint_state(START, 7, False, date(2024, 3, 9)).status == CheckpointStatus.OVERDUE


def test_today_defaults_to_local_today(monkeypatch):
    monkeypatch.setattr(scheduler, "local_today", lambda: date(2024, 3, 2))
    assert checkpoint_state(START, 1, False).status == CheckpointStatus.DUE


def test_leaf_checkpoints_covers_all_four(small_tree):
    leaf = small_tree.nodes["a"]
    leaf.start_date = START
    leaf.revisions["d1"] = True
    states = leaf_checkpoints(leaf, date(2024, 3, 4))
    assert list(states) == ["d1", "d3", "d7", "d21"]
    assert states["d1"].status == CheckpointStatus.DONE
    assert states["d3"].status == CheckpointStatus.OVERDUE
    assert states["d7"].status == CheckpointStatus.PENDING


def test_paper_label_uses_stage_and_short_paper_name():
    tree, _ = build_tree()
    assert paper_label(tree, "prelims-gs1-ca-nat") == "Prelims GS Paper-I"
    assert paper_label(tree, "mains-gs1-art-visual") == "Mains GS Paper-I"
    assert paper_label(tree, "mains-essay-economic") == "Mains Essay"


def test_collect_due_orders_by_due_date(small_tree):
    small_tree.nodes["a"].start_date = date(2024, 3, 1)
    small_tree.nodes["b"].start_date = date(2024, 2, 1)
    items = collect_due(small_tree, date(2024, 3, 4))
    assert [(i.leaf_id, i.checkpoint) for i in items][:3] == [("b", "d1"), ("b", "d3"), ("b", "d7")]
    assert ("a", "d1") in [(i.leaf_id, i.checkpoint) for i in items]
    assert all(i.status in (CheckpointStatus.DUE, CheckpointStatus.OVERDUE) for i in items)
    assert items[0].paper_label == "Paper Section"


def test_collect_due_skips_untracked_leaves(small_tree):
    assert collect_due(small_tree, date(2030, 1, 1)) == []


def test_daily_reminder_shows_once_per_day(small_tree):
    small_tree.nodes["a"].start_date = date(2024, 3, 1)
    first = daily_reminder(small_tree, None, date(2024, 3, 2))
    assert first.show is True
    assert first.to_dict()["count"] == 1
    again = daily_reminder(small_tree, "2024-03-02", date(2024, 3, 2))
    assert again.show is False
    assert again.items == []
    next_day = daily_reminder(small_tree, "2024-03-02", date(2024, 3, 3))
    assert next_day.show is True
    assert daily_reminder(small_tree, None, date(2024, 3, 1)).show is False

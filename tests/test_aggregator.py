from __future__ import annotations

from upsc_tracker.syllabus.aggregator import aggregate, bubble_up, cascade, recompute_all
from upsc_tracker.syllabus.model import Status


def test_aggregate_rules():
    assert aggregate([]) == Status.NOT_STARTED
    assert aggregate([Status.COMPLETED, Status.COMPLETED]) == Status.COMPLETED
    assert aggregate([Status.NOT_STARTED, Status.NOT_STARTED]) == Status.NOT_STARTED
    assert aggregate([Status.COMPLETED, Status.NOT_STARTED]) == Status.IN_PROGRESS
    assert aggregate([Status.IN_PROGRESS, Status.NOT_STARTED]) == Status.IN_PROGRESS


def test_recompute_all_derives_parents(small_tree):
    small_tree.nodes["a"].status = Status.COMPLETED
    small_tree.nodes["b"].status = Status.COMPLETED
    recompute_all(small_tree)
    assert small_tree.nodes["s"].status == Status.COMPLETED
    assert small_tree.nodes["p"].status == Status.IN_PROGRESS


def test_recompute_all_overrides_stale_parent_status(small_tree):
    small_tree.nodes["p"].status = Status.COMPLETED
    recompute_all(small_tree)
    assert small_tree.nodes["p"].status == Status.NOT_STARTED


def test_bubble_up_reports_changed_parents(small_tree):
    small_tree.nodes["a"].status = Status.IN_PROGRESS
    changed = bubble_up(small_tree, "a")
    assert changed == ["s", "p"]
    assert small_tree.nodes["p"].status == Status.IN_PROGRESS


def test_bubble_up_stops_when_parent_unchanged(small_tree):
    small_tree.nodes["a"].status = Status.IN_PROGRESS
    bubble_up(small_tree, "a")
    small_tree.nodes["b"].status = Status.IN_PROGRESS
    assert bubble_up(small_tree, "b") == []


def test_cascade_completed_marks_every_descendant(small_tree):
    leaves, ancestors = cascade(small_tree, "p", Status.COMPLETED)
    assert sorted(leaves) == ["a", "b", "c"]
    assert ancestors == []
    assert all(node.status == Status.COMPLETED for node in small_tree.walk())


def test_cascade_on_section_bubbles_to_paper(small_tree):
    leaves, ancestors = cascade(small_tree, "s", Status.COMPLETED)
    assert leaves == ["a", "b"]
    assert ancestors == ["p"]
    assert small_tree.nodes["p"].status == Status.IN_PROGRESS
    assert small_tree.nodes["c"].status == Status.NOT_STARTED


def test_cascade_on_last_incomplete_branch_completes_root(small_tree):
    small_tree.nodes["c"].status = Status.COMPLETED
    bubble_up(small_tree, "c")
    assert small_tree.nodes["p"].status == Status.IN_PROGRESS

    leaves, ancestors = cascade(small_tree, "s", Status.COMPLETED)
    assert leaves == ["a", "b"]
    assert ancestors == ["p"]
    assert small_tree.nodes["p"].status == Status.COMPLETED

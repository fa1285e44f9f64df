from __future__ import annotations

from datetime import date

from upsc_tracker.syllabus.merge import merge_progress
from upsc_tracker.syllabus.model import Status


def test_merge_applies_records_and_recomputes(small_tree):
    report = merge_progress(
        small_tree,
        [
            {"topicId": "a", "status": "completed", "startDate": "2024-03-01", "revisions": {"d1": True}},
            {"topicId": "b", "status": "completed", "startDate": None, "revisions": {}},
        ],
    )
    assert report.applied == ["a", "b"]
    assert small_tree.nodes["a"].start_date == date(2024, 3, 1)
    assert small_tree.nodes["a"].revisions == {"d1": True, "d3": False, "d7": False, "d21": False}
    assert small_tree.nodes["s"].status == Status.COMPLETED
    assert small_tree.nodes["p"].status == Status.IN_PROGRESS


def test_merge_skips_unknown_topic_ids(small_tree):
    before = small_tree.to_forest()
    report = merge_progress(small_tree, [{"topicId": "retired-topic", "status": "completed"}])
    assert report.skipped_unknown == ["retired-topic"]
    assert "retired-topic" not in small_tree
    assert small_tree.to_forest() == before


def test_merge_skips_parent_and_malformed_records(small_tree):
    report = merge_progress(
        small_tree,
        [
            {"topicId": "s", "status": "completed"},
            {"topicId": "a", "status": "finished"},
            {"topicId": "b", "status": "in-progress", "startDate": "not-a-date"},
            {"topicId": "c", "status": "in-progress", "startDate": "2024-01-10", "revisions": "broken"},
        ],
    )
    assert report.skipped_invalid == ["s", "a", "b"]
    assert report.applied == ["c"]
    assert small_tree.nodes["s"].status == Status.NOT_STARTED
    assert small_tree.nodes["c"].revisions["d1"] is False
    assert report.to_dict()["applied"] == 1

from __future__ import annotations

from upsc_tracker.syllabus import assembly
from upsc_tracker.syllabus.assembly import ASSEMBLY_ERROR_MESSAGE, assemble, build_tree
from upsc_tracker.syllabus.model import Leaf, Parent, Status
from upsc_tracker.syllabus.progress import completion_percent, progress_summary


def test_default_assembly_has_placeholder_optional_slots():
    tree, result = build_tree()
    assert result.error is None
    assert result.optional_subject_id is None
    assert tree.roots == ["prelims", "mains"]
    slot = tree.require("mains-optional-1")
    assert isinstance(slot, Parent)
    assert slot.children == ["mains-opt1-placeholder"]
    assert tree.require("mains-opt1-placeholder").name == "Select your optional subject"
    assert tree.require("mains-opt2-placeholder").is_leaf


def test_every_node_starts_not_started_with_srs_fields_on_leaves_only():
    tree, _ = build_tree()
    for node in tree.walk():
        assert node.status == Status.NOT_STARTED
        if isinstance(node, Leaf):
            assert node.start_date is None
            assert set(node.revisions) == {"d1", "d3", "d7", "d21"}


def test_detailed_optional_subject_fills_both_slots():
    tree, result = build_tree("geography")
    assert result.optional_subject_id == "geography"
    assert result.optional_subject_name == "Geography"
    assert tree.require("mains-optional-1").name == "Optional (GEOGRAPHY) P-I"
    assert tree.require("mains-optional-2").name == "Optional (GEOGRAPHY) P-II"
    assert "mains-opt1-geo-1-1" in tree
    assert "mains-opt1-placeholder" not in tree


def test_optional_subject_without_detail_gets_coming_soon_leaf():
    tree, result = build_tree("anthropology")
    assert result.optional_subject_id == "anthropology"
    leaf = tree.require("mains-opt1-anthropology-placeholder")
    assert leaf.name == "Detailed syllabus for Anthropology coming soon."


def test_unknown_optional_subject_falls_back_to_placeholders():
    tree, result = build_tree("astrology")
    assert result.optional_subject_id is None
    assert result.error is None
    assert "mains-opt1-placeholder" in tree


def test_assembly_failure_yields_error_and_empty_forest(monkeypatch):
    def _boom(_subject_id):
        raise RuntimeError("broken definitions")

    monkeypatch.setattr(assembly, "optional_slots", _boom)
    result = assemble("geography")
    assert result.forest == []
    assert result.error == ASSEMBLY_ERROR_MESSAGE


def test_completion_summary_rounds_share_of_completed_leaves():
    tree, _ = build_tree()
    assert progress_summary(tree)["overall"] == 0
    essay_leaves = [leaf.id for leaf in tree.leaves("mains-essay")]
    assert len(essay_leaves) == 5
    for leaf_id in essay_leaves[:3]:
        tree.nodes[leaf_id].status = Status.COMPLETED
    assert completion_percent(tree, "mains-essay") == 60
    assert progress_summary(tree)["mainsEssay"] == 60
    assert completion_percent(tree, "no-such-paper") == 0

from __future__ import annotations

from upsc_tracker.syllabus.normalizer import normalize, normalize_forest


def test_parent_loses_srs_fields_and_leaf_gains_them():
    raw = {
        "id": "paper",
        "name": "Paper",
        "startDate": "2024-01-01",
        "revisions": {"d1": True},
        "children": [{"id": "leaf", "name": "Leaf"}],
    }
    out = normalize(raw)
    assert "startDate" not in out
    assert "revisions" not in out
    leaf = out["children"][0]
    assert leaf["children"] == []
    assert leaf["startDate"] is None
    assert leaf["revisions"] == {"d1": False, "d3": False, "d7": False, "d21": False}


def test_leaf_keeps_existing_srs_values():
    out = normalize({"id": "leaf", "name": "Leaf", "startDate": "2024-03-05", "revisions": {"d3": True, "x": True}})
    assert out["startDate"] == "2024-03-05"
    assert out["revisions"] == {"d1": False, "d3": True, "d7": False, "d21": False}


def test_normalize_is_idempotent():
    raw = [
        {
            "id": "root",
            "name": "Root",
            "children": [
                {"id": "a", "name": "A", "revisions": {"d1": 1}},
                {"id": "b", "name": "B", "children": [{"id": "b1", "name": "B1", "startDate": "2024-02-02"}]},
            ],
        }
    ]
    once = normalize_forest(raw)
    assert normalize_forest(once) == once


def test_invalid_children_are_dropped():
    out = normalize({"id": "p", "name": "P", "children": [{"name": "no id"}, "junk", {"id": "ok", "name": "Ok"}]})
    assert [child["id"] for child in out["children"]] == ["ok"]


def test_parent_with_only_invalid_children_becomes_leaf():
    out = normalize({"id": "p", "name": "P", "children": [{"id": ""}, None]})
    assert out["children"] == []
    assert out["revisions"]["d21"] is False
    assert normalize(out) == out


def test_normalize_does_not_alias_input():
    raw = {"id": "leaf", "name": "Leaf", "meta": {"tags": ["a"]}}
    out = normalize(raw)
    out["meta"]["tags"].append("b")
    assert raw["meta"]["tags"] == ["a"]


def test_invalid_root_is_dropped():
    assert normalize_forest([{"name": "missing id"}, {"id": "ok", "name": "Ok"}])[0]["id"] == "ok"
    assert normalize({"id": "   "}) is None

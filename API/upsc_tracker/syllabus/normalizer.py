from __future__ import annotations

import copy

from upsc_tracker.core.logging import DOMAIN_SYLLABUS, get_domain_logger
from upsc_tracker.syllabus.model import REVISION_KEYS

logger = get_domain_logger(__name__, DOMAIN_SYLLABUS)

SRS_FIELDS = ("startDate", "revisions")


def _is_valid(node) -> bool:
    return isinstance(node, dict) and isinstance(node.get("id"), str) and bool(node["id"].strip())


def _leaf_revisions(raw) -> dict[str, bool]:
    revisions = {key: False for key in REVISION_KEYS}
    if isinstance(raw, dict):
        for key in REVISION_KEYS:
            revisions[key] = bool(raw.get(key, False))
    return revisions


def normalize(node: dict) -> dict | None:
    """
    Return a structural clone of ``node`` with SRS fields on leaves only.

    Parents (one or more valid children) lose ``startDate``/``revisions``; leaves
    always get ``children=[]``, ``startDate`` (default ``None``) and a full
    ``revisions`` map. Invalid nodes (not a dict, or without an id) yield ``None``
    and are dropped by their parent. Idempotent.
    """
    if not _is_valid(node):
        logger.warning("Invalid syllabus node dropped: %r", node if not isinstance(node, dict) else node.get("name"))
        return None

    out = {key: copy.deepcopy(value) for key, value in node.items() if key not in ("children", *SRS_FIELDS)}
    raw_children = node.get("children")
    if isinstance(raw_children, list) and raw_children:
        children = [child for child in (normalize(c) for c in raw_children) if child is not None]
        if children:
            out["children"] = children
            return out
        logger.warning("Node %s lost all children during normalization; treating as leaf", node["id"])
    elif raw_children is not None and not isinstance(raw_children, list):
        logger.warning("Node %s has unexpected children value %r; treating as leaf", node["id"], raw_children)

    out["children"] = []
    out["startDate"] = node.get("startDate") or None
    out["revisions"] = _leaf_revisions(node.get("revisions"))
    return out


def normalize_forest(nodes: list) -> list[dict]:
    return [n for n in (normalize(node) for node in nodes or []) if n is not None]

"""
Status roll-up for the syllabus tree.

A parent is ``completed`` only when every child is; ``in-progress`` when at
least one child has been started (in progress or completed); otherwise
``not-started``. ``recompute`` applies the rule bottom-up over a subtree,
``bubble_up`` re-applies it along one ancestor chain after a single change,
and ``cascade`` is the bulk edit that forces a status down a whole subtree.
"""
from __future__ import annotations

from collections.abc import Iterable

from upsc_tracker.core.logging import DOMAIN_PROGRESS, get_domain_logger
from upsc_tracker.syllabus.model import Leaf, Parent, Status, SyllabusTree

logger = get_domain_logger(__name__, DOMAIN_PROGRESS)


def aggregate(statuses: Iterable[Status]) -> Status:
    statuses = list(statuses)
    if not statuses:
        return Status.NOT_STARTED
    if all(s == Status.COMPLETED for s in statuses):
        return Status.COMPLETED
    if any(s in (Status.IN_PROGRESS, Status.COMPLETED) for s in statuses):
        return Status.IN_PROGRESS
    return Status.NOT_STARTED


def recompute(tree: SyllabusTree, node_id: str) -> Status:
    """Post-order recompute of the subtree under ``node_id``; returns its status."""
    node = tree.require(node_id)
    if isinstance(node, Leaf):
        return node.status
    # Iterative post-order so deep trees never hit the recursion limit.
    order: list[Parent] = [n for n in tree.walk(node_id) if isinstance(n, Parent)]
    for parent in reversed(order):
        parent.status = aggregate(tree.nodes[child_id].status for child_id in parent.children)
    return node.status


def recompute_all(tree: SyllabusTree) -> None:
    for root_id in tree.roots:
        recompute(tree, root_id)


def bubble_up(tree: SyllabusTree, changed_id: str) -> list[str]:
    """Re-derive ancestor statuses after ``changed_id`` changed; returns ids of parents that changed."""
    changed: list[str] = []
    parent = tree.parent_of(changed_id)
    while parent is not None:
        new_status = aggregate(tree.nodes[child_id].status for child_id in parent.children)
        if new_status == parent.status:
            break
        logger.debug("Parent %s status %s -> %s", parent.id, parent.status.value, new_status.value)
        parent.status = new_status
        changed.append(parent.id)
        parent = tree.parent_of(parent.id)
    return changed


def cascade(tree: SyllabusTree, parent_id: str, status: Status) -> tuple[list[str], list[str]]:
    """
    Force ``status`` onto ``parent_id`` and every descendant, then bubble up.

    Returns ``(changed_leaf_ids, changed_ancestor_ids)``. Leaves keep their
    start date and revision flags.
    """
    changed_leaves: list[str] = []
    for node in tree.walk(parent_id):
        if isinstance(node, Leaf) and node.status != status:
            changed_leaves.append(node.id)
        node.status = status
    ancestors = bubble_up(tree, parent_id)
    logger.info(
        "Cascaded status=%s from %s to %d leaves (%d ancestors changed)",
        status.value,
        parent_id,
        len(changed_leaves),
        len(ancestors),
    )
    return changed_leaves, ancestors

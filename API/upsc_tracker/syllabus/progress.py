"""Completion percentages for the dashboard: share of completed micro-topics."""
from __future__ import annotations

from upsc_tracker.syllabus.model import Status, SyllabusTree

# Summary key -> paper node id.
SUMMARY_PAPERS = {
    "prelimsGS": "prelims-gs1",
    "prelimsCSAT": "prelims-csat",
    "mainsEssay": "mains-essay",
    "mainsGS1": "mains-gs1",
    "mainsGS2": "mains-gs2",
    "mainsGS3": "mains-gs3",
    "mainsGS4": "mains-gs4",
    "optionalP1": "mains-optional-1",
    "optionalP2": "mains-optional-2",
}


def completion_percent(tree: SyllabusTree, node_id: str | None = None) -> int:
    """Rounded percentage of completed leaves under ``node_id`` (whole forest when omitted)."""
    if node_id is not None and node_id not in tree:
        return 0
    total = 0
    completed = 0
    for leaf in tree.leaves(node_id):
        total += 1
        if leaf.status == Status.COMPLETED:
            completed += 1
    if total == 0:
        return 0
    return int(completed * 100 / total + 0.5)


def progress_summary(tree: SyllabusTree) -> dict[str, int]:
    summary = {"overall": completion_percent(tree)}
    for key, paper_id in SUMMARY_PAPERS.items():
        summary[key] = completion_percent(tree, paper_id)
    return summary

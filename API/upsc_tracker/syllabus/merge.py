from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from upsc_tracker.core.logging import DOMAIN_PROGRESS, get_domain_logger
from upsc_tracker.syllabus.aggregator import recompute_all
from upsc_tracker.syllabus.model import REVISION_KEYS, Leaf, SyllabusTree, parse_start_date, parse_status

logger = get_domain_logger(__name__, DOMAIN_PROGRESS)


@dataclass
class MergeReport:
    applied: list[str] = field(default_factory=list)
    skipped_unknown: list[str] = field(default_factory=list)
    skipped_invalid: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "applied": len(self.applied),
            "skipped_unknown": list(self.skipped_unknown),
            "skipped_invalid": list(self.skipped_invalid),
        }


def merge_progress(tree: SyllabusTree, records: Iterable[dict]) -> MergeReport:
    """
    Overlay persisted ``{topicId, status, startDate, revisions}`` records onto a
    freshly assembled tree, then recompute every parent bottom-up.

    Records for ids missing from the current syllabus (e.g. after an optional
    subject switch) are logged and dropped; no node is created for them.
    """
    report = MergeReport()
    for record in records:
        topic_id = str(record.get("topicId") or "")
        node = tree.get(topic_id)
        if node is None:
            logger.warning("Progress found for unknown topic id=%s; skipping", topic_id)
            report.skipped_unknown.append(topic_id)
            continue
        if not isinstance(node, Leaf):
            # Parent statuses are derived from their children and recomputed below.
            logger.info("Ignoring persisted progress for parent topic id=%s", topic_id)
            report.skipped_invalid.append(topic_id)
            continue

        status = parse_status(record.get("status", node.status))
        try:
            start_date = parse_start_date(record.get("startDate"))
        except ValueError:
            status = None
        if status is None:
            logger.warning("Malformed progress record skipped id=%s record=%r", topic_id, record)
            report.skipped_invalid.append(topic_id)
            continue

        raw_revisions = record.get("revisions")
        if not isinstance(raw_revisions, dict):
            raw_revisions = {}
        node.status = status
        node.start_date = start_date
        node.revisions = {key: bool(raw_revisions.get(key, False)) for key in REVISION_KEYS}
        report.applied.append(topic_id)

    recompute_all(tree)
    logger.info(
        "Merged progress applied=%d unknown=%d invalid=%d",
        len(report.applied),
        len(report.skipped_unknown),
        len(report.skipped_invalid),
    )
    return report

"""
Assemble the full UPSC syllabus (Prelims + Mains) from static definitions.

Mains carries two optional-subject slots. Without a selected optional each
slot holds a single "select your optional subject" placeholder leaf; with one,
the slot keeps its id, takes the subject paper's children and is renamed to
include the subject. Assembly never raises: unknown subjects fall back to the
placeholder state and internal failures yield an empty forest plus a
user-facing error message.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field

from upsc_tracker.core.logging import DOMAIN_SYLLABUS, get_domain_logger
from upsc_tracker.data.optional_subjects import get_optional_subject
from upsc_tracker.data.syllabus_mains import ESSAY_SYLLABUS, MAINS_GS_PAPERS
from upsc_tracker.data.syllabus_prelims import PRELIMS_SYLLABUS
from upsc_tracker.syllabus.model import SyllabusTree
from upsc_tracker.syllabus.normalizer import normalize_forest

logger = get_domain_logger(__name__, DOMAIN_SYLLABUS)

PRELIMS_ID = "prelims"
MAINS_ID = "mains"
OPTIONAL_SLOTS = (
    ("mains-optional-1", "paper1", "P-I", "Optional Subject Paper-I", "mains-opt1"),
    ("mains-optional-2", "paper2", "P-II", "Optional Subject Paper-II", "mains-opt2"),
)
PLACEHOLDER_NAME = "Select your optional subject"
ASSEMBLY_ERROR_MESSAGE = "Critical error: could not build syllabus structure."


@dataclass
class AssemblyResult:
    forest: list[dict] = field(default_factory=list)
    optional_subject_id: str | None = None
    optional_subject_name: str | None = None
    error: str | None = None


def _placeholder_slot(slot_id: str, slot_name: str, prefix: str) -> dict:
    return {
        "id": slot_id,
        "name": slot_name,
        "children": [{"id": f"{prefix}-placeholder", "name": PLACEHOLDER_NAME}],
    }


def _optional_slot(subject_id: str, subject: dict, slot: tuple[str, str, str, str, str]) -> dict:
    slot_id, paper_key, paper_label, _, prefix = slot
    children = copy.deepcopy(subject.get(paper_key) or [])
    if not children:
        children = [
            {
                "id": f"{prefix}-{subject_id}-placeholder",
                "name": f"Detailed syllabus for {subject['name']} coming soon.",
            }
        ]
    return {
        "id": slot_id,
        "name": f"Optional ({subject_id.upper()}) {paper_label}",
        "children": children,
    }


def optional_slots(optional_subject_id: str | None) -> tuple[list[dict], str | None]:
    """Return the two slot definitions and the subject id actually applied (``None`` on fallback)."""
    subject = get_optional_subject(optional_subject_id)
    if optional_subject_id and subject is None:
        logger.warning("Unknown optional subject id=%s; using placeholder slots", optional_subject_id)
    if subject is None:
        return [_placeholder_slot(slot[0], slot[3], slot[4]) for slot in OPTIONAL_SLOTS], None
    return [_optional_slot(optional_subject_id, subject, slot) for slot in OPTIONAL_SLOTS], optional_subject_id


def assemble(optional_subject_id: str | None = None) -> AssemblyResult:
    try:
        slots, applied_subject = optional_slots(optional_subject_id)
        mains = {
            "id": MAINS_ID,
            "name": "Mains",
            "children": [copy.deepcopy(ESSAY_SYLLABUS), *copy.deepcopy(list(MAINS_GS_PAPERS)), *slots],
        }
        forest = normalize_forest([copy.deepcopy(PRELIMS_SYLLABUS), mains])
        if len(forest) != 2:
            raise ValueError("syllabus definitions did not yield both Prelims and Mains")
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error assembling syllabus optional=%s: %s", optional_subject_id, exc)
        return AssemblyResult(error=ASSEMBLY_ERROR_MESSAGE)

    subject = get_optional_subject(applied_subject)
    return AssemblyResult(
        forest=forest,
        optional_subject_id=applied_subject,
        optional_subject_name=subject["name"] if subject else None,
    )


def build_tree(optional_subject_id: str | None = None) -> tuple[SyllabusTree, AssemblyResult]:
    result = assemble(optional_subject_id)
    tree = SyllabusTree.from_definitions(result.forest)
    logger.info(
        "Syllabus assembled nodes=%d optional=%s error=%s",
        len(tree),
        result.optional_subject_id,
        bool(result.error),
    )
    return tree, result

from upsc_tracker.data.optional_subjects import OPTIONAL_SUBJECTS, get_optional_subject, list_optional_subjects
from upsc_tracker.data.syllabus_mains import ESSAY_SYLLABUS, MAINS_GS_PAPERS
from upsc_tracker.data.syllabus_prelims import PRELIMS_SYLLABUS
from upsc_tracker.syllabus.progress import SUMMARY_PAPERS
from upsc_tracker.syllabus.assembly import build_tree


def _ids(node):
    yield node["id"]
    for child in node.get("children", []):
        yield from _ids(child)


def test_static_ids_are_unique():
    ids = [i for root in (PRELIMS_SYLLABUS, ESSAY_SYLLABUS, *MAINS_GS_PAPERS) for i in _ids(root)]
    assert len(ids) == len(set(ids))


def test_mains_has_four_gs_papers():
    assert [paper["id"] for paper in MAINS_GS_PAPERS] == ["mains-gs1", "mains-gs2", "mains-gs3", "mains-gs4"]


def test_detailed_optionals_use_slot_prefixes():
    for subject_id, subject in OPTIONAL_SUBJECTS.items():
        for key, prefix in (("paper1", "mains-opt1-"), ("paper2", "mains-opt2-")):
            for section in subject.get(key, []):
                assert all(i.startswith(prefix) for i in _ids(section)), subject_id


def test_catalogue_lookup():
    assert get_optional_subject(None) is None
    assert get_optional_subject("geography")["name"] == "Geography"
    detailed = {item["id"] for item in list_optional_subjects() if item["detailed"]}
    assert detailed == {"geography", "psir", "sociology"}


def test_summary_papers_exist_in_assembled_tree():
    tree, _ = build_tree()
    for paper_id in SUMMARY_PAPERS.values():
        assert paper_id in tree

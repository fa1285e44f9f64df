from __future__ import annotations

import uuid
from pathlib import Path

import pytest
from pymongo import MongoClient

from upsc_tracker.core.settings import settings
from upsc_tracker.memory.progress_store import (
    FileProgressStore,
    MongoProgressStore,
    build_progress_store,
    get_progress_store_status,
    validate_user_id,
)


def _can_connect_mongo(url: str = "mongodb://localhost:27017") -> bool:
    try:
        client = MongoClient(url, serverSelectionTimeoutMS=1000)
        client.admin.command("ping")
        return True
    except Exception:  # noqa: BLE001
        return False


def test_file_store_round_trips_progress(tmp_path: Path):
    store = FileProgressStore(tmp_path)
    record = {"status": "in-progress", "startDate": "2024-03-01", "revisions": {"d1": True}}
    store.set_progress("user-1", "topic-a", record)
    assert store.get_all_progress("user-1") == [{"topicId": "topic-a", **record}]
    assert store.get_all_progress("user-2") == []


def test_file_store_set_progress_merges_fields(tmp_path: Path):
    store = FileProgressStore(tmp_path)
    store.set_progress("user-1", "topic-a", {"status": "in-progress", "startDate": "2024-03-01"})
    store.set_progress("user-1", "topic-a", {"status": "completed", "ignored": 1})
    [record] = store.get_all_progress("user-1")
    assert record == {"topicId": "topic-a", "status": "completed", "startDate": "2024-03-01"}


def test_file_store_profile_and_summary(tmp_path: Path):
    store = FileProgressStore(tmp_path)
    assert store.get_profile("user-1") == {}
    store.update_profile("user-1", {"optionalSubject": "psir"})
    store.update_profile("user-1", {"lastReminderDate": "2024-03-02"})
    profile = store.get_profile("user-1")
    assert profile["optionalSubject"] == "psir"
    assert profile["lastReminderDate"] == "2024-03-02"
    with pytest.raises(ValueError):
        store.update_profile("user-1", {"theme": "dark"})
    store.save_summary("user-1", {"overall": 12})
    assert (tmp_path / "users" / "user-1" / "summary.json").exists()


@pytest.mark.parametrize("user_id", ["", "..", "a/b", "x" * 129, "spaces here"])
def test_invalid_user_ids_are_rejected(user_id):
    with pytest.raises(ValueError):
        validate_user_id(user_id)


def test_build_store_falls_back_to_file(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(settings, "progress_store_backend", "sqlite")
    monkeypatch.setattr(settings, "runtime_data_dir", str(tmp_path))
    store = build_progress_store()
    assert isinstance(store, FileProgressStore)
    status = get_progress_store_status(store)
    assert status["active_mode"] == "file"
    assert status["configured_backend"] == "sqlite"


@pytest.mark.skipif(not _can_connect_mongo(), reason="MongoDB is not running on localhost:27017")
def test_repository_contract_parity_file_vs_mongo(tmp_path: Path):
    file_store = FileProgressStore(tmp_path / "file_store")
    mongo_store = MongoProgressStore("mongodb://localhost:27017", f"upsc_tracker_test_{uuid.uuid4().hex}")
    record = {"status": "completed", "startDate": "2024-03-01", "revisions": {"d21": True}}

    for store in (file_store, mongo_store):
        store.set_progress("learner-1", "topic-a", record)
        store.update_profile("learner-1", {"optionalSubject": "sociology"})

    assert file_store.get_all_progress("learner-1") == mongo_store.get_all_progress("learner-1")
    assert mongo_store.get_profile("learner-1")["optionalSubject"] == "sociology"


@pytest.mark.skipif(not _can_connect_mongo(), reason="MongoDB is not running on localhost:27017")
def test_mongo_index_creation_idempotency():
    mongo_db = f"upsc_tracker_test_indexes_{uuid.uuid4().hex}"
    MongoProgressStore("mongodb://localhost:27017", mongo_db)
    MongoProgressStore("mongodb://localhost:27017", mongo_db)

from __future__ import annotations

import json
import logging
import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock

from upsc_tracker.core.settings import settings

logger = logging.getLogger(__name__)
PROGRESS_FIELDS = ("status", "startDate", "revisions")
PROFILE_FIELDS = {"optionalSubject", "lastReminderDate"}
_USER_ID_PATTERN = re.compile(r"^[A-Za-z0-9_.@-]{1,128}$")


def _sanitize_mongo_error(raw: str) -> str:
    if not raw:
        return raw
    # Hide credentials embedded in connection URLs.
    return re.sub(r"(mongodb(?:\+srv)?://)([^/@\s]+)@", r"\1***:***@", raw)


def validate_user_id(user_id: str) -> str:
    if not isinstance(user_id, str) or not _USER_ID_PATTERN.match(user_id) or user_id in {".", ".."}:
        raise ValueError(f"Invalid user id: {user_id!r}")
    return user_id


def _clean_progress(record: dict) -> dict:
    return {key: record[key] for key in PROGRESS_FIELDS if key in record}


class ProgressStore(ABC):
    @abstractmethod
    def get_all_progress(self, user_id: str) -> list[dict]:
        """Return ``[{topicId, status, startDate, revisions}, ...]`` for one user."""
        raise NotImplementedError

    @abstractmethod
    def set_progress(self, user_id: str, topic_id: str, record: dict) -> None:
        """Upsert one topic; fields not in ``record`` are left untouched."""
        raise NotImplementedError

    @abstractmethod
    def get_profile(self, user_id: str) -> dict:
        raise NotImplementedError

    @abstractmethod
    def update_profile(self, user_id: str, fields: dict) -> None:
        raise NotImplementedError

    @abstractmethod
    def save_summary(self, user_id: str, summary: dict) -> None:
        raise NotImplementedError


class FileProgressStore(ProgressStore):
    def __init__(self, base_dir: Path):
        self.base = base_dir
        self.users_base = self.base / "users"
        self.users_base.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()

    def _user_dir(self, user_id: str) -> Path:
        target = self.users_base / validate_user_id(user_id)
        target.mkdir(parents=True, exist_ok=True)
        return target

    @staticmethod
    def _read_json(path: Path, default: dict | None = None) -> dict:
        if not path.exists():
            return default or {}
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _write_json(path: Path, payload: dict) -> None:
        tmp = path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp.replace(path)

    def _update(self, path: Path, key: str | None, fields: dict) -> None:
        with self._lock:
            data = self._read_json(path, {})
            target = data.setdefault(key, {}) if key is not None else data
            target.update(fields)
            target["updated_at"] = datetime.now(timezone.utc).isoformat()
            self._write_json(path, data)

    def get_all_progress(self, user_id: str) -> list[dict]:
        with self._lock:
            data = self._read_json(self._user_dir(user_id) / "topic_progress.json", {})
        return [{"topicId": topic_id, **_clean_progress(record)} for topic_id, record in data.items()]

    def set_progress(self, user_id: str, topic_id: str, record: dict) -> None:
        self._update(self._user_dir(user_id) / "topic_progress.json", topic_id, _clean_progress(record))

    def get_profile(self, user_id: str) -> dict:
        with self._lock:
            return self._read_json(self._user_dir(user_id) / "profile.json", {})

    def update_profile(self, user_id: str, fields: dict) -> None:
        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported profile fields: {sorted(unknown)}")
        self._update(self._user_dir(user_id) / "profile.json", None, fields)

    def save_summary(self, user_id: str, summary: dict) -> None:
        self._update(self._user_dir(user_id) / "summary.json", None, summary)


class MongoProgressStore(ProgressStore):
    def __init__(self, mongodb_url: str, db_name: str):
        from pymongo import ASCENDING, MongoClient

        self._ASC = ASCENDING
        self._client = MongoClient(mongodb_url, serverSelectionTimeoutMS=3000)
        self._db = self._client[db_name]
        self._progress = self._db["topic_progress"]
        self._profiles = self._db["user_profiles"]
        self._summaries = self._db["progress_summaries"]
        self._ensure_indexes()

    def _ensure_indexes(self) -> None:
        self._progress.create_index(
            [("user_id", self._ASC), ("topic_id", self._ASC)],
            unique=True,
            name="ux_user_topic",
        )
        self._profiles.create_index([("user_id", self._ASC)], unique=True, name="ux_profile_user")
        self._summaries.create_index([("user_id", self._ASC)], unique=True, name="ux_summary_user")

    def get_all_progress(self, user_id: str) -> list[dict]:
        out = []
        for doc in self._progress.find({"user_id": validate_user_id(user_id)}, {"_id": 0}):
            topic_id = str(doc.get("topic_id", ""))
            if topic_id:
                out.append({"topicId": topic_id, **_clean_progress(doc)})
        return out

    def set_progress(self, user_id: str, topic_id: str, record: dict) -> None:
        now = datetime.now(timezone.utc)
        self._progress.update_one(
            {"user_id": validate_user_id(user_id), "topic_id": topic_id},
            {"$set": {**_clean_progress(record), "updated_at": now}},
            upsert=True,
        )

    def get_profile(self, user_id: str) -> dict:
        doc = self._profiles.find_one({"user_id": validate_user_id(user_id)}, {"_id": 0, "user_id": 0})
        return doc or {}

    def update_profile(self, user_id: str, fields: dict) -> None:
        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported profile fields: {sorted(unknown)}")
        self._profiles.update_one(
            {"user_id": validate_user_id(user_id)},
            {"$set": {**fields, "updated_at": datetime.now(timezone.utc)}},
            upsert=True,
        )

    def save_summary(self, user_id: str, summary: dict) -> None:
        self._summaries.update_one(
            {"user_id": validate_user_id(user_id)},
            {"$set": {**summary, "updated_at": datetime.now(timezone.utc)}},
            upsert=True,
        )


def build_progress_store() -> ProgressStore:
    backend = settings.progress_store_backend.strip().lower()
    if backend == "mongo":
        return MongoProgressStore(settings.mongodb_url, settings.mongodb_db_name)
    if backend != "file":
        logger.warning("Unknown PROGRESS_STORE_BACKEND=%s; falling back to file store", backend)
    return FileProgressStore(Path(settings.runtime_data_dir))


def _mongo_ping() -> tuple[bool, str | None]:
    try:
        from pymongo import MongoClient

        client = MongoClient(settings.mongodb_url, serverSelectionTimeoutMS=3000)
        client.admin.command("ping")
        return True, None
    except Exception as exc:  # noqa: BLE001
        return False, _sanitize_mongo_error(str(exc))


def get_progress_store_status(store: ProgressStore) -> dict:
    configured_backend = settings.progress_store_backend.strip().lower()
    active_mode = "mongo" if isinstance(store, MongoProgressStore) else "file"
    status = {"configured_backend": configured_backend, "active_mode": active_mode}
    if active_mode == "mongo":
        mongo_ok, mongo_error = _mongo_ping()
        status["mongo"] = {"connected": mongo_ok, "db_name": settings.mongodb_db_name, "error": mongo_error}
    else:
        status["data_dir"] = settings.runtime_data_dir
    return status

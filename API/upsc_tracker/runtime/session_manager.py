"""
Per-user tracker sessions.

Each active user owns exactly one in-memory syllabus tree. Mutations run
synchronously under the session lock and update the tree optimistically;
the affected leaves are then written to the progress store by background
tasks. A failed write is reported to the user but never rolled back: the
store stays the source of truth on the next load.
"""
from __future__ import annotations

import asyncio
from collections.abc import Callable
from datetime import date, datetime, timezone

from upsc_tracker.core.event_bus import event_bus
from upsc_tracker.core.logging import DOMAIN_PERSISTENCE, get_domain_logger
from upsc_tracker.core.notification_engine import notification_engine
from upsc_tracker.data.optional_subjects import get_optional_subject
from upsc_tracker.memory.progress_store import ProgressStore, build_progress_store
from upsc_tracker.revision.reminders import DailyReminder, daily_reminder
from upsc_tracker.revision.workflow import RevisionWorkflow, TransitionRejected, TransitionResult
from upsc_tracker.syllabus.assembly import AssemblyResult, build_tree
from upsc_tracker.syllabus.merge import MergeReport, merge_progress
from upsc_tracker.syllabus.model import Leaf, SyllabusTree
from upsc_tracker.syllabus.progress import progress_summary

logger = get_domain_logger(__name__, DOMAIN_PERSISTENCE)


class TrackerSession:
    def __init__(
        self,
        *,
        user_id: str,
        tree: SyllabusTree,
        assembly: AssemblyResult,
        merge_report: MergeReport,
        profile: dict,
    ):
        self.user_id = user_id
        self.tree = tree
        self.workflow = RevisionWorkflow(tree)
        self.optional_subject_id = assembly.optional_subject_id
        self.optional_subject_name = assembly.optional_subject_name
        self.assembly_error = assembly.error
        self.merge_report = merge_report
        self.profile = profile
        self.loaded_at = datetime.now(timezone.utc).isoformat()
        self.lock = asyncio.Lock()

    def summary(self) -> dict:
        return progress_summary(self.tree)

    def describe(self) -> dict:
        return {
            "user_id": self.user_id,
            "optional_subject": {"id": self.optional_subject_id, "name": self.optional_subject_name},
            "loaded_at": self.loaded_at,
            "error": self.assembly_error,
            "merge": self.merge_report.to_dict(),
        }


class TrackerSessionManager:
    def __init__(self, store: ProgressStore | None = None, store_factory: Callable[[], ProgressStore] = build_progress_store):
        self._store = store
        self._store_factory = store_factory
        self._sessions: dict[str, TrackerSession] = {}
        self._pending: dict[str, set[asyncio.Task]] = {}
        self._write_locks: dict[str, asyncio.Lock] = {}

    @property
    def store(self) -> ProgressStore:
        if self._store is None:
            self._store = self._store_factory()
        return self._store

    def list_sessions(self) -> list[str]:
        return list(self._sessions)

    async def _read(self, user_id: str, label: str, fn, default):
        try:
            return await asyncio.to_thread(fn, user_id)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Progress store read failed op=%s user=%s error=%s", label, user_id, exc)
            await notification_engine.notify(
                source="session_manager",
                title="Could not load saved progress",
                body="Error loading syllabus data. Using default.",
                severity="error",
                user_id=user_id,
            )
            return default

    async def open_session(self, user_id: str) -> TrackerSession:
        """Assemble the syllabus, merge the user's stored progress and recompute every parent."""
        await self.wait_for_pending_writes(user_id)
        profile = await self._read(user_id, "get_profile", self.store.get_profile, {})
        tree, assembly = build_tree(profile.get("optionalSubject"))
        if assembly.error:
            await notification_engine.notify(
                source="session_manager",
                title="Syllabus unavailable",
                body=assembly.error,
                severity="error",
                user_id=user_id,
            )
        records = await self._read(user_id, "get_all_progress", self.store.get_all_progress, [])
        report = merge_progress(tree, records)
        session = TrackerSession(user_id=user_id, tree=tree, assembly=assembly, merge_report=report, profile=profile)
        self._sessions[user_id] = session
        await event_bus.publish("syllabus_loaded", "session_manager", session.describe(), user_id=user_id)
        return session

    async def get_session(self, user_id: str) -> TrackerSession:
        session = self._sessions.get(user_id)
        if session is None:
            session = await self.open_session(user_id)
        return session

    async def apply(self, user_id: str, operation: Callable[[RevisionWorkflow], TransitionResult]) -> TransitionResult:
        """Run one workflow transition for ``user_id`` and persist the leaves it changed."""
        session = await self.get_session(user_id)
        async with session.lock:
            try:
                result = operation(session.workflow)
            except TransitionRejected as exc:
                logger.info("Transition rejected user=%s topic=%s code=%s", user_id, exc.topic_id, exc.code)
                await notification_engine.notify(
                    source="revision_workflow",
                    title="Action not applied",
                    body=exc.notice,
                    severity="warning",
                    user_id=user_id,
                    metadata={"code": exc.code, "topic_id": exc.topic_id},
                )
                raise
            self._persist_result(session, result)
        event_type = "revision_confirmed" if result.action == "confirm_revision" else "topic_updated"
        await event_bus.publish(
            event_type,
            "session_manager",
            {
                "topic_id": result.topic_id,
                "status": result.status.value,
                "changed_leaf_ids": result.changed_leaf_ids,
                "changed_parent_ids": result.changed_parent_ids,
            },
            user_id=user_id,
        )
        return result

    def _persist_result(self, session: TrackerSession, result: TransitionResult) -> None:
        if not result.changed_leaf_ids:
            return
        for leaf_id in result.changed_leaf_ids:
            leaf = session.tree.require(leaf_id)
            if isinstance(leaf, Leaf):
                self._schedule_write(
                    session.user_id, leaf_id, self.store.set_progress, session.user_id, leaf_id, leaf.progress_record()
                )
        self._schedule_write(session.user_id, "summary", self.store.save_summary, session.user_id, session.summary())

    def _schedule_write(self, user_id: str, label: str, fn, *args) -> None:
        task = asyncio.create_task(self._run_write(user_id, label, fn, *args))
        pending = self._pending.setdefault(user_id, set())
        pending.add(task)
        task.add_done_callback(pending.discard)

    async def _run_write(self, user_id: str, label: str, fn, *args) -> None:
        # Writes for one user land in scheduling order.
        lock = self._write_locks.setdefault(user_id, asyncio.Lock())
        try:
            async with lock:
                await asyncio.to_thread(fn, *args)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Progress write failed user=%s target=%s error=%s", user_id, label, exc)
            await notification_engine.notify(
                source="session_manager",
                title="Save failed",
                body=f"Save failed for {label}. Your change is kept for this session.",
                severity="error",
                user_id=user_id,
                metadata={"target": label},
            )
            await event_bus.publish(
                "progress_write_failed", "session_manager", {"target": label, "error": str(exc)}, user_id=user_id
            )

    async def wait_for_pending_writes(self, user_id: str | None = None) -> None:
        if user_id is None:
            tasks = [t for pending in self._pending.values() for t in pending]
        else:
            tasks = list(self._pending.get(user_id, ()))
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def select_optional_subject(self, user_id: str, subject_id: str | None) -> TrackerSession:
        """Store the user's optional subject and rebuild their tree around it."""
        if subject_id is not None and get_optional_subject(subject_id) is None:
            raise ValueError(f"Unknown optional subject: {subject_id}")
        await asyncio.to_thread(self.store.update_profile, user_id, {"optionalSubject": subject_id})
        session = await self.open_session(user_id)
        label = session.optional_subject_name or "None"
        await notification_engine.notify(
            source="session_manager",
            title="Optional subject updated",
            body=f"Optional subject updated to {label}.",
            user_id=user_id,
        )
        await event_bus.publish(
            "optional_subject_changed", "session_manager", {"subject_id": subject_id}, user_id=user_id
        )
        return session

    async def daily_reminder(self, user_id: str, today: date | None = None) -> DailyReminder:
        session = await self.get_session(user_id)
        reminder = daily_reminder(session.tree, session.profile.get("lastReminderDate"), today)
        stamp = reminder.date.isoformat()
        if session.profile.get("lastReminderDate") != stamp:
            session.profile["lastReminderDate"] = stamp
            self._schedule_write(user_id, "profile", self.store.update_profile, user_id, {"lastReminderDate": stamp})
        return reminder


session_manager = TrackerSessionManager()

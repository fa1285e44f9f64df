from __future__ import annotations

from collections import deque
from datetime import datetime, timezone

from upsc_tracker.core.event_bus import event_bus
from upsc_tracker.core.settings import settings


class NotificationEngine:
    """User-facing notices (save failures, rejected actions, reminders)."""

    def __init__(self, buffer_size: int = 500):
        self._buffer: deque[dict] = deque(maxlen=buffer_size)

    async def notify(
        self,
        *,
        source: str,
        title: str,
        body: str,
        severity: str = "info",
        user_id: str | None = None,
        metadata: dict | None = None,
    ) -> dict:
        notification = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": source,
            "title": title,
            "body": body,
            "severity": severity,
            "user_id": user_id,
            "metadata": metadata or {},
        }
        self._buffer.appendleft(notification)
        await event_bus.publish("notification", "notification_engine", notification, user_id=user_id)
        return notification

    def list_notifications(self, limit: int = 50, user_id: str | None = None) -> list[dict]:
        items = [n for n in self._buffer if user_id is None or n["user_id"] in (None, user_id)]
        return items[: max(1, min(limit, self._buffer.maxlen or 500))]


notification_engine = NotificationEngine(buffer_size=settings.notification_buffer_size)

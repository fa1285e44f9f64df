import asyncio
from collections import deque
from datetime import datetime, timezone

from upsc_tracker.core.settings import settings


class EventBus:
    """In-process pub/sub for state-change notifications (tree updates, notices)."""

    def __init__(self, history_size: int = 200):
        self._subscribers: list[tuple[asyncio.Queue, str | None]] = []
        self._history: deque[dict] = deque(maxlen=history_size)
        self._lock = asyncio.Lock()

    async def publish(self, event_type: str, source: str, data: dict, *, user_id: str | None = None) -> None:
        event = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "type": event_type,
            "source": source,
            "user_id": user_id,
            "data": data,
        }
        async with self._lock:
            self._history.append(event)
            subscribers = list(self._subscribers)
        for queue, user_filter in subscribers:
            if user_filter is not None and user_id not in (None, user_filter):
                continue
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                continue

    async def subscribe(self, replay_last: int = 10, user_id: str | None = None) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue(maxsize=1000)
        async with self._lock:
            self._subscribers.append((queue, user_id))
            history = [e for e in self._history if user_id is None or e["user_id"] in (None, user_id)]
        for event in history[-replay_last:] if replay_last > 0 else []:
            queue.put_nowait(event)
        return queue

    async def unsubscribe(self, queue: asyncio.Queue) -> None:
        async with self._lock:
            self._subscribers = [(q, f) for q, f in self._subscribers if q is not queue]

    def history(self, user_id: str | None = None) -> list[dict]:
        return [e for e in self._history if user_id is None or e["user_id"] in (None, user_id)]


event_bus = EventBus(history_size=settings.event_history_size)

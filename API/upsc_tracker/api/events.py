from __future__ import annotations

import asyncio
import json

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from upsc_tracker.core.auth import current_user_id
from upsc_tracker.core.event_bus import event_bus

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/stream")
async def stream_events(user_id: str = Depends(current_user_id)):
    queue = await event_bus.subscribe(replay_last=20, user_id=user_id)

    async def generator():
        try:
            while True:
                event = await queue.get()
                yield f"data: {json.dumps(event)}\n\n"
        except asyncio.CancelledError:
            return
        finally:
            await event_bus.unsubscribe(queue)

    return StreamingResponse(generator(), media_type="text/event-stream")


@router.get("/history")
async def event_history(user_id: str = Depends(current_user_id)):
    return {"items": event_bus.history(user_id=user_id)}

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from upsc_tracker.api.events import router as events_router
from upsc_tracker.api.health import router as health_router
from upsc_tracker.api.notifications import router as notifications_router
from upsc_tracker.api.optional_subjects import router as optional_subjects_router
from upsc_tracker.api.progress_store import router as progress_store_router
from upsc_tracker.api.revisions import router as revisions_router
from upsc_tracker.api.syllabus import router as syllabus_router
from upsc_tracker.core.auth import api_key_auth_middleware
from upsc_tracker.core.errors import (
    http_exception_handler,
    request_id_middleware,
    topic_not_found_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from upsc_tracker.core.logging import configure_logging
from upsc_tracker.core.settings import settings
from upsc_tracker.runtime.session_manager import session_manager
from upsc_tracker.syllabus.model import TopicNotFoundError


configure_logging(settings.log_level)

app = FastAPI(title="UPSC Syllabus Tracker API", version="0.1.0")
app.include_router(health_router)
app.include_router(syllabus_router)
app.include_router(revisions_router)
app.include_router(optional_subjects_router)
app.include_router(notifications_router)
app.include_router(events_router)
app.include_router(progress_store_router)
app.middleware("http")(api_key_auth_middleware)
app.middleware("http")(request_id_middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(TopicNotFoundError, topic_not_found_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)


@app.on_event("shutdown")
async def on_shutdown():
    await session_manager.wait_for_pending_writes()


def run() -> None:
    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_level=settings.log_level.lower())

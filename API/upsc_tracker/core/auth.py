from fastapi import Header, HTTPException
from fastapi.responses import JSONResponse
from starlette.requests import Request

from upsc_tracker.core.settings import settings
from upsc_tracker.memory.progress_store import validate_user_id


EXEMPT_PATH_PREFIXES = (
    "/health",
    "/docs",
    "/openapi.json",
    "/redoc",
)


async def api_key_auth_middleware(request: Request, call_next):
    if settings.gateway_auth_enabled:
        path = request.url.path
        if not any(path.startswith(prefix) for prefix in EXEMPT_PATH_PREFIXES):
            provided = request.headers.get("x-api-key", "")
            if not settings.gateway_api_key or provided != settings.gateway_api_key:
                return JSONResponse(
                    status_code=401,
                    content={
                        "success": False,
                        "error": {"code": "unauthorized", "message": "Unauthorized: invalid or missing x-api-key"},
                    },
                )
    return await call_next(request)


async def current_user_id(x_user_id: str = Header(..., description="Authenticated user id from the identity provider")) -> str:
    """Resolve the signed-in user. Sign-in itself happens upstream; this only trusts the forwarded id."""
    try:
        return validate_user_id(x_user_id.strip())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

router = APIRouter()

@router.get("/health")
async def health() -> dict[str, str]:
    """
    Liveness probe.
    Returns 200 OK if the process is alive.
    """
    # Stateless service: being able to answer is enough.
    return {"status": "ok"}

@router.get("/ready")
async def ready(request: Request):
    """
    Readiness probe.
    Returns 200 OK once startup has finished, 503 otherwise.
    """
    ready_flag = getattr(request.app.state, "ready_flag", None)
    if ready_flag and ready_flag():
        return {"status": "ready"}
    return JSONResponse({"status": "not ready"}, status_code=HTTP_503_SERVICE_UNAVAILABLE)

@router.get("/api/health")
async def api_health() -> dict[str, str]:
    """Static readiness payload for the browser client."""
    return {"status": "ok", "message": "Statistics API is running"}

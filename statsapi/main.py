import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from statsapi import config
from statsapi.api import health, statistics, upload
from statsapi.errors import (
    EmptyDataError,
    InvalidInputError,
    StatisticsError,
    TabularParseError,
    UndefinedStatisticError,
    UploadTooLargeError,
)
from statsapi.observability.logging import setup_logging
from statsapi.observability.metrics import MetricsMiddleware, metrics_router

logger = logging.getLogger(__name__)

# READY_FLAG is True between startup and shutdown; /ready reports it
READY_FLAG = False

# HTTP status for each service error; anything unlisted is a 400
ERROR_STATUS = {
    EmptyDataError: 400,
    InvalidInputError: 400,
    UndefinedStatisticError: 422,
    UploadTooLargeError: 413,
    TabularParseError: 500,
}

@asynccontextmanager
async def app_lifespan(app: FastAPI):
    global READY_FLAG
    Path(config.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    READY_FLAG = True
    yield
    READY_FLAG = False

def _status_for(exc: StatisticsError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 400

# Factory function to create the FastAPI app
def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title="Statistics API",
        version="1.0.0",
        lifespan=app_lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(MetricsMiddleware)
    app.include_router(metrics_router)     # /metrics
    app.include_router(health.router)      # /health, /ready, /api/health
    app.include_router(statistics.router)  # /api/calculate, /api/histogram
    app.include_router(upload.router)      # /api/upload-csv
    app.state.ready_flag = lambda: READY_FLAG

    # Malformed request shape (not an array, missing field, bad bins): always 400
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Ensure all error details are serializable
        def serialize_error(err):
            if isinstance(err, Exception):
                return str(err)
            if isinstance(err, dict):
                return {k: serialize_error(v) for k, v in err.items()}
            if isinstance(err, (list, tuple)):
                return [serialize_error(e) for e in err]
            return err
        logger.warning("Rejected %s %s: invalid request", request.method, request.url.path)
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request format", "detail": serialize_error(exc.errors())},
        )

    @app.exception_handler(StatisticsError)
    async def statistics_exception_handler(request: Request, exc: StatisticsError):
        status_code = _status_for(exc)
        if status_code >= 500:
            logger.error("Failed %s %s: %s", request.method, request.url.path, exc)
        else:
            logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.exception_handler(Exception)
    async def internal_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "message": str(exc)},
        )

    return app

# Create the FastAPI app instance
app = create_app()

def main() -> None:
    uvicorn.run("statsapi.main:app", host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    main()

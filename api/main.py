"""
ChequeFlow API

REST API for cheque reminder dates and calendar export.

Endpoints:
    GET  /health                 - Liveness check
    GET  /api                    - Service info and loaded holiday pack
    GET  /holidays               - Holidays in a month
    GET  /holidays/upcoming      - Next holidays
    GET  /holidays/check/{date}  - Classify one date
    POST /reminders/resolve      - Reminder record for a due date
    POST /reminders/resolve/batch
    POST /export/ics             - One cheque as .ics
    POST /export/ics/batch       - Pending cheques as one .ics
"""

import json
import logging
import os
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chequeflow import __version__
from chequeflow.canon import compute_holiday_pack_hash
from chequeflow.engine import ReminderResolver
from chequeflow.exceptions import (
    ChequeFlowError,
    ChequeValidationError,
    HolidayPackValidationError,
)
from chequeflow.packs import HolidayPack, load_default_pack, load_holiday_pack

from api.routes import export, holidays, reminders
from api.schemas.responses import ServiceInfo

# =============================================================================
# Configuration
# =============================================================================

CF_LOG_LEVEL = os.getenv("CF_LOG_LEVEL", "INFO")
CF_HOLIDAY_PACK = os.getenv("CF_HOLIDAY_PACK", "")
CF_DOCS_ENABLED = os.getenv("CF_DOCS_ENABLED", "true").lower() == "true"
CF_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CF_CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]
CF_MAX_ROLL_DAYS = int(os.getenv("CF_MAX_ROLL_DAYS", "366"))

SERVICE_NAME = "ChequeFlow API"

# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Add extra fields if present
        if hasattr(record, "request_id"):
            log_entry["request_id"] = record.request_id
        if hasattr(record, "path"):
            log_entry["path"] = record.path
        if hasattr(record, "status_code"):
            log_entry["status_code"] = record.status_code
        if hasattr(record, "duration_ms"):
            log_entry["duration_ms"] = record.duration_ms
        if hasattr(record, "error_code"):
            log_entry["error_code"] = record.error_code
        return json.dumps(log_entry)


handler = logging.StreamHandler()
handler.setFormatter(JSONFormatter())
for logger_name in ("chequeflow", "api"):
    _logger = logging.getLogger(logger_name)
    _logger.setLevel(getattr(logging, CF_LOG_LEVEL.upper()))
    _logger.addHandler(handler)

logger = logging.getLogger("chequeflow.api")

# =============================================================================
# Holiday Pack State
# =============================================================================

HOLIDAY_PACK: HolidayPack = None
HOLIDAY_PACK_HASH = ""


def load_configured_pack() -> HolidayPack:
    """Load the pack named by CF_HOLIDAY_PACK, or the packaged Sri Lankan pack."""
    if CF_HOLIDAY_PACK:
        return load_holiday_pack(CF_HOLIDAY_PACK)
    return load_default_pack()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the holiday pack on startup and share it with the routes."""
    global HOLIDAY_PACK, HOLIDAY_PACK_HASH

    try:
        HOLIDAY_PACK = load_configured_pack()
    except ChequeFlowError as e:
        logger.error(str(e), extra={"error_code": e.code})
        raise

    HOLIDAY_PACK_HASH = compute_holiday_pack_hash(HOLIDAY_PACK)
    logger.info(
        "Loaded holiday pack %s (years %s, hash %s)",
        HOLIDAY_PACK.id,
        ", ".join(str(y) for y in HOLIDAY_PACK.table.years) or "none",
        HOLIDAY_PACK_HASH[:16],
    )

    calendar = HOLIDAY_PACK.calendar(max_roll_days=CF_MAX_ROLL_DAYS)
    holidays.set_calendar(calendar)
    reminders.set_resolver(ReminderResolver(calendar=calendar))

    yield

    logger.info("Shutting down")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title=SERVICE_NAME,
    description="Post-dated cheque reminders rolled forward over bank holidays.",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if CF_DOCS_ENABLED else None,
    redoc_url="/redoc" if CF_DOCS_ENABLED else None,
    openapi_url="/openapi.json" if CF_DOCS_ENABLED else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CF_CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(holidays.router)
app.include_router(reminders.router)
app.include_router(export.router)

# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests and log their duration."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    start_time = time.time()

    response = await call_next(request)

    response.headers["X-Request-ID"] = request_id
    logger.debug(
        "%s %s",
        request.method,
        request.url.path,
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": int((time.time() - start_time) * 1000),
        },
    )
    return response


@app.exception_handler(ChequeFlowError)
async def chequeflow_error_handler(request: Request, exc: ChequeFlowError):
    """Map domain errors to JSON error responses."""
    if isinstance(exc, (ChequeValidationError, HolidayPackValidationError)):
        status_code = 422
    else:
        status_code = 500
    request_id = getattr(request.state, "request_id", "unknown")
    logger.warning(
        str(exc),
        extra={"request_id": request_id, "error_code": exc.code},
    )
    return JSONResponse(
        status_code=status_code,
        content={**exc.to_dict(), "request_id": request_id},
    )

# =============================================================================
# Health Endpoints
# =============================================================================

def _service_info(status: str) -> ServiceInfo:
    return ServiceInfo(
        service=SERVICE_NAME,
        version=__version__,
        status=status,
        holiday_pack_id=HOLIDAY_PACK.id if HOLIDAY_PACK else "",
        holiday_pack_hash=HOLIDAY_PACK_HASH,
        holiday_years=list(HOLIDAY_PACK.table.years) if HOLIDAY_PACK else [],
    )


@app.get("/health", response_model=ServiceInfo, tags=["Health"])
async def health():
    """Liveness check."""
    return _service_info("healthy" if HOLIDAY_PACK else "starting")


@app.get("/api", response_model=ServiceInfo, tags=["Health"])
async def api_info():
    """API info endpoint - loaded holiday pack and version."""
    return _service_info("running")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

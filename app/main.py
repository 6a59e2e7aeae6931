# app/main.py

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
import sys

# Import your core modules
from app.core.config import settings
from app.core.constants import MSG_FIELDS_REQUIRED, MSG_INTERNAL_ERROR
from app.core.database import get_firestore_client

# Routers
from app.api.endpoints import auth_parent as auth_parent_router

# ------------------------------------------------------------
# LOGURU CONFIGURATION
# ------------------------------------------------------------
logger.remove()
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=settings.ENV == "dev",
)

# ------------------------------------------------------------
# FASTAPI APP INIT
# ------------------------------------------------------------
app = FastAPI(
    title="Parent Login Backend",
    version="1.0.0",
    description="Parent portal login: matches a student ID with a registered contact number.",
)

# ------------------------------------------------------------
# ERROR ENVELOPE: {"success": false, "message": ...}
# ------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    fields = sorted({
        str(err["loc"][-1])
        for err in exc.errors()
        if len(err.get("loc", ())) > 1
    })
    logger.debug(f"Rejected login payload, invalid fields: {fields or ['body']}")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": MSG_FIELDS_REQUIRED},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.opt(exception=exc).error("Internal Server Error")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": MSG_INTERNAL_ERROR},
    )

# ------------------------------------------------------------
# REGISTER ROUTERS
# ------------------------------------------------------------
app.include_router(auth_parent_router.router)

# ------------------------------------------------------------
# APPLICATION STARTUP EVENTS
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("🚀 Starting Parent Login Backend...")

    # Warm the Firestore client so the first login doesn't pay for it
    try:
        get_firestore_client()
    except Exception:
        logger.exception("Firestore initialization failed; will retry on first request.")

    logger.success("Backend startup completed successfully.\n")


# ------------------------------------------------------------
# ROOT HEALTH CHECK
# ------------------------------------------------------------
@app.get("/", tags=["System"])
async def root():
    return {
        "status": "ok",
        "service": "Parent Login Backend",
        "version": app.version,
        "message": "Backend running successfully 🚀",
    }

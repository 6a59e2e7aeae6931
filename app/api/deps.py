# app/api/deps.py

from fastapi import HTTPException
from google.cloud.firestore import AsyncClient
from loguru import logger

from app.core.constants import MSG_INTERNAL_ERROR
from app.core.database import get_firestore_client


# ------------------------------------------------------------
# Firestore client
# ------------------------------------------------------------
async def get_db() -> AsyncClient:
    try:
        return get_firestore_client()
    except Exception:
        logger.exception("Internal Server Error: Firestore client unavailable.")
        raise HTTPException(status_code=500, detail=MSG_INTERNAL_ERROR)

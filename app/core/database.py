# app/core/database.py

import threading

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore import AsyncClient
from loguru import logger

from app.core.config import settings


# ----------------------------------------------------
# Process-wide client (created at most once)
# ----------------------------------------------------
_client: AsyncClient | None = None
_client_lock = threading.Lock()


# ----------------------------------------------------
# Firebase app
# ----------------------------------------------------
def _get_or_init_app() -> firebase_admin.App:
    try:
        # Reuse the default app if something already initialized it
        return firebase_admin.get_app()
    except ValueError:
        cred = credentials.Certificate(settings.FIREBASE_SERVICE_ACCOUNT)
        logger.info("🔄 Initializing Firebase Admin SDK")
        return firebase_admin.initialize_app(cred)


# ----------------------------------------------------
# Firestore client
# ----------------------------------------------------
def get_firestore_client() -> AsyncClient:
    """
    Returns the shared Firestore client, creating it on first use.

    Safe to call from concurrent requests: the lock plus the second
    check guarantee a single Firebase app and a single client.
    """
    global _client

    if _client is None:
        with _client_lock:
            if _client is None:
                _client = firestore_async.client(app=_get_or_init_app())
                logger.success("✅ Firestore client ready.")

    return _client

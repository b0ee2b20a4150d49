"""Firestore client configuration and lifecycle management."""

import time
from typing import Optional

from google.cloud import firestore

from ..config.logging import get_logger
from ..config.settings import get_settings

logger = get_logger(__name__)

# Collection names are part of the external data contract
POLICY_COLLECTION = "policy"
PARTIES_COLLECTION = "parties"

_client: Optional[firestore.AsyncClient] = None


def create_client_from_settings() -> firestore.AsyncClient:
    """Create an async Firestore client using application settings."""
    settings = get_settings()

    logger.info(
        "Creating Firestore client",
        project=settings.firestore_project_id or "<application default>",
        database=settings.firestore_database,
    )

    # Credentials and FIRESTORE_EMULATOR_HOST are resolved by the SDK itself
    return firestore.AsyncClient(
        project=settings.firestore_project_id,
        database=settings.firestore_database,
    )


def get_client() -> firestore.AsyncClient:
    """Get the Firestore client, creating it if necessary."""
    global _client

    if _client is None:
        _client = create_client_from_settings()
        logger.info("Firestore client initialized")

    return _client


def reset_client() -> None:
    """Drop the shared client so the next call builds a fresh one."""
    global _client

    if _client is not None:
        logger.info("Firestore client released")
    _client = None


async def check_database_health() -> dict:
    """
    Probe Firestore with a single-document read.

    Returns:
        dict: Firestore health status and response time
    """
    started = time.perf_counter()
    try:
        client = get_client()
        await client.collection(PARTIES_COLLECTION).limit(1).get()
        return {
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
        }
    except Exception as e:
        logger.error("Firestore health check failed", error=str(e), exc_info=True)
        return {"status": "unhealthy", "error": str(e)}

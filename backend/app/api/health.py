import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from app.core.config import settings
from app.core.database import check_database_health, get_connection_status
from app.core.responses import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def check_database() -> Dict[str, Any]:
    """Ping the database and report the cached connection state."""
    connected = check_database_health()
    return {
        "connected": connected,
        "status": get_connection_status(),
        "timestamp": _timestamp(),
    }


@router.get("/health")
async def health_check():
    """Report database connectivity and API status."""
    try:
        database = check_database()
    except Exception:
        logger.error("Health check failed", exc_info=True)
        return error_response(
            500,
            "Health check failed",
            data={
                "database": {"connected": False, "status": "error", "timestamp": _timestamp()},
                "api": {"status": "error", "version": settings.api_version},
            },
        )

    return success_response({
        "database": database,
        "api": {"status": "operational", "version": settings.api_version},
    })

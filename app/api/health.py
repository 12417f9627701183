"""
Health endpoints for the service shell
"""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import config
from app.core.logger import logger
from app.db.mongodb import get_database

router = APIRouter()

start_time = time.time()


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": config.service_name,
        "timestamp": _timestamp(),
        "version": config.api_version,
    }


@router.get("/health/live")
def liveness_check():
    """Liveness probe - check if the app is running"""
    return {
        "status": "alive",
        "service": config.service_name,
        "timestamp": _timestamp(),
        "uptime": time.time() - start_time,
    }


@router.get("/health/ready")
async def readiness_check():
    """Readiness probe - the service is ready once MongoDB answers"""
    check = await check_database_health()

    if check["status"] == "healthy":
        return {
            "status": "ready",
            "service": config.service_name,
            "timestamp": _timestamp(),
            "checks": [check],
        }

    logger.warning(
        "Readiness check failed",
        metadata={"failed_checks": [check["name"]], "event": "readiness_check_failed"}
    )
    return JSONResponse(
        status_code=503,
        content={
            "status": "not ready",
            "service": config.service_name,
            "timestamp": _timestamp(),
            "checks": [check],
            "errors": [f"{check['name']}: {check.get('error', 'Unknown error')}"],
        },
    )


async def check_database_health() -> Dict[str, Any]:
    """Check MongoDB database connectivity"""
    check_start = time.time()

    try:
        database = await get_database()
        await database.command('ping')
        response_time_ms = (time.time() - check_start) * 1000

        return {
            "name": "database",
            "status": "healthy",
            "response_time_ms": round(response_time_ms, 2),
            "database": config.mongodb_database,
            "timestamp": _timestamp(),
        }

    except Exception as e:
        response_time_ms = (time.time() - check_start) * 1000
        logger.error(
            f"Database health check failed: {e}",
            metadata={
                "response_time_ms": response_time_ms,
                "database_host": config.mongodb_host,
                "event": "health_check_database_failed"
            }
        )
        return {
            "name": "database",
            "status": "unhealthy",
            "error": str(e),
            "response_time_ms": round(response_time_ms, 2),
            "timestamp": _timestamp(),
        }

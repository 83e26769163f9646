"""
Health and readiness endpoints
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from catalog.core.config import config
from catalog.core.logger import logger
from catalog.db.mongodb import ping_mongo

router = APIRouter()


@router.get("/health")
def health_check():
    """Liveness check with a constant payload"""
    return {"status": "ok"}


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe - check the store, cache and broker"""
    checks = []

    try:
        mongo_ok = await ping_mongo()
        checks.append({"name": "mongodb", "status": "healthy" if mongo_ok else "unhealthy"})
    except Exception as e:
        checks.append({"name": "mongodb", "status": "unhealthy", "error": str(e)})

    cache = getattr(request.app.state, "cache", None)
    cache_ok = cache is not None and await cache.is_healthy()
    checks.append({"name": "redis", "status": "healthy" if cache_ok else "unhealthy"})

    broker = getattr(request.app.state, "broker", None)
    broker_ok = broker is not None and broker.is_healthy()
    checks.append({"name": "rabbitmq", "status": "healthy" if broker_ok else "unhealthy"})

    failed = [check["name"] for check in checks if check["status"] != "healthy"]
    body = {
        "status": "ready" if not failed else "not ready",
        "service": config.service_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": checks,
    }

    if failed:
        logger.warning(
            f"Readiness check failed - {len(failed)} checks failed",
            metadata={"event": "readiness_check_failed", "failed_checks": failed},
        )
        return JSONResponse(status_code=503, content=body)

    return body

"""Liveness and dependency health endpoints."""

from fastapi import APIRouter

from src.api.core.dependencies import AsyncSessionDep, Web3Dep
from src.modules.health.service import HealthService, OverallHealthStatus
from src.utils.settings.app import AppSettings

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check(db: AsyncSessionDep, w3: Web3Dep) -> OverallHealthStatus:
    """Database and chain RPC status; an RPC outage reports ``degraded``."""
    return await HealthService(db, w3).run_all_checks()


@router.get("/liveness")
async def liveness_check():
    return {"status": "alive", "service": AppSettings().SERVICE_NAME}

import asyncio
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Literal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from web3 import AsyncWeb3

from src.utils.logger import get_logger

logger = get_logger(__name__)

Status = Literal["healthy", "degraded", "unhealthy"]

# Worst status wins when folding check results
_SEVERITY: dict[str, int] = {"healthy": 0, "degraded": 1, "unhealthy": 2}


@dataclass
class HealthCheckResult:
    service: str
    status: Status
    connected: bool
    details: dict = field(default_factory=dict)
    error: str | None = None


@dataclass
class OverallHealthStatus:
    status: Status
    services: dict[str, HealthCheckResult]
    timestamp: str


class HealthService:
    """Checks the database and the chain RPC endpoint.

    The database is required for every endpoint, so losing it makes the
    service unhealthy. Losing the RPC only affects payment verification and
    on-chain reads, so it is reported as degraded.
    """

    def __init__(self, db: AsyncSession, w3: AsyncWeb3, timeout: float = 5):
        self.db = db
        self.w3 = w3
        self.timeout = timeout

    async def _run_check(
        self,
        service: str,
        check: Awaitable[dict[str, Any]],
        failure_status: Status,
    ) -> HealthCheckResult:
        try:
            details = await asyncio.wait_for(check, timeout=self.timeout)
        except Exception as e:
            logger.warning(f"{service} health check failed: {e}", service=service)
            return HealthCheckResult(
                service=service,
                status=failure_status,
                connected=False,
                error=str(e),
            )
        return HealthCheckResult(
            service=service, status="healthy", connected=True, details=details
        )

    async def _database_details(self) -> dict[str, Any]:
        result = await self.db.execute(text("SELECT 1"))
        return {"test_query_result": result.scalar()}

    async def _chain_details(self) -> dict[str, Any]:
        return {"block_number": await self.w3.eth.get_block_number()}

    async def check_database_health(self) -> HealthCheckResult:
        return await self._run_check("database", self._database_details(), "unhealthy")

    async def check_chain_health(self) -> HealthCheckResult:
        return await self._run_check("chain_rpc", self._chain_details(), "degraded")

    async def run_all_checks(self) -> OverallHealthStatus:
        results = await asyncio.gather(
            self.check_database_health(), self.check_chain_health()
        )
        overall = max((r.status for r in results), key=_SEVERITY.__getitem__)
        return OverallHealthStatus(
            status=overall,
            services={r.service: r for r in results},
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

"""Health check module for service dependencies."""

import asyncio
import time
from dataclasses import dataclass
from typing import Literal

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine


@dataclass
class ServiceHealth:
    """Health status for a service dependency."""

    status: Literal["connected", "unreachable", "error"]
    latency_ms: float | None = None
    error: str | None = None


async def check_database(engine: AsyncEngine, timeout: float = 2.0) -> ServiceHealth:
    """Check database connectivity with a SELECT 1 query.

    Args:
        engine: Application database engine
        timeout: Seconds to wait before reporting the database unreachable

    Returns:
        ServiceHealth with connection status and latency
    """
    start = time.perf_counter()
    try:
        async with asyncio.timeout(timeout):
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            latency = (time.perf_counter() - start) * 1000
            return ServiceHealth(status="connected", latency_ms=round(latency, 2))
    except asyncio.TimeoutError:
        return ServiceHealth(status="unreachable", error="timeout")
    except Exception as e:
        return ServiceHealth(status="error", error=str(e))

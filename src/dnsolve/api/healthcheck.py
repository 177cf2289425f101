"""Health check API endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from dnsolve.api.models import QueryStatisticsResponse
from dnsolve.core.config import Settings, get_settings
from dnsolve.core.statistics import QueryStatistics, get_statistics

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Process state plus query counters since start-up."""

    status: str
    hosts_file: str
    sentry_enabled: bool
    statistics: QueryStatisticsResponse


@router.get("/healthcheck", response_model=HealthResponse)
async def health_check(
    statistics: QueryStatistics = Depends(get_statistics),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Always "ok" while the process serves requests; no DNS traffic is generated."""
    return HealthResponse(
        status="ok",
        hosts_file=settings.hosts_file,
        sentry_enabled=settings.use_sentry,
        statistics=QueryStatisticsResponse(**statistics.snapshot()),
    )

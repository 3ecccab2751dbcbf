"""Pydantic schemas for the job statistics endpoint."""

from pydantic import BaseModel

from jobtracker.schemas.job import CamelModel


class DefaultStats(BaseModel):
    """Job counts per status; every key is always present."""

    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplication(BaseModel):
    """Number of jobs created in one calendar month."""

    date: str  # e.g. "Jan 2024"
    count: int


class StatsResponse(CamelModel):
    """Schema for ``GET /jobs/stats``."""

    default_stats: DefaultStats
    monthly_applications: list[MonthlyApplication]

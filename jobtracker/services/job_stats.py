"""Per-user job statistics.

Counts jobs by status and by creation month, reshaped into the fixed
structures the dashboard expects.
"""

import logging
from datetime import date

from sqlalchemy import String, extract, func, select, type_coerce
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models import Job, JobStatus
from jobtracker.schemas.stats import DefaultStats, MonthlyApplication, StatsResponse

logger = logging.getLogger(__name__)

RECENT_MONTHS = 6


def format_month(year: int, month: int) -> str:
    """Render a month as e.g. ``"Jan 2024"``."""
    return date(year, month, 1).strftime("%b %Y")


async def count_by_status(db: AsyncSession, owner_id: str) -> DefaultStats:
    """Count the owner's jobs per status.

    Statuses outside pending/interview/declined are dropped; missing ones
    are reported as 0.
    """
    # Raw strings, so values outside the enum are counted and then dropped
    status_value = type_coerce(Job.status, String)
    result = await db.execute(
        select(status_value, func.count())
        .where(Job.created_by == owner_id)
        .group_by(status_value)
    )
    counts = dict(result.all())

    return DefaultStats(
        pending=counts.get(JobStatus.PENDING.value, 0),
        interview=counts.get(JobStatus.INTERVIEW.value, 0),
        declined=counts.get(JobStatus.DECLINED.value, 0),
    )


async def monthly_applications(
    db: AsyncSession,
    owner_id: str,
    months: int = RECENT_MONTHS,
) -> list[MonthlyApplication]:
    """Count jobs per creation month for the most recent months with data.

    Args:
        db: Database session
        owner_id: Identifier of the requesting user
        months: Maximum number of months to return

    Returns:
        Up to ``months`` entries ordered oldest to newest. Months without
        jobs are not included.
    """
    year = extract("year", Job.created_at).label("year")
    month = extract("month", Job.created_at).label("month")

    result = await db.execute(
        select(year, month, func.count().label("total"))
        .where(Job.created_by == owner_id)
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
        .limit(months)
    )

    # Newest first from the database; the chart wants oldest first
    return [
        MonthlyApplication(date=format_month(int(row.year), int(row.month)), count=row.total)
        for row in reversed(result.all())
    ]


async def get_stats(db: AsyncSession, owner_id: str) -> StatsResponse:
    """Build the full statistics payload for one user."""
    default_stats = await count_by_status(db, owner_id)
    monthly = await monthly_applications(db, owner_id)
    logger.debug(f"Computed stats for {owner_id}: {default_stats}, {len(monthly)} months")
    return StatsResponse(default_stats=default_stats, monthly_applications=monthly)

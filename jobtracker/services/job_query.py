"""Query builder for the job list.

Turns validated list parameters into an owner-scoped SELECT with filters,
ordering and pagination, and returns one page of jobs together with the
total match count and the number of pages.
"""

import logging
import math
from dataclasses import dataclass

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models import Job
from jobtracker.schemas.job import JobQuery, JobSort

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


@dataclass
class JobPage:
    """One page of an owner's jobs."""

    jobs: list[Job]
    total_jobs: int
    num_of_pages: int


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so ``text`` matches literally."""
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )


def build_job_filters(owner_id: str, query: JobQuery) -> list[ColumnElement[bool]]:
    """Build WHERE conditions for a list query.

    The owner condition always comes first and cannot be removed by any
    query parameter.

    Args:
        owner_id: Identifier of the requesting user
        query: Validated list parameters

    Returns:
        List of SQLAlchemy boolean clauses to AND together
    """
    conditions: list[ColumnElement[bool]] = [Job.created_by == owner_id]

    if query.search:
        pattern = f"%{escape_like(query.search)}%"
        conditions.append(Job.position.ilike(pattern, escape=LIKE_ESCAPE))

    if query.status:
        conditions.append(Job.status == query.status)

    if query.job_type:
        conditions.append(Job.job_type == query.job_type)

    return conditions


def apply_sort(stmt: Select, sort: JobSort) -> Select:
    """Order a job SELECT. The id tie-breaker keeps every ordering total."""
    if sort is JobSort.OLDEST:
        return stmt.order_by(Job.created_at.asc(), Job.id.asc())
    if sort is JobSort.A_Z:
        return stmt.order_by(Job.position.asc(), Job.id.asc())
    if sort is JobSort.Z_A:
        return stmt.order_by(Job.position.desc(), Job.id.desc())
    return stmt.order_by(Job.created_at.desc(), Job.id.desc())


def count_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


async def list_jobs(db: AsyncSession, owner_id: str, query: JobQuery) -> JobPage:
    """Fetch one page of the owner's jobs matching ``query``.

    Args:
        db: Database session
        owner_id: Identifier of the requesting user
        query: Validated list parameters

    Returns:
        JobPage with the page of jobs, total matches and page count
    """
    conditions = build_job_filters(owner_id, query)

    page_stmt = apply_sort(select(Job).where(*conditions), query.sort)
    page_stmt = page_stmt.offset(query.offset).limit(query.limit)
    result = await db.execute(page_stmt)
    jobs = list(result.scalars().all())

    count_result = await db.execute(
        select(func.count()).select_from(Job).where(*conditions)
    )
    total = count_result.scalar_one()

    logger.debug(
        f"Listed {len(jobs)} of {total} jobs for {owner_id} "
        f"(page={query.page}, limit={query.limit}, sort={query.sort.value})"
    )
    return JobPage(
        jobs=jobs,
        total_jobs=total,
        num_of_pages=count_pages(total, query.limit),
    )

"""Owner-scoped create/read/update/delete for jobs.

Every statement carries ``created_by == owner_id`` so a job belonging to
another user behaves exactly like a job that does not exist. Writes are
flushed, never committed; the request session from ``get_db`` commits or
rolls back.
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models import Job
from jobtracker.schemas.job import JobCreate, JobUpdate
from jobtracker.services.errors import BadRequestError, JobNotFoundError

logger = logging.getLogger(__name__)


async def get_job(db: AsyncSession, owner_id: str, job_id: UUID) -> Job:
    """Fetch a single job owned by ``owner_id``.

    Raises:
        JobNotFoundError: If the id does not exist or belongs to someone else
    """
    result = await db.execute(
        select(Job).where(Job.id == job_id, Job.created_by == owner_id)
    )
    job = result.scalar_one_or_none()
    if job is None:
        raise JobNotFoundError(job_id)
    return job


async def create_job(db: AsyncSession, owner_id: str, job_data: JobCreate) -> Job:
    """Persist a new job for ``owner_id``."""
    job = Job(
        created_by=owner_id,
        company=job_data.company,
        position=job_data.position,
        status=job_data.status,
        job_type=job_data.job_type,
    )
    db.add(job)
    await db.flush()
    await db.refresh(job)

    logger.info(f"Created job {job.id}: {job.position} at {job.company} for {owner_id}")
    return job


def validate_update(job_data: JobUpdate) -> None:
    """Reject patches that would blank out company or position."""
    if job_data.company == "" or job_data.position == "":
        raise BadRequestError("Company or Position fields cannot be empty")


async def update_job(
    db: AsyncSession,
    owner_id: str,
    job_id: UUID,
    job_data: JobUpdate,
) -> Job:
    """Apply a partial update in a single owner-scoped UPDATE.

    Raises:
        BadRequestError: If company or position is an empty string
        JobNotFoundError: If the id does not exist or belongs to someone else
    """
    validate_update(job_data)

    changes = job_data.changes()
    if not changes:
        return await get_job(db, owner_id, job_id)

    result = await db.execute(
        update(Job)
        .where(Job.id == job_id, Job.created_by == owner_id)
        .values(**changes)
        .returning(Job)
        .execution_options(populate_existing=True)
    )
    job = result.scalar_one_or_none()
    if job is None:
        raise JobNotFoundError(job_id)

    logger.info(f"Updated job {job_id} ({', '.join(sorted(changes))})")
    return job


async def delete_job(db: AsyncSession, owner_id: str, job_id: UUID) -> None:
    """Delete a job in a single owner-scoped DELETE.

    Raises:
        JobNotFoundError: If the id does not exist or belongs to someone else
    """
    result = await db.execute(
        delete(Job)
        .where(Job.id == job_id, Job.created_by == owner_id)
        .returning(Job.id)
    )
    if result.scalar_one_or_none() is None:
        raise JobNotFoundError(job_id)

    logger.info(f"Deleted job {job_id}")

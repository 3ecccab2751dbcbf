"""Jobs API router.

This module provides REST endpoints for tracking job applications: listing
with filters, sorting and pagination, per-user statistics, and owner-scoped
create/read/update/delete.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.auth import CurrentUser, get_current_user, require_writable_user
from jobtracker.database import get_db
from jobtracker.schemas.job import (
    JobCreate,
    JobEnvelope,
    JobListResponse,
    JobQuery,
    JobResponse,
    JobUpdate,
)
from jobtracker.schemas.stats import StatsResponse
from jobtracker.services import jobs as job_service
from jobtracker.services.errors import BadRequestError, JobNotFoundError
from jobtracker.services.job_query import list_jobs
from jobtracker.services.job_stats import get_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/jobs", tags=["jobs"])


def job_query_params(
    search: str | None = Query(None, description="Case-insensitive match on position"),
    status_filter: str | None = Query(None, alias="status", description="Status filter, 'all' for any"),
    job_type: str | None = Query(None, alias="jobType", description="Job type filter, 'all' for any"),
    sort: str | None = Query(None, description="latest, oldest, a-z or z-a"),
    page: str | None = Query(None, description="Page number (1-indexed)"),
    limit: str | None = Query(None, description="Items per page"),
) -> JobQuery:
    """Collect raw list parameters into a validated JobQuery.

    Page and limit are taken as strings so unusable values fall back to
    their defaults instead of failing validation.
    """
    return JobQuery(
        search=search,
        status=status_filter,
        job_type=job_type,
        sort=sort,
        page=page,
        limit=limit,
    )


def _not_found(error: JobNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))


def _server_error(action: str, error: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {str(error)}",
    )


@router.get(
    "",
    response_model=JobListResponse,
    summary="List jobs"
)
async def list_user_jobs(
    query: JobQuery = Depends(job_query_params),
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
) -> JobListResponse:
    """List the caller's jobs with filtering, sorting and pagination.

    Args:
        query: search, status, jobType, sort, page and limit
        user: Authenticated caller
        db: Database session

    Returns:
        Page of jobs with total match count and number of pages

    Raises:
        HTTPException 500: Database error
    """
    try:
        page = await list_jobs(db, user.user_id, query)
    except SQLAlchemyError as e:
        logger.error(f"Failed to list jobs for {user.user_id}: {e}")
        raise _server_error("list jobs", e)

    return JobListResponse(
        jobs=[JobResponse.model_validate(job) for job in page.jobs],
        total_jobs=page.total_jobs,
        num_of_pages=page.num_of_pages,
    )


@router.get(
    "/stats",
    response_model=StatsResponse,
    summary="Job statistics"
)
async def show_stats(
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
) -> StatsResponse:
    """Counts per status and applications per month for the caller.

    Raises:
        HTTPException 500: Database error
    """
    try:
        return await get_stats(db, user.user_id)
    except SQLAlchemyError as e:
        logger.error(f"Failed to compute stats for {user.user_id}: {e}")
        raise _server_error("compute stats", e)


@router.post(
    "",
    response_model=JobEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new job"
)
async def create_job(
    job_data: JobCreate,
    user: CurrentUser = Depends(require_writable_user),
    db: AsyncSession = Depends(get_db)
) -> JobEnvelope:
    """Create a job owned by the caller.

    Args:
        job_data: company, position and optional status/jobType
        user: Authenticated, writable caller
        db: Database session

    Returns:
        Created job record

    Raises:
        HTTPException 400: Read-only caller
        HTTPException 422: Validation error
        HTTPException 500: Database error
    """
    try:
        job = await job_service.create_job(db, user.user_id, job_data)
    except SQLAlchemyError as e:
        logger.error(f"Failed to create job: {e}")
        raise _server_error("create job", e)

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.get(
    "/{job_id}",
    response_model=JobEnvelope,
    summary="Get a specific job"
)
async def get_job(
    job_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
) -> JobEnvelope:
    """Get a single job by ID.

    Raises:
        HTTPException 404: Job not found
        HTTPException 500: Database error
    """
    try:
        job = await job_service.get_job(db, user.user_id, job_id)
    except JobNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError as e:
        logger.error(f"Failed to get job {job_id}: {e}")
        raise _server_error("get job", e)

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch(
    "/{job_id}",
    response_model=JobEnvelope,
    summary="Update a job"
)
async def update_job(
    job_id: UUID,
    job_data: JobUpdate,
    user: CurrentUser = Depends(require_writable_user),
    db: AsyncSession = Depends(get_db)
) -> JobEnvelope:
    """Partially update a job owned by the caller.

    Args:
        job_id: Job UUID
        job_data: Fields to change
        user: Authenticated, writable caller
        db: Database session

    Returns:
        Updated job record

    Raises:
        HTTPException 400: Empty company/position, or read-only caller
        HTTPException 404: Job not found
        HTTPException 500: Database error
    """
    try:
        job = await job_service.update_job(db, user.user_id, job_id, job_data)
    except BadRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except JobNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError as e:
        logger.error(f"Failed to update job {job_id}: {e}")
        raise _server_error("update job", e)

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a job"
)
async def delete_job(
    job_id: UUID,
    user: CurrentUser = Depends(require_writable_user),
    db: AsyncSession = Depends(get_db)
) -> Response:
    """Delete a job owned by the caller.

    Raises:
        HTTPException 400: Read-only caller
        HTTPException 404: Job not found
        HTTPException 500: Database error
    """
    try:
        await job_service.delete_job(db, user.user_id, job_id)
    except JobNotFoundError as e:
        raise _not_found(e)
    except SQLAlchemyError as e:
        logger.error(f"Failed to delete job {job_id}: {e}")
        raise _server_error("delete job", e)

    return Response(status_code=status.HTTP_200_OK)

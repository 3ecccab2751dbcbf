"""Job-related Pydantic schemas.

This module defines request and response schemas for Job endpoints,
including job creation, partial updates, list query parameters and the
paginated list envelope. Responses use camelCase keys.
"""

import enum
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from jobtracker.config import settings
from jobtracker.models.job import COMPANY_MAX_LENGTH, POSITION_MAX_LENGTH, JobStatus, JobType

DEFAULT_PAGE = 1
# Largest page or limit passed to the database (signed 32-bit)
MAX_PAGING_VALUE = 2**31 - 1

# Filter value meaning "do not filter on this field"
ALL = "all"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JobCreate(CamelModel):
    """Schema for creating a new job. The owner is never accepted from the client."""

    company: str = Field(..., min_length=1, max_length=COMPANY_MAX_LENGTH)
    position: str = Field(..., min_length=1, max_length=POSITION_MAX_LENGTH)
    status: JobStatus = JobStatus.PENDING
    job_type: JobType = JobType.FULL_TIME


class JobUpdate(CamelModel):
    """Schema for partially updating a job.

    Empty company/position strings are let through here so the service can
    reject them with a 400 rather than a validation error.
    """

    company: str | None = Field(None, max_length=COMPANY_MAX_LENGTH)
    position: str | None = Field(None, max_length=POSITION_MAX_LENGTH)
    status: JobStatus | None = None
    job_type: JobType | None = None

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, keyed by model attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class JobResponse(CamelModel):
    """Schema for job response with all fields."""

    id: UUID
    created_by: str
    company: str
    position: str
    status: JobStatus
    job_type: JobType
    created_at: datetime
    updated_at: datetime


class JobEnvelope(BaseModel):
    """Single job wrapped as ``{"job": ...}``."""

    job: JobResponse


class JobListResponse(CamelModel):
    """Schema for paginated job list response."""

    jobs: list[JobResponse]
    total_jobs: int
    num_of_pages: int


class JobSort(str, enum.Enum):
    """Orderings for the job list.

    Unknown values resolve to ``LATEST``.
    """

    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"

    @classmethod
    def _missing_(cls, value: object) -> "JobSort":
        return cls.LATEST


def _positive_int_or(value: Any, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if 1 <= number <= MAX_PAGING_VALUE else default


def _default_limit() -> int:
    return settings.default_page_size


class JobQuery(BaseModel):
    """Validated list parameters.

    Every field is optional. ``status`` and ``job_type`` are ``None`` when
    absent, empty or ``"all"``; ``page`` and ``limit`` fall back to their
    defaults when absent, non-numeric or outside 1..2**31-1, and a page whose
    offset would pass that bound is clamped so the offset stays within it.
    """

    search: str | None = None
    status: str | None = None
    job_type: str | None = None
    sort: JobSort = JobSort.LATEST
    page: int = DEFAULT_PAGE
    limit: int = Field(default_factory=_default_limit)

    @field_validator("search", mode="before")
    @classmethod
    def _blank_search(cls, value: Any) -> str | None:
        if value is None or value == "":
            return None
        return value

    @field_validator("status", "job_type", mode="before")
    @classmethod
    def _all_means_unfiltered(cls, value: Any) -> str | None:
        if value is None or value == "" or value == ALL:
            return None
        return value

    @field_validator("sort", mode="before")
    @classmethod
    def _default_sort(cls, value: Any) -> JobSort:
        if value is None:
            return JobSort.LATEST
        return JobSort(value)

    @field_validator("page", mode="before")
    @classmethod
    def _coerce_page(cls, value: Any) -> int:
        return _positive_int_or(value, DEFAULT_PAGE)

    @field_validator("limit", mode="before")
    @classmethod
    def _coerce_limit(cls, value: Any) -> int:
        return _positive_int_or(value, settings.default_page_size)

    @model_validator(mode="after")
    def _bound_offset(self) -> "JobQuery":
        if (self.page - 1) * self.limit > MAX_PAGING_VALUE:
            self.page = MAX_PAGING_VALUE // self.limit + 1
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

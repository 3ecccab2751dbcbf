"""Database models for the job tracker."""

from .base import Base
from .job import Job, JobStatus, JobType

__all__ = [
    "Base",
    "Job",
    "JobStatus",
    "JobType",
]

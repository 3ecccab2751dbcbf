"""Errors raised by job services and translated to HTTP responses by routers."""

from uuid import UUID


class BadRequestError(ValueError):
    """The request is well-formed but cannot be applied."""


class JobNotFoundError(LookupError):
    """No job with this id belongs to the caller."""

    def __init__(self, job_id: UUID):
        self.job_id = job_id
        super().__init__(f"No job with id {job_id}")

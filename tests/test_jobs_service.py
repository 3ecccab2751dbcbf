"""
Tests for services/jobs.py - owner-scoped CRUD.
"""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import OTHER_OWNER, OWNER
from jobtracker.models import JobStatus, JobType
from jobtracker.schemas.job import JobCreate, JobUpdate
from jobtracker.services.errors import BadRequestError, JobNotFoundError
from jobtracker.services.jobs import create_job, delete_job, get_job, update_job


class TestCreateAndGet:
    """Test creating and fetching jobs."""

    async def test_create_sets_owner_and_defaults(self, db_session):
        job = await create_job(db_session, OWNER, JobCreate(company="acme", position="engineer"))

        assert job.created_by == OWNER
        assert job.status is JobStatus.PENDING
        assert job.job_type is JobType.FULL_TIME
        assert job.created_at is not None
        assert job.updated_at is not None

    async def test_get_own_job(self, db_session, make_job):
        created = await make_job()

        job = await get_job(db_session, OWNER, created.id)

        assert job.id == created.id

    async def test_get_other_owners_job_is_not_found(self, db_session, make_job):
        created = await make_job(owner=OTHER_OWNER)

        with pytest.raises(JobNotFoundError):
            await get_job(db_session, OWNER, created.id)

    async def test_get_missing_job_is_not_found(self, db_session):
        missing = uuid.uuid4()
        with pytest.raises(JobNotFoundError, match=f"No job with id {missing}"):
            await get_job(db_session, OWNER, missing)


class TestUpdate:
    """Test partial updates."""

    async def test_update_changes_only_sent_fields(self, db_session, make_job):
        created = await make_job(company="acme", position="engineer")

        job = await update_job(
            db_session, OWNER, created.id, JobUpdate(status=JobStatus.INTERVIEW)
        )

        assert job.status is JobStatus.INTERVIEW
        assert job.company == "acme"
        assert job.position == "engineer"

    @pytest.mark.parametrize("body", [{"company": ""}, {"position": ""}])
    async def test_empty_fields_rejected_before_store(self, body):
        db = AsyncMock()

        with pytest.raises(BadRequestError):
            await update_job(db, OWNER, uuid.uuid4(), JobUpdate.model_validate(body))

        db.execute.assert_not_awaited()

    async def test_update_other_owners_job_is_not_found(self, db_session, make_job):
        created = await make_job(owner=OTHER_OWNER, company="acme")

        with pytest.raises(JobNotFoundError):
            await update_job(db_session, OWNER, created.id, JobUpdate(company="evil"))

        job = await get_job(db_session, OTHER_OWNER, created.id)
        assert job.company == "acme"

    async def test_empty_patch_returns_current_job(self, db_session, make_job):
        created = await make_job(company="acme")

        job = await update_job(db_session, OWNER, created.id, JobUpdate())

        assert job.company == "acme"

    async def test_empty_patch_on_missing_job_is_not_found(self, db_session):
        with pytest.raises(JobNotFoundError):
            await update_job(db_session, OWNER, uuid.uuid4(), JobUpdate())


class TestDelete:
    """Test deletes."""

    async def test_delete_removes_job(self, db_session, make_job):
        created = await make_job()

        await delete_job(db_session, OWNER, created.id)

        with pytest.raises(JobNotFoundError):
            await get_job(db_session, OWNER, created.id)

    async def test_delete_missing_job_is_not_found(self, db_session):
        with pytest.raises(JobNotFoundError):
            await delete_job(db_session, OWNER, uuid.uuid4())

    async def test_delete_other_owners_job_is_not_found(self, db_session, make_job):
        created = await make_job(owner=OTHER_OWNER)

        with pytest.raises(JobNotFoundError):
            await delete_job(db_session, OWNER, created.id)

        assert (await get_job(db_session, OTHER_OWNER, created.id)).id == created.id


class TestTransactionBoundary:
    """Services flush their writes and leave commit/rollback to the caller."""

    async def test_rolled_back_create_is_discarded(self, db_session):
        job = await create_job(db_session, OWNER, JobCreate(company="acme", position="engineer"))
        job_id = job.id

        await db_session.rollback()

        with pytest.raises(JobNotFoundError):
            await get_job(db_session, OWNER, job_id)

    async def test_rolled_back_delete_keeps_job(self, db_session, make_job):
        created = await make_job()
        job_id = created.id

        await delete_job(db_session, OWNER, job_id)
        await db_session.rollback()

        assert (await get_job(db_session, OWNER, job_id)).id == job_id

    async def test_update_does_not_commit(self):
        db = AsyncMock()
        db.execute.return_value = MagicMock()

        await update_job(db, OWNER, uuid.uuid4(), JobUpdate(status=JobStatus.DECLINED))

        db.execute.assert_awaited_once()
        db.commit.assert_not_awaited()

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.errors import NotFoundError, ValidationError
from jobly.db.models.company import Company
from jobly.db.models.job import Job
from jobly.schemas.job import JobCreate, JobFilter, JobUpdate
from .base import BaseRepository, is_foreign_key_violation
from .sql import JOB_COLUMNS, sql_for_job_filters, sql_for_partial_update

logger = logging.getLogger(__name__)


class JobRepository(BaseRepository):
    """
    Repository for jobs.

    Failures the caller can act on surface as ValidationError or NotFoundError;
    any other database error propagates unchanged.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session)

    async def create_job(self, payload: JobCreate) -> Job:
        """
        Create a job after checking that its company exists.

        Raises ValidationError if the company handle is unknown; nothing is
        inserted in that case. The check and the insert are separate round
        trips; a company deleted in between is caught by the foreign key.
        """
        handle = payload.company_handle
        stmt = select(Company.handle).where(Company.handle == handle)
        if await self.scalar_one_or_none(stmt) is None:
            raise ValidationError(f"Company handle does not exist: {handle}")

        row = Job(
            title=payload.title,
            salary=payload.salary,
            equity=payload.equity,
            company_handle=handle,
        )
        await self.add(row)
        try:
            await self.session.flush()
            job_id = row.id
            await self.commit()
        except IntegrityError as exc:
            await self.rollback()
            if is_foreign_key_violation(exc):
                raise ValidationError(f"Company handle does not exist: {handle}") from exc
            raise
        logger.info("Created job %s for company %s", job_id, handle)
        return await self.get_job(job_id)

    async def list_jobs(self) -> List[Job]:
        """All jobs ordered by title."""
        stmt = select(Job).order_by(Job.title)
        res = await self.scalars(stmt)
        return list(res)

    async def list_jobs_filtered(
        self, filters: Union[JobFilter, Mapping[str, Any]]
    ) -> List[Job]:
        """
        Jobs matching every supplied criterion, ordered by title.

        Accepts title (case-insensitive substring), min_salary and has_equity.
        With no criteria this is the same as list_jobs().
        """
        if isinstance(filters, JobFilter):
            filters = filters.model_dump(exclude_none=True)
        clauses = sql_for_job_filters(filters)

        stmt = select(Job)
        if clauses:
            stmt = stmt.where(and_(*clauses))
        stmt = stmt.order_by(Job.title)
        res = await self.scalars(stmt)
        return list(res)

    async def get_job(self, job_id: int) -> Job:
        stmt = select(Job).where(Job.id == job_id)
        job = await self.scalar_one_or_none(stmt)
        if job is None:
            raise NotFoundError(f"No job: {job_id}")
        return job

    async def update_job(
        self, job_id: int, payload: Union[JobUpdate, Mapping[str, Any]]
    ) -> Job:
        """
        Partially update a job; fields not supplied keep their values.

        Raises:
          ValidationError: empty payload, unknown field, or unknown company handle
          NotFoundError: no job with this id
        """
        if isinstance(payload, JobUpdate):
            payload = payload.model_dump(exclude_unset=True)
        values = sql_for_partial_update(payload, JOB_COLUMNS)

        stmt = (
            update(Job)
            .where(Job.id == job_id)
            .values(**values)
            .returning(Job.id)
        )
        try:
            result = await self.execute(stmt)
        except IntegrityError as exc:
            await self.rollback()
            if is_foreign_key_violation(exc):
                raise ValidationError(
                    f"Company handle does not exist: {values.get('company_handle')}"
                ) from exc
            raise

        if result.scalar_one_or_none() is None:
            await self.rollback()
            raise NotFoundError(f"No job: {job_id}")
        await self.commit()
        logger.info("Updated job %s: %s", job_id, ", ".join(sorted(values)))

        stmt = select(Job).where(Job.id == job_id).execution_options(populate_existing=True)
        return (await self.scalar_one_or_none(stmt))  # type: ignore

    async def remove_job(self, job_id: int) -> None:
        stmt = delete(Job).where(Job.id == job_id).returning(Job.id)
        result = await self.execute(stmt)
        if result.scalar_one_or_none() is None:
            await self.rollback()
            raise NotFoundError(f"No job: {job_id}")
        await self.commit()
        logger.info("Removed job %s", job_id)

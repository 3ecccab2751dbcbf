"""Job model for tracked job applications."""

import enum
from uuid import UUID, uuid4

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin

COMPANY_MAX_LENGTH = 50
POSITION_MAX_LENGTH = 100


class JobStatus(str, enum.Enum):
    """Where an application currently stands."""

    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobType(str, enum.Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    INTERNSHIP = "internship"


def _enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    return [member.value for member in enum_cls]


class Job(Base, TimestampMixin):
    """A job application owned by a single user."""

    __tablename__ = "jobs"

    # Primary Key - UUID
    id: Mapped[UUID] = mapped_column(
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    # Owner - set server-side from the resolved identity
    created_by: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,  # Every query is scoped by owner
    )

    # Job Information
    company: Mapped[str] = mapped_column(String(COMPANY_MAX_LENGTH), nullable=False)
    position: Mapped[str] = mapped_column(String(POSITION_MAX_LENGTH), nullable=False)

    status: Mapped[JobStatus] = mapped_column(
        Enum(
            JobStatus,
            name="job_status",
            native_enum=False,
            values_callable=_enum_values,
        ),
        default=JobStatus.PENDING,
        nullable=False,
    )
    job_type: Mapped[JobType] = mapped_column(
        Enum(
            JobType,
            name="job_type",
            native_enum=False,
            values_callable=_enum_values,
        ),
        default=JobType.FULL_TIME,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Job(position='{self.position}', company='{self.company}', status='{self.status}')>"

"""SQLAlchemy ORM models for loan records."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from src.core.config import settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _audit_actor() -> str:
    return settings.audit_actor


class Base(DeclarativeBase):
    pass


class AuditMixin:
    """Audit columns filled in by the ORM on insert and update."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
    )
    created_by: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=_audit_actor,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=_utcnow,
    )
    updated_by: Mapped[str | None] = mapped_column(
        String(20),
        nullable=True,
        onupdate=_audit_actor,
    )


class LoanModel(AuditMixin, Base):
    """Persisted loan record."""

    __tablename__ = "loans"

    loan_id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    mobile_number: Mapped[str] = mapped_column(
        String(15),
        nullable=False,
        unique=True,
        index=True,
    )
    loan_number: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )
    loan_type: Mapped[str] = mapped_column(String(100), nullable=False)
    total_loan: Mapped[int] = mapped_column(Integer, nullable=False)
    amount_paid: Mapped[int] = mapped_column(Integer, nullable=False)
    outstanding_amount: Mapped[int] = mapped_column(Integer, nullable=False)

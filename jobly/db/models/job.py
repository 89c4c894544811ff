from __future__ import annotations

from decimal import Decimal
from typing import Optional
from sqlalchemy import CheckConstraint, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly.db.base import Base


class Job(Base):
    """Job posting tied to exactly one company."""
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="salary_non_negative"),
        CheckConstraint("equity <= 1.0", name="equity_at_most_one"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    equity: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False, index=True
    )

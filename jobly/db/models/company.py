from __future__ import annotations

from typing import Optional
from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly.db.base import Base


class Company(Base):
    """Company that posts jobs, keyed by its handle."""
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("handle = lower(handle)", name="handle_lowercase"),
        CheckConstraint("num_employees >= 0", name="num_employees_non_negative"),
    )

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    num_employees: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

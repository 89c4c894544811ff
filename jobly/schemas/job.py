from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class JobRead(BaseModel):
    """Job read model."""
    id: int = Field(..., description="Job ID")
    title: str = Field(..., description="Job title")
    salary: Optional[int] = Field(None)
    equity: Optional[Decimal] = Field(None)
    company_handle: str = Field(..., description="Handle of the posting company")

    class Config:
        from_attributes = True


class JobCreate(BaseModel):
    """Create job payload."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1, description="Job title")
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """
    Partial update payload.

    Only fields explicitly provided are applied; use model_dump(exclude_unset=True).
    """
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: Optional[str] = Field(None, alias="companyHandle", min_length=1, max_length=25)

    @field_validator("title", "company_handle")
    @classmethod
    def _not_null(cls, v, info):
        # Omitting these is fine; explicitly clearing them is not.
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class JobFilter(BaseModel):
    """Search criteria for listing jobs; all provided criteria must match."""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: Optional[str] = Field(None, description="Case-insensitive substring of the title")
    min_salary: Optional[int] = Field(None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(None, alias="hasEquity")

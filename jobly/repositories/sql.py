"""
Builders for the dynamic parts of SQL statements.

Both builders work over a fixed mapping of allowed keys and produce SQLAlchemy
expressions, so every value reaches the database as a bound parameter.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from sqlalchemy import ColumnElement
from sqlalchemy.orm import InstrumentedAttribute

from jobly.core.errors import ValidationError
from jobly.db.models.job import Job

Predicate = Callable[[Any], Optional[ColumnElement[bool]]]


# Fields a job update may touch, mapped to their columns.
JOB_COLUMNS: dict[str, InstrumentedAttribute] = {
    "title": Job.title,
    "salary": Job.salary,
    "equity": Job.equity,
    "company_handle": Job.company_handle,
}

# Filter criteria for job searches. A factory returning None adds no predicate.
JOB_FILTERS: dict[str, Predicate] = {
    "title": lambda value: Job.title.icontains(value, autoescape=True),
    "min_salary": lambda value: Job.salary >= value,
    # has_equity=False means "don't filter", not "equity = 0"
    "has_equity": lambda value: Job.equity > 0 if value else None,
}


def _reject_unknown(keys, allowed: Mapping[str, Any]) -> None:
    unknown = sorted(set(keys) - set(allowed))
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")


# PUBLIC_INTERFACE
def sql_for_partial_update(
    data: Mapping[str, Any], columns: Mapping[str, InstrumentedAttribute]
) -> dict[str, Any]:
    """
    Translate a partial update payload into UPDATE values keyed by column name.

    Parameters:
      data: field -> new value, only for the fields being changed
      columns: allowed field -> mapped column

    Returns:
      dict suitable for ``update(...).values(**result)``

    Raises:
      ValidationError: if data is empty, contains a field not in columns, or
        sets a NOT NULL column to None
    """
    if not data:
        raise ValidationError("No data")
    _reject_unknown(data, columns)
    for field, value in data.items():
        if value is None and not columns[field].property.columns[0].nullable:
            raise ValidationError(f"{field} cannot be null")
    return {columns[field].key: value for field, value in data.items()}


# PUBLIC_INTERFACE
def sql_for_filters(
    filters: Mapping[str, Any], predicates: Mapping[str, Predicate]
) -> list[ColumnElement[bool]]:
    """
    Build the list of WHERE predicates for the supplied criteria.

    Criteria set to None are treated as absent. An empty result means the
    query must not be filtered at all.

    Raises:
      ValidationError: if filters contains a key not in predicates
    """
    _reject_unknown(filters, predicates)
    clauses = []
    for key, value in filters.items():
        if value is None:
            continue
        clause = predicates[key](value)
        if clause is not None:
            clauses.append(clause)
    return clauses


# PUBLIC_INTERFACE
def sql_for_job_filters(filters: Mapping[str, Any]) -> list[ColumnElement[bool]]:
    """Predicates for a job search over title, min_salary and has_equity."""
    return sql_for_filters(filters, JOB_FILTERS)

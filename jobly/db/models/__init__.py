"""
ORM models for companies and jobs.

Importing this package ensures model classes are registered with the Base
metadata for runtime usage and table creation.
"""

from .company import Company  # noqa: F401
from .job import Job  # noqa: F401

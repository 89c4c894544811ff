"""
Public Pydantic schemas used by the API, repositories, and tests.
"""

from .common import MessageResponse  # noqa: F401
from .job import JobCreate, JobFilter, JobRead, JobUpdate  # noqa: F401

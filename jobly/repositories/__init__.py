"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each domain area. They receive
the AsyncSession explicitly (e.g., via the jobly.db.session.get_async_session
dependency) and raise jobly.core.errors types for caller-recoverable failures.
"""

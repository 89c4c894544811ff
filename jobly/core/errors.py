from __future__ import annotations


class JoblyError(Exception):
    """
    Base class for caller-facing domain errors.

    Each subclass carries the HTTP status the API layer responds with.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Bad, missing or invalid input, including unknown foreign-key references."""

    status_code = 400
    error_type = "bad_request"


class NotFoundError(JoblyError):
    """No record exists for the given identifier."""

    status_code = 404
    error_type = "not_found"

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    BACKEND = "backend"
    CONFIRMATION_REQUIRED = "confirmation_required"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


GENERIC_ERROR_MESSAGE = "An error occurred, please try again"


class SiteError(Exception):
    """Base class for errors surfaced to API clients."""

    kind: ErrorKind = ErrorKind.BACKEND
    status_code: int = 500

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class InvariantViolation(SiteError):
    kind = ErrorKind.VALIDATION
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class EntityNotFound(SiteError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404


class BackendError(SiteError):
    kind = ErrorKind.BACKEND
    status_code = 500

    def __init__(self, message: str = GENERIC_ERROR_MESSAGE):
        super().__init__(message)


class ConfirmationRequired(SiteError):
    kind = ErrorKind.CONFIRMATION_REQUIRED
    status_code = 428


class StaleWrite(SiteError):
    kind = ErrorKind.CONFLICT
    status_code = 409

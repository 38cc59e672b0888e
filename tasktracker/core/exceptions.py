# tasktracker/core/exceptions.py
from typing import Any, Optional


class BaseAppException(Exception):
    """Base class for every application error surfaced to callers."""
    code: str = "app_error"
    status_code: int = 500

    def __init__(self, message: str = "App exception", details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

# ==== Authentication / authorization ====

class UnauthenticatedError(BaseAppException):
    """No valid session."""
    code = "unauthenticated"
    status_code = 401

    def __init__(self, message: str = "Could not validate credentials", details: Optional[Any] = None):
        super().__init__(message, details)

class ForbiddenError(BaseAppException):
    """Authenticated, but not allowed to perform the action on the entity."""
    code = "forbidden"
    status_code = 403

    def __init__(self, message: str = "Forbidden", details: Optional[Any] = None):
        super().__init__(message, details)

# ==== Validation ====

class ValidationError(BaseAppException):
    """Malformed or missing input."""
    code = "validation_error"
    status_code = 400

    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, details)

class TaskValidationError(ValidationError):
    def __init__(self, message: str = "Task validation error", details: Optional[Any] = None):
        super().__init__(message, details)

class UserValidationError(ValidationError):
    def __init__(self, message: str = "User validation error", details: Optional[Any] = None):
        super().__init__(message, details)

class ActivityLogValidationError(ValidationError):
    def __init__(self, message: str = "Activity log validation error", details: Optional[Any] = None):
        super().__init__(message, details)

# ==== NotFound ====

class NotFoundError(BaseAppException):
    """Referenced entity does not exist."""
    code = "not_found"
    status_code = 404

    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, details)

class TaskNotFound(NotFoundError):
    def __init__(self, message: str = "Task not found", details: Optional[Any] = None):
        super().__init__(message, details)

class UserNotFound(NotFoundError):
    def __init__(self, message: str = "User not found", details: Optional[Any] = None):
        super().__init__(message, details)

# ==== Conflicts ====

class ConflictError(BaseAppException):
    code = "conflict"
    status_code = 409

    def __init__(self, message: str = "Conflict", details: Optional[Any] = None):
        super().__init__(message, details)

class DuplicateEmail(ConflictError):
    def __init__(self, message: str = "User with this email already exists", details: Optional[Any] = None):
        super().__init__(message, details)

# ==== Storage ====

class InternalError(BaseAppException):
    """Unexpected storage failure; never retried by the services."""
    code = "internal_error"
    status_code = 500

    def __init__(self, message: str = "Internal error", details: Optional[Any] = None):
        super().__init__(message, details)

"""Application error taxonomy and its mapping to HTTP status codes"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors the API knows how to present to clients"""

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationFailedError(AppError):
    """Request input failed one or more validation rules"""

    def __init__(self, errors: List[Dict[str, str]]):
        super().__init__("Validation failed")
        self.errors = errors


class NotFoundError(AppError):
    """Referenced entity does not exist"""


class TaskNotFoundError(NotFoundError):
    def __init__(self, task_id: Any):
        super().__init__("Task not found")
        self.task_id = task_id


class BadRequestError(AppError):
    """Structurally valid but semantically empty request"""


class StoreUnavailableError(AppError):
    """The entity store could not serve the request"""


# Ordered most specific first; the first matching class wins.
_STATUS_CODES = (
    (ValidationFailedError, 422),
    (NotFoundError, 404),
    (BadRequestError, 400),
    (StoreUnavailableError, 500),
)


def status_code_for(exc: BaseException) -> int:
    """
    Map an error to the HTTP status code the API responds with.

    Anything outside the taxonomy is an unexpected error (500).
    """
    for error_class, status_code in _STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return 500

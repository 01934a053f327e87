from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (ids, field info)
        code: optional machine-readable error code
        http_status: status code the API handlers respond with
    """

    http_status = 500
    default_message = "Application error"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        """The ``error`` part of the JSON error envelope"""
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input passes schema validation but cannot be accepted (400)."""

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(AppError):
    """Raised when a requested user or meal does not exist for the given key.

    A meal looked up under the wrong owner is reported the same way (404).
    """

    http_status = 404
    default_message = "Not found"

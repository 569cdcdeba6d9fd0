"""
Custom exceptions for the employee service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, transport libraries, etc.).
A missing employee is not an error: lookups return None instead.
"""

from typing import Any, Optional


class EmployeeServiceException(Exception):
    """Base exception for all employee service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidEmployeeInputException(EmployeeServiceException):
    """Raised when caller-supplied data violates a validation rule."""

    def __init__(self, field: str, reason: str, value: Any = None):
        self.field = field
        self.reason = reason
        super().__init__(
            message=reason,
            details={"field": field, "value": None if value is None else str(value)},
        )


class UpstreamRejectedException(EmployeeServiceException):
    """Raised when the remote directory explicitly reports a failure."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        self.operation = operation
        self.reason = reason
        message = f"Directory rejected {operation}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


class DirectoryUnavailableException(EmployeeServiceException):
    """Raised when the remote directory cannot be reached or answers badly."""

    def __init__(
        self,
        operation: str,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.operation = operation
        self.reason = reason
        self.status_code = status_code
        message = f"Failed to {operation}: employee directory unavailable"
        if reason:
            message += f" ({reason})"
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "reason": reason,
                "upstream_status": status_code,
            },
        )

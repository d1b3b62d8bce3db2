"""
Error Handling Module
---------------------
Typed errors with classification and a single normalization boundary.

Caller-side failures (unknown method, permission, validation, missing
customer) are raised before any Stripe call and keep their detail.
Upstream failures are collapsed into "Failed to <operation>"; the cause
only reaches the operator log.
"""

from enum import Enum, auto
from typing import Any, Dict, Iterable, Optional
import logging


class ErrorCategory(Enum):
    """Categories of errors for handling decisions."""
    UNKNOWN_METHOD = auto()          # Method not in the registry
    PERMISSION_DENIED = auto()       # Tool excluded by permission configuration
    VALIDATION_ERROR = auto()        # Raw parameters failed the schema
    MISSING_REQUIRED_FIELD = auto()  # Context merge could not supply a field
    UPSTREAM_FAILURE = auto()        # Stripe call failed, timed out or was cancelled


class ToolkitError(Exception):
    """
    Base for all toolkit errors.

    Carries a category and structured details so the executor can map
    every failure to a status without parsing messages.
    """
    category: ErrorCategory = ErrorCategory.UPSTREAM_FAILURE

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.category.name}: {self.message})"


class UnknownMethod(ToolkitError):
    category = ErrorCategory.UNKNOWN_METHOD

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unknown method: {method}", {"method": method})


class PermissionDenied(ToolkitError):
    category = ErrorCategory.PERMISSION_DENIED

    def __init__(self, method: str, missing: Iterable[str] = ()):
        self.method = method
        self.missing = sorted(missing)
        message = f"Permission denied: {method}"
        if self.missing:
            message += f" (requires {', '.join(self.missing)})"
        super().__init__(message, {"method": method, "missing": self.missing})


class ValidationError(ToolkitError):
    category = ErrorCategory.VALIDATION_ERROR

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid parameter {field}: {reason}", {"field": field})


class MissingRequiredField(ToolkitError):
    category = ErrorCategory.MISSING_REQUIRED_FIELD

    def __init__(self, field: str, method: str = ""):
        self.field = field
        self.method = method
        super().__init__(
            f"Missing required field: {field}",
            {"field": field, "method": method},
        )


class UpstreamFailure(ToolkitError):
    """
    A Stripe call failed for any reason.

    `operation` is the lowercase tool label ("create customer") used to
    build the uniform message; `cause` is kept for operator-side logging.
    """
    category = ErrorCategory.UPSTREAM_FAILURE

    def __init__(self, method: str, operation: str, cause: Optional[BaseException] = None):
        self.method = method
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"Failed to {operation}",
            {"method": method, "cause": repr(cause) if cause is not None else None},
        )


class ErrorHandler:
    """
    Central error handler.

    Logs every failure at a level matching its category and returns the
    message the calling agent is allowed to see.
    """

    LEVELS: Dict[ErrorCategory, int] = {
        ErrorCategory.UNKNOWN_METHOD: logging.WARNING,
        ErrorCategory.PERMISSION_DENIED: logging.WARNING,
        ErrorCategory.VALIDATION_ERROR: logging.WARNING,
        ErrorCategory.MISSING_REQUIRED_FIELD: logging.WARNING,
        ErrorCategory.UPSTREAM_FAILURE: logging.ERROR,
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("stripe_agent_toolkit.errors")

    def handle(self, error: ToolkitError) -> str:
        """Log an error and return the agent-facing message."""
        self._log_error(error)
        return self.user_message(error)

    def _log_error(self, error: ToolkitError) -> None:
        level = self.LEVELS.get(error.category, logging.ERROR)
        extra = {"details": error.details}

        if isinstance(error, UpstreamFailure) and error.cause is not None:
            self._logger.log(
                level,
                f"{error.category.name}: {error.method}: {error.cause!r}",
                exc_info=(type(error.cause), error.cause, error.cause.__traceback__),
                extra=extra,
            )
            return

        self._logger.log(level, f"{error.category.name}: {error.message}", extra=extra)

    @staticmethod
    def user_message(error: ToolkitError) -> str:
        if isinstance(error, UpstreamFailure):
            return f"Failed to {error.operation}"
        return error.message

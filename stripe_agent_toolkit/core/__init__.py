# Core module - error taxonomy and per-call context
# Errors raised here are the only failures a dispatch surfaces

from .errors import (
    ErrorCategory, ErrorHandler, ToolkitError,
    UnknownMethod, PermissionDenied, ValidationError,
    MissingRequiredField, UpstreamFailure,
)
from .context import Context

__all__ = [
    "ErrorCategory", "ErrorHandler", "ToolkitError",
    "UnknownMethod", "PermissionDenied", "ValidationError",
    "MissingRequiredField", "UpstreamFailure",
    "Context",
]

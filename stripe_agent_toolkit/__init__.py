"""
Stripe Agent Toolkit
--------------------
Stripe operations exposed as permission-gated tools for automated agents.
"""

from .core.errors import (
    ErrorCategory, ErrorHandler, ToolkitError,
    UnknownMethod, PermissionDenied, ValidationError,
    MissingRequiredField, UpstreamFailure,
)
from .core.context import Context
from .tools.registry import Tool, ToolRegistry, create_default_registry
from .tools.executor import ToolExecutor, ExecutionResult, ExecutionStatus
from .infra.config import ToolkitConfig
from .toolkit import StripeAgentToolkit

__version__ = "0.1.0"

__all__ = [
    "ErrorCategory",
    "ErrorHandler",
    "ToolkitError",
    "UnknownMethod",
    "PermissionDenied",
    "ValidationError",
    "MissingRequiredField",
    "UpstreamFailure",
    "Context",
    "Tool",
    "ToolRegistry",
    "create_default_registry",
    "ToolExecutor",
    "ExecutionResult",
    "ExecutionStatus",
    "ToolkitConfig",
    "StripeAgentToolkit",
]

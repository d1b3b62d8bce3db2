# Tools module - Stripe tool catalog and parameter schemas
# Each tool: method, schema, required resource/operation actions
# The executor lives in tools.executor and is imported from there

from .schema import ParameterType, ToolParameter, ToolSchema
from .registry import (
    Tool, ToolRegistry, Resource, Operation,
    create_default_tools, create_default_registry,
)

__all__ = [
    "ParameterType",
    "ToolParameter",
    "ToolSchema",
    "Tool",
    "ToolRegistry",
    "Resource",
    "Operation",
    "create_default_tools",
    "create_default_registry",
]

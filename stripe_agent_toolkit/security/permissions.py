"""
Permission Filter
-----------------
Resource/operation based tool gating.

A permission configuration maps a resource to the set of operations the
caller may perform on it. A tool is callable iff every (resource,
operation) pair it declares is allowed. No configuration means allow all.

Pure functions only: the filter never consults network or external state.
"""

from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set
import logging

from ..tools.registry import OPERATIONS, RESOURCES, Tool

PermissionConfig = Mapping[str, FrozenSet[str]]

_logger = logging.getLogger("stripe_agent_toolkit.security")


def normalize_permissions(raw: Optional[Mapping[str, Any]]) -> Optional[Dict[str, FrozenSet[str]]]:
    """
    Normalize a permission configuration.

    Accepts either form:
        {"customers": ["create", "read"]}
        {"customers": {"create": True, "read": False}}

    Returns resource -> frozenset of allowed operations, or None when
    raw is None. Unknown resources or operations raise ValueError.
    """
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValueError("permissions must be a mapping of resource to operations")

    normalized: Dict[str, FrozenSet[str]] = {}
    for resource, ops in raw.items():
        resource = getattr(resource, "value", resource)
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource in permissions: {resource!r}")

        if isinstance(ops, Mapping):
            allowed = {getattr(op, "value", op) for op, enabled in ops.items() if enabled}
            declared = {getattr(op, "value", op) for op in ops}
        elif isinstance(ops, str):
            raise ValueError(f"Operations for {resource} must be a list, not a string")
        else:
            allowed = {getattr(op, "value", op) for op in ops}
            declared = allowed

        unknown = declared - OPERATIONS
        if unknown:
            raise ValueError(f"Unknown operations for {resource}: {sorted(unknown)}")

        normalized[resource] = frozenset(allowed)

    return normalized


def missing_actions(tool: Tool, permissions: Optional[PermissionConfig]) -> Set[str]:
    """The `resource.operation` pairs the configuration does not grant."""
    if permissions is None:
        return set()
    return {
        f"{resource}.{op}"
        for resource, op in tool.action_pairs
        if op not in permissions.get(resource, frozenset())
    }


def is_tool_allowed(tool: Tool, permissions: Optional[PermissionConfig]) -> bool:
    """Check if every action the tool declares is authorized."""
    return not missing_actions(tool, permissions)


def filter_tools(tools: Iterable[Tool], permissions: Optional[PermissionConfig]) -> List[Tool]:
    """Subset of tools callable under the configuration, order preserved."""
    allowed = [tool for tool in tools if is_tool_allowed(tool, permissions)]
    if permissions is not None:
        _logger.debug(f"Permission filter kept {len(allowed)} tools")
    return allowed

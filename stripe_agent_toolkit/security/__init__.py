# Security module - resource/operation permission filtering
# No configuration means allow all; any configuration is checked pair by pair

from .permissions import normalize_permissions, is_tool_allowed, filter_tools, missing_actions

__all__ = ["normalize_permissions", "is_tool_allowed", "filter_tools", "missing_actions"]

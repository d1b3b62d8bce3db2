"""StripeAgentToolkit: configuration, Stripe client and executor wired together."""

from typing import Any, Dict, List, Optional

from .api.client import create_stripe_client
from .core.context import Context
from .core.errors import PermissionDenied
from .infra.config import ToolkitConfig
from .security.permissions import missing_actions
from .tools.executor import ToolExecutor
from .tools.registry import Tool, ToolRegistry


class StripeAgentToolkit:
    """
    Entry point for agent integrations.

    The configured actions, account and customer become the default
    context for every call. A Context passed to `run` may change the
    account or customer and may narrow permissions further, but the
    configured actions always apply.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        config: Optional[ToolkitConfig] = None,
        client: Any = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self.config = config or ToolkitConfig()
        if client is None:
            client = create_stripe_client(secret_key, self.config)
        self.context = self.config.build_context()
        self.executor = ToolExecutor(
            client,
            registry=registry,
            timeout_seconds=self.config.timeout_seconds,
            inject_customer=self.config.inject_customer,
        )

    def get_tools(self) -> List[Tool]:
        return self.executor.list_tools(self.context)

    def describe_tools(self) -> List[Dict[str, Any]]:
        return self.executor.describe_tools(self.context)

    def run(self, method: str, arguments: Any = None, context: Optional[Context] = None) -> Any:
        if context is None:
            return self.executor.run(method, arguments, self.context)

        tool = self.executor.registry.lookup(method)
        missing = missing_actions(tool, self.config.actions)
        if missing:
            raise PermissionDenied(method, missing)

        if context.permissions is None:
            context = context.model_copy(update={"permissions": self.context.permissions})
        return self.executor.run(method, arguments, context)

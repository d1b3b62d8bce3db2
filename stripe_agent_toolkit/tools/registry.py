"""
Tool Registry
-------------
Static, ordered catalog of Stripe tools.

Each tool defines:
- Method identifier, display name and description
- Parameter schema
- The resource/operation pairs it needs authorization for

The registry is built once and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple
import logging

from ..core.errors import UnknownMethod
from . import parameters, prompts
from .schema import ToolSchema


class Resource(str, Enum):
    """Stripe resources a tool can act on."""
    CUSTOMERS = "customers"
    PRODUCTS = "products"
    PRICES = "prices"
    PAYMENT_LINKS = "payment_links"
    INVOICES = "invoices"
    INVOICE_ITEMS = "invoice_items"
    BALANCE = "balance"
    REFUNDS = "refunds"
    SUBSCRIPTIONS = "subscriptions"


class Operation(str, Enum):
    """Operations that can be authorized on a resource."""
    CREATE = "create"
    READ = "read"
    UPDATE = "update"


RESOURCES = frozenset(r.value for r in Resource)
OPERATIONS = frozenset(o.value for o in Operation)


@dataclass(frozen=True)
class Tool:
    """
    Tool definition.

    `actions` maps a resource name to the operations this tool requires.
    Invariant: at least one pair, and every pair is drawn from
    Resource x Operation.
    """
    method: str
    name: str
    description: str
    schema: ToolSchema
    actions: Mapping[str, FrozenSet[str]]
    requires_customer: bool = False

    def __post_init__(self):
        actions = {
            _enum_value(resource): frozenset(_enum_value(op) for op in ops)
            for resource, ops in self.actions.items()
        }
        if not any(actions.values()):
            raise ValueError(f"Tool {self.method} declares no actions")
        for resource, ops in actions.items():
            if resource not in RESOURCES:
                raise ValueError(f"Tool {self.method}: unknown resource {resource!r}")
            unknown = ops - OPERATIONS
            if unknown:
                raise ValueError(f"Tool {self.method}: unknown operations {sorted(unknown)}")
        object.__setattr__(self, "actions", MappingProxyType(actions))

    @property
    def failure_message(self) -> str:
        return f"Failed to {self.name.lower()}"

    @property
    def action_pairs(self) -> List[Tuple[str, str]]:
        return [(resource, op) for resource, ops in self.actions.items() for op in sorted(ops)]

    def to_descriptor(self, schema: Optional[ToolSchema] = None) -> Dict[str, Any]:
        """Descriptor handed to the calling agent."""
        return {
            "method": self.method,
            "name": self.name,
            "description": self.description,
            "parameters": (schema or self.schema).to_json_schema(),
            "actions": {resource: sorted(ops) for resource, ops in self.actions.items()},
        }

    def __repr__(self) -> str:
        return f"Tool(method={self.method}, actions={dict(self.actions)})"


def _enum_value(value: Any) -> str:
    return value.value if isinstance(value, Enum) else str(value)


class ToolRegistry:
    """
    Read-only registry of tools, in declaration order.

    Safe to share across concurrent dispatches: nothing here changes
    after construction.
    """

    def __init__(self, tools: Iterable[Tool]):
        self._tools: Tuple[Tool, ...] = tuple(tools)
        self._by_method: Dict[str, Tool] = {}
        for tool in self._tools:
            if tool.method in self._by_method:
                raise ValueError(f"Duplicate tool method: {tool.method}")
            self._by_method[tool.method] = tool
        self._logger = logging.getLogger("stripe_agent_toolkit.tools.registry")
        self._logger.debug(f"Registry built with {len(self._tools)} tools")

    def list(self) -> Tuple[Tool, ...]:
        """All tools in stable order."""
        return self._tools

    def lookup(self, method: str) -> Tool:
        """Get a tool by method, raising UnknownMethod if absent."""
        tool = self._by_method.get(method)
        if tool is None:
            raise UnknownMethod(method)
        return tool

    def get(self, method: str) -> Optional[Tool]:
        return self._by_method.get(method)

    def get_schemas_for_llm(self, tools: Optional[Iterable[Tool]] = None) -> List[Dict[str, Any]]:
        """Tool schemas in OpenAI function format."""
        return [
            tool.schema.to_openai_function(tool.method, tool.description)
            for tool in (self._tools if tools is None else tools)
        ]

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self._tools)

    def __contains__(self, method: object) -> bool:
        return method in self._by_method


def create_default_tools() -> Tuple[Tool, ...]:
    """The Stripe tool catalog, in the order it is shown to agents."""
    return (
        Tool(
            method="create_customer",
            name="Create Customer",
            description=prompts.CREATE_CUSTOMER,
            schema=parameters.create_customer_parameters,
            actions={Resource.CUSTOMERS: {Operation.CREATE}},
        ),
        Tool(
            method="list_customers",
            name="List Customers",
            description=prompts.LIST_CUSTOMERS,
            schema=parameters.list_customers_parameters,
            actions={Resource.CUSTOMERS: {Operation.READ}},
        ),
        Tool(
            method="create_product",
            name="Create Product",
            description=prompts.CREATE_PRODUCT,
            schema=parameters.create_product_parameters,
            actions={Resource.PRODUCTS: {Operation.CREATE}},
        ),
        Tool(
            method="list_products",
            name="List Products",
            description=prompts.LIST_PRODUCTS,
            schema=parameters.list_products_parameters,
            actions={Resource.PRODUCTS: {Operation.READ}},
        ),
        Tool(
            method="create_price",
            name="Create Price",
            description=prompts.CREATE_PRICE,
            schema=parameters.create_price_parameters,
            actions={Resource.PRICES: {Operation.CREATE}},
        ),
        Tool(
            method="list_prices",
            name="List Prices",
            description=prompts.LIST_PRICES,
            schema=parameters.list_prices_parameters,
            actions={Resource.PRICES: {Operation.READ}},
        ),
        Tool(
            method="create_payment_link",
            name="Create Payment Link",
            description=prompts.CREATE_PAYMENT_LINK,
            schema=parameters.create_payment_link_parameters,
            actions={Resource.PAYMENT_LINKS: {Operation.CREATE}},
        ),
        Tool(
            method="create_invoice",
            name="Create Invoice",
            description=prompts.CREATE_INVOICE,
            schema=parameters.create_invoice_parameters,
            actions={Resource.INVOICES: {Operation.CREATE}},
            requires_customer=True,
        ),
        Tool(
            method="create_invoice_item",
            name="Create Invoice Item",
            description=prompts.CREATE_INVOICE_ITEM,
            schema=parameters.create_invoice_item_parameters,
            actions={Resource.INVOICE_ITEMS: {Operation.CREATE}},
            requires_customer=True,
        ),
        Tool(
            method="finalize_invoice",
            name="Finalize Invoice",
            description=prompts.FINALIZE_INVOICE,
            schema=parameters.finalize_invoice_parameters,
            actions={Resource.INVOICES: {Operation.UPDATE}},
        ),
        Tool(
            method="retrieve_balance",
            name="Retrieve Balance",
            description=prompts.RETRIEVE_BALANCE,
            schema=parameters.retrieve_balance_parameters,
            actions={Resource.BALANCE: {Operation.READ}},
        ),
        Tool(
            method="create_refund",
            name="Create Refund",
            description=prompts.CREATE_REFUND,
            schema=parameters.create_refund_parameters,
            actions={Resource.REFUNDS: {Operation.CREATE}},
        ),
        Tool(
            method="cancel_subscription",
            name="Cancel Subscription",
            description=prompts.CANCEL_SUBSCRIPTION,
            schema=parameters.cancel_subscription_parameters,
            actions={Resource.SUBSCRIPTIONS: {Operation.UPDATE}},
        ),
    )


def create_default_registry() -> ToolRegistry:
    """Create registry with the Stripe tool catalog."""
    return ToolRegistry(create_default_tools())

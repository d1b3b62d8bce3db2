"""
Tool Registry Tests
-------------------
Tests cover:
- Catalog order and uniqueness
- Lookup and UnknownMethod
- Tool action invariants
- Descriptor and LLM schema export
"""

import pytest

from stripe_agent_toolkit.core.errors import UnknownMethod
from stripe_agent_toolkit.tools.registry import (
    Operation, Resource, Tool, ToolRegistry, create_default_tools,
)
from stripe_agent_toolkit.tools.schema import ToolSchema

EXPECTED_METHODS = [
    "create_customer",
    "list_customers",
    "create_product",
    "list_products",
    "create_price",
    "list_prices",
    "create_payment_link",
    "create_invoice",
    "create_invoice_item",
    "finalize_invoice",
    "retrieve_balance",
    "create_refund",
    "cancel_subscription",
]


def _tool(method="noop", actions=None):
    return Tool(
        method=method,
        name=method.replace("_", " ").title(),
        description="",
        schema=ToolSchema(),
        actions=actions if actions is not None else {"customers": {"read"}},
    )


class TestCatalog:

    def test_catalog_order(self, registry):
        assert [t.method for t in registry.list()] == EXPECTED_METHODS

    def test_list_is_stable(self, registry):
        assert registry.list() == registry.list()

    def test_every_tool_has_actions(self, registry):
        for tool in registry:
            assert tool.action_pairs, tool.method

    def test_invoicing_tools_require_customer(self, registry):
        requiring = {t.method for t in registry if t.requires_customer}
        assert requiring == {"create_invoice", "create_invoice_item"}

    def test_actions(self, registry):
        assert dict(registry.lookup("create_customer").actions) == {"customers": frozenset({"create"})}
        assert dict(registry.lookup("finalize_invoice").actions) == {"invoices": frozenset({"update"})}
        assert dict(registry.lookup("create_payment_link").actions) == {"payment_links": frozenset({"create"})}

    def test_failure_messages(self, registry):
        assert registry.lookup("create_customer").failure_message == "Failed to create customer"
        assert registry.lookup("retrieve_balance").failure_message == "Failed to retrieve balance"
        assert registry.lookup("create_invoice_item").failure_message == "Failed to create invoice item"


class TestLookup:

    def test_lookup_known(self, registry):
        assert registry.lookup("list_prices").name == "List Prices"

    def test_lookup_unknown_raises(self, registry):
        with pytest.raises(UnknownMethod) as excinfo:
            registry.lookup("delete_everything")
        assert excinfo.value.method == "delete_everything"

    def test_get_unknown_returns_none(self, registry):
        assert registry.get("delete_everything") is None

    def test_contains_and_len(self, registry):
        assert "create_refund" in registry
        assert "delete_everything" not in registry
        assert len(registry) == len(EXPECTED_METHODS)


class TestInvariants:

    def test_duplicate_method_rejected(self):
        with pytest.raises(ValueError):
            ToolRegistry([_tool("a"), _tool("a")])

    def test_empty_actions_rejected(self):
        with pytest.raises(ValueError):
            _tool(actions={})
        with pytest.raises(ValueError):
            _tool(actions={"customers": set()})

    def test_unknown_resource_rejected(self):
        with pytest.raises(ValueError):
            _tool(actions={"payouts": {"create"}})

    def test_unknown_operation_rejected(self):
        with pytest.raises(ValueError):
            _tool(actions={"customers": {"delete"}})

    def test_enum_keys_accepted(self):
        tool = _tool(actions={Resource.REFUNDS: {Operation.CREATE}})
        assert dict(tool.actions) == {"refunds": frozenset({"create"})}

    def test_actions_read_only(self, registry):
        tool = registry.lookup("create_customer")
        with pytest.raises(TypeError):
            tool.actions["customers"] = frozenset({"read"})

    def test_default_tools_built_fresh(self):
        assert [t.method for t in create_default_tools()] == EXPECTED_METHODS


class TestExport:

    def test_descriptor_shape(self, registry):
        descriptor = registry.lookup("create_price").to_descriptor()

        assert descriptor["method"] == "create_price"
        assert descriptor["name"] == "Create Price"
        assert "price" in descriptor["description"]
        assert descriptor["parameters"]["required"] == ["product", "unit_amount", "currency"]
        assert descriptor["actions"] == {"prices": ["create"]}

    def test_schemas_for_llm(self, registry):
        schemas = registry.get_schemas_for_llm()

        assert len(schemas) == len(registry)
        assert schemas[0]["function"]["name"] == "create_customer"

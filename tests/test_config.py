"""
Configuration Tests
-------------------
Tests cover:
- YAML and dict loading
- Context built from configuration
- Secret loading from the environment
- Stripe client factory and the toolkit facade
"""

import pytest
import stripe

from stripe_agent_toolkit.api.client import MissingAPIKey, create_stripe_client
from stripe_agent_toolkit.core.context import Context
from stripe_agent_toolkit.core.errors import PermissionDenied
from stripe_agent_toolkit.infra.config import SecretManager, ToolkitConfig
from stripe_agent_toolkit.toolkit import StripeAgentToolkit

CONFIG_YAML = """
actions:
  customers:
    create: true
    read: false
  invoices: [create, update]
context:
  account: acct_yaml
  customer: cus_yaml
timeout_seconds: 12.5
inject_customer: false
"""


class TestToolkitConfig:

    def test_defaults(self):
        config = ToolkitConfig()

        assert config.actions is None
        assert config.timeout_seconds == 30.0
        assert config.inject_customer is True
        assert config.max_network_retries == 0

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "toolkit.yaml"
        path.write_text(CONFIG_YAML)

        config = ToolkitConfig.from_yaml(path)

        assert config.actions == {
            "customers": frozenset({"create"}),
            "invoices": frozenset({"create", "update"}),
        }
        assert config.account == "acct_yaml"
        assert config.customer == "cus_yaml"
        assert config.timeout_seconds == 12.5
        assert config.inject_customer is False

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ToolkitConfig.from_yaml(path) == ToolkitConfig()

    def test_yaml_root_must_be_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- customers\n")

        with pytest.raises(ValueError):
            ToolkitConfig.from_yaml(path)

    def test_unknown_resource_rejected(self):
        with pytest.raises(ValueError):
            ToolkitConfig.from_dict({"actions": {"payouts": ["create"]}})

    def test_invalid_timeout(self):
        with pytest.raises(ValueError):
            ToolkitConfig(timeout_seconds=0)

    def test_inject_customer_must_be_bool(self):
        with pytest.raises(ValueError):
            ToolkitConfig.from_dict({"inject_customer": "false"})

        assert ToolkitConfig.from_dict({"inject_customer": False}).inject_customer is False

    def test_build_context(self):
        config = ToolkitConfig.from_dict({
            "actions": {"balance": ["read"]},
            "context": {"account": "acct_1"},
        })

        context = config.build_context()

        assert isinstance(context, Context)
        assert context.account == "acct_1"
        assert context.customer is None
        assert context.permissions == {"balance": frozenset({"read"})}


class TestContext:

    def test_request_options(self):
        assert Context().request_options() == {}
        assert Context(account="acct_1").request_options() == {"stripe_account": "acct_1"}

    def test_blank_account_is_absent(self):
        assert Context(account="  ").request_options() == {}

    def test_frozen(self):
        context = Context(account="acct_1")
        with pytest.raises(Exception):
            context.account = "acct_2"

    def test_permissions_read_only(self):
        context = Context(permissions={"customers": ["read"]})

        with pytest.raises(TypeError):
            context.permissions["refunds"] = frozenset({"create"})
        assert dict(context.permissions) == {"customers": frozenset({"read"})}

    def test_hashable(self):
        first = Context(account="acct_1", permissions={"customers": ["read"]})
        second = Context(account="acct_1", permissions={"customers": {"read": True}})

        assert first == second
        assert hash(first) == hash(second)
        assert hash(Context()) == hash(Context())

    def test_rejects_unknown_permission(self):
        with pytest.raises(ValueError):
            Context(permissions={"customers": ["destroy"]})

    def test_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            Context(tenant="t_1")


class TestSecrets:

    def test_loads_key_from_environment(self):
        secrets = SecretManager(environ={"STRIPE_SECRET_KEY": "sk_test_123"})

        assert secrets.get("stripe_secret_key") == "sk_test_123"
        assert secrets.list_available() == ["stripe_secret_key"]

    def test_missing_key(self):
        secrets = SecretManager(environ={})

        assert not secrets.has("stripe_secret_key")


class TestClientFactory:

    def test_creates_stripe_client(self):
        client = create_stripe_client("sk_test_123")
        assert isinstance(client, stripe.StripeClient)

    def test_key_from_secrets(self):
        secrets = SecretManager(environ={"STRIPE_SECRET_KEY": "sk_test_env"})
        assert isinstance(create_stripe_client(secrets=secrets), stripe.StripeClient)

    def test_missing_key_raises(self):
        with pytest.raises(MissingAPIKey):
            create_stripe_client(secrets=SecretManager(environ={}))


class TestToolkit:

    def test_configured_permissions_limit_tools(self, stripe_client):
        config = ToolkitConfig.from_dict({"actions": {"customers": ["create", "read"]}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)

        assert [t.method for t in toolkit.get_tools()] == ["create_customer", "list_customers"]
        assert [d["method"] for d in toolkit.describe_tools()] == ["create_customer", "list_customers"]

    def test_run_uses_configured_context(self, stripe_client, stripe_object):
        config = ToolkitConfig.from_dict({"context": {"account": "acct_cfg", "customer": "cus_cfg"}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)
        stripe_client.invoices.create.return_value = stripe_object(
            id="in_1", hosted_invoice_url="https://invoice", customer="cus_cfg", status="draft"
        )

        result = toolkit.run("create_invoice", {})

        stripe_client.invoices.create.assert_called_once_with(
            {"customer": "cus_cfg"}, {"stripe_account": "acct_cfg"}
        )
        assert result["customer"] == "cus_cfg"

    def test_run_enforces_configured_permissions(self, stripe_client):
        config = ToolkitConfig.from_dict({"actions": {"balance": ["read"]}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)

        with pytest.raises(PermissionDenied):
            toolkit.run("create_refund", {"payment_intent": "pi_1"})
        stripe_client.refunds.create.assert_not_called()

    def test_run_context_keeps_configured_permissions(self, stripe_client):
        config = ToolkitConfig.from_dict({"actions": {"customers": ["read"]}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)

        assert [t.method for t in toolkit.get_tools()] == ["list_customers"]
        with pytest.raises(PermissionDenied):
            toolkit.run("create_customer", {"name": "A"}, Context(account="acct_1"))
        stripe_client.customers.create.assert_not_called()

    def test_run_context_cannot_widen_permissions(self, stripe_client):
        config = ToolkitConfig.from_dict({"actions": {"customers": ["read"]}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)
        context = Context(permissions={"customers": ["create", "read"]})

        with pytest.raises(PermissionDenied):
            toolkit.run("create_customer", {"name": "A"}, context)
        stripe_client.customers.create.assert_not_called()

    def test_run_context_overrides_account(self, stripe_client, list_object):
        config = ToolkitConfig.from_dict({"actions": {"customers": ["read"]}, "context": {"account": "acct_cfg"}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)
        stripe_client.customers.list.return_value = list_object([])

        toolkit.run("list_customers", {}, Context(account="acct_1"))

        stripe_client.customers.list.assert_called_once_with({}, {"stripe_account": "acct_1"})

    def test_run_context_can_narrow_permissions(self, stripe_client):
        config = ToolkitConfig.from_dict({"actions": {"customers": ["create", "read"]}})
        toolkit = StripeAgentToolkit(config=config, client=stripe_client)

        with pytest.raises(PermissionDenied):
            toolkit.run("create_customer", {"name": "A"}, Context(permissions={"customers": ["read"]}))
        stripe_client.customers.create.assert_not_called()

    def test_builds_stripe_client(self):
        toolkit = StripeAgentToolkit(secret_key="sk_test_123")
        assert isinstance(toolkit.executor.client, stripe.StripeClient)

"""
Toolkit Test Configuration
--------------------------
Shared fixtures for all tests.

The Stripe client is always a mock; no test reaches the network.
"""

import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from stripe_agent_toolkit.tools.executor import ToolExecutor
from stripe_agent_toolkit.tools.registry import create_default_registry


STRIPE_SERVICES = {
    "customers": ["create", "list"],
    "products": ["create", "list"],
    "prices": ["create", "list"],
    "payment_links": ["create"],
    "invoices": ["create", "finalize_invoice", "retrieve"],
    "invoice_items": ["create"],
    "balance": ["retrieve"],
    "refunds": ["create"],
    "subscriptions": ["cancel"],
}


@pytest.fixture
def stripe_client():
    """
    Mock StripeClient exposing only the services the toolkit uses.

    Unknown attributes raise AttributeError so a typo in an operation
    fails loudly instead of returning another mock.
    """
    client = MagicMock(spec=list(STRIPE_SERVICES))
    for service, methods in STRIPE_SERVICES.items():
        setattr(client, service, MagicMock(spec=methods))
        for method in methods:
            setattr(getattr(client, service), method, MagicMock())
    return client


@pytest.fixture
def registry():
    return create_default_registry()


@pytest.fixture
def executor(stripe_client, registry):
    return ToolExecutor(stripe_client, registry=registry, timeout_seconds=5.0)


@pytest.fixture
def stripe_object():
    """Build attribute-style objects like the SDK returns."""
    def _make(**fields):
        return SimpleNamespace(**fields)
    return _make


@pytest.fixture
def list_object(stripe_object):
    """Build a ListObject-like value with a `data` attribute."""
    def _make(items):
        return stripe_object(data=items, has_more=False)
    return _make

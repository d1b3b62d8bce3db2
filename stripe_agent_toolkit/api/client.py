"""
Stripe Client Factory
---------------------
Builds the Stripe SDK client the executor delegates to.
The API key comes from the caller or the environment and is never
exposed to the agent.
"""

from typing import Optional
import logging

import stripe

from ..infra.config import SecretManager, ToolkitConfig


class MissingAPIKey(RuntimeError):
    """No Stripe API key was supplied or found in the environment."""


def create_stripe_client(
    api_key: Optional[str] = None,
    config: Optional[ToolkitConfig] = None,
    secrets: Optional[SecretManager] = None,
) -> stripe.StripeClient:
    """
    Create a StripeClient.

    Network retries belong to the SDK; the toolkit itself never retries.
    """
    config = config or ToolkitConfig()
    if api_key is None:
        api_key = (secrets or SecretManager()).get("stripe_secret_key")
    if not api_key:
        raise MissingAPIKey("Stripe API key not configured (set STRIPE_SECRET_KEY)")

    logging.getLogger("stripe_agent_toolkit.api").debug(
        f"Creating Stripe client (max_network_retries={config.max_network_retries})"
    )
    return stripe.StripeClient(api_key, max_network_retries=config.max_network_retries)

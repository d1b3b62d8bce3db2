# API module - Stripe SDK client construction
# Secrets come from the environment and never reach the agent

from .client import create_stripe_client, MissingAPIKey

__all__ = ["create_stripe_client", "MissingAPIKey"]

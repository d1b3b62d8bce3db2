"""
Toolkit Configuration
---------------------
Secrets from the environment, everything else from YAML or a dict.

Rules:
- Secrets never in code or config files
- The Stripe key is never logged or handed to the agent

Example YAML:

    actions:
      customers: {create: true, read: true}
      invoices: [create, update]
    context:
      account: acct_123
      customer: cus_123
    timeout_seconds: 30
    inject_customer: true
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Union
import logging
import os

import yaml

from ..core.context import Context
from ..security.permissions import normalize_permissions


@dataclass
class SecretConfig:
    """Configuration for a secret."""
    name: str
    env_var: str
    required: bool = True
    description: str = ""


class SecretManager:
    """
    Loads secrets from environment variables.

    Only names are ever listed or logged, never values.
    """

    REQUIRED_SECRETS: List[SecretConfig] = [
        SecretConfig("stripe_secret_key", "STRIPE_SECRET_KEY", required=True,
                     description="Stripe secret or restricted API key"),
    ]

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._secrets: Dict[str, str] = {}
        self._logger = logging.getLogger("stripe_agent_toolkit.infra.secrets")
        self._load_secrets()

    def _load_secrets(self) -> None:
        for secret in self.REQUIRED_SECRETS:
            value = self._environ.get(secret.env_var)
            if value:
                self._secrets[secret.name] = value
                self._logger.debug(f"Loaded secret: {secret.name}")
            elif secret.required:
                self._logger.warning(f"Missing required secret: {secret.name} ({secret.env_var})")

    def get(self, name: str) -> Optional[str]:
        return self._secrets.get(name)

    def has(self, name: str) -> bool:
        return name in self._secrets

    def list_available(self) -> List[str]:
        """Names of available secrets (not values!)."""
        return list(self._secrets.keys())


@dataclass
class ToolkitConfig:
    """Toolkit configuration."""
    actions: Optional[Dict[str, FrozenSet[str]]] = None  # None allows every tool
    account: Optional[str] = None
    customer: Optional[str] = None
    timeout_seconds: float = 30.0
    inject_customer: bool = True
    max_network_retries: int = 0

    def __post_init__(self):
        self.actions = normalize_permissions(self.actions)
        if not isinstance(self.inject_customer, bool):
            raise ValueError(f"inject_customer must be a boolean, got {self.inject_customer!r}")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_network_retries < 0:
            raise ValueError("max_network_retries must not be negative")

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ToolkitConfig":
        data = dict(data or {})
        context = data.get("context") or {}
        return cls(
            actions=data.get("actions"),
            account=context.get("account"),
            customer=context.get("customer"),
            timeout_seconds=float(data.get("timeout_seconds", 30.0)),
            inject_customer=data.get("inject_customer", True),
            max_network_retries=int(data.get("max_network_retries", 0)),
        )

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ToolkitConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, Mapping):
            raise ValueError(f"Configuration root must be a mapping: {path}")

        logging.getLogger("stripe_agent_toolkit.infra.config").info(f"Loaded configuration from {path}")
        return cls.from_dict(data)

    def build_context(self) -> Context:
        """Per-call context derived from this configuration."""
        return Context(account=self.account, customer=self.customer, permissions=self.actions)

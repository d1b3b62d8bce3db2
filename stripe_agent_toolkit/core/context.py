"""
Call Context
------------
Ambient per-call data handed in by the embedding harness:
the acting connected account, a default customer, and the permission
configuration. Frozen; a dispatch only ever reads it.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..security.permissions import normalize_permissions


class Context(BaseModel):
    """Per-call context for tool dispatch."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    account: Optional[str] = Field(None, description="Connected account to act on behalf of")
    customer: Optional[str] = Field(None, description="Default customer for invoicing tools")
    permissions: Optional[Mapping[str, FrozenSet[str]]] = Field(
        None, description="Resource -> allowed operations; None allows everything"
    )

    @field_validator("account", "customer")
    @classmethod
    def _blank_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

    @field_validator("permissions", mode="before")
    @classmethod
    def _normalize_permissions(cls, value: Any) -> Optional[Dict[str, FrozenSet[str]]]:
        return normalize_permissions(value)

    @field_validator("permissions")
    @classmethod
    def _freeze_permissions(cls, value: Optional[Mapping[str, FrozenSet[str]]]) -> Optional[Mapping[str, FrozenSet[str]]]:
        if value is None:
            return None
        return MappingProxyType(dict(value))

    def __hash__(self) -> int:
        permissions = None if self.permissions is None else frozenset(self.permissions.items())
        return hash((self.account, self.customer, permissions))

    def request_options(self) -> Dict[str, str]:
        """Stripe request options carrying the account scoping directive."""
        if self.account:
            return {"stripe_account": self.account}
        return {}

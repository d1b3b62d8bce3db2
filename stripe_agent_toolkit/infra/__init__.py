# Infrastructure module - logging and configuration

from .logging import (
    get_logger, configure_logging, reset_logging,
    CallContext, get_call_id, generate_call_id,
)
from .config import ToolkitConfig, SecretManager, SecretConfig

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "reset_logging",
    "CallContext",
    "get_call_id",
    "generate_call_id",
    # Configuration
    "ToolkitConfig",
    "SecretManager",
    "SecretConfig",
]

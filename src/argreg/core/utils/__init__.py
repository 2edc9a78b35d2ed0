"""Shared utility helpers used across the core library."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    TokenMaskFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_flag_name,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "TokenMaskFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "ensure_flag_name",
    "validate_arguments",
    "ParamValidationError",
]

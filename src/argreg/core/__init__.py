"""Entry point for the core library components."""

from __future__ import annotations

from .options import (
    ArgRegError,
    BoolVar,
    DefaultTypeMismatchError,
    DuplicateFlagError,
    HelpRequested,
    IntVar,
    InvalidFlagError,
    ModifierError,
    Opt,
    OptionKind,
    ParseError,
    RegistrationError,
    TextVar,
    UnsupportedTypeError,
    Var,
    create_var,
)
from .utils import (
    RuntimeConfig,
    configure,
    configure_logging,
    get_config,
    get_logger,
)

__all__ = [
    "ArgRegError",
    "BoolVar",
    "DefaultTypeMismatchError",
    "DuplicateFlagError",
    "HelpRequested",
    "IntVar",
    "InvalidFlagError",
    "ModifierError",
    "Opt",
    "OptionKind",
    "ParseError",
    "RegistrationError",
    "TextVar",
    "UnsupportedTypeError",
    "Var",
    "create_var",
    "RuntimeConfig",
    "configure",
    "configure_logging",
    "get_config",
    "get_logger",
]

"""Option kinds, bound variables, descriptors and the shared exceptions."""
from .exceptions import (
    ArgRegError,
    RegistrationError,
    UnsupportedTypeError,
    DefaultTypeMismatchError,
    InvalidFlagError,
    DuplicateFlagError,
    ParseError,
    HelpRequested,
    ModifierError,
)
from .kinds import OptionKind
from .variables import (
    Var,
    TextVar,
    BoolVar,
    IntVar,
)
from .kind_registry import (
    VAR_REGISTRY,
    normalize_kind,
    get_var_class,
    kind_of,
    registered_kinds_snapshot,
)
from .var_factory import create_var
from .descriptor import Opt

__all__ = [
    "ArgRegError",
    "RegistrationError",
    "UnsupportedTypeError",
    "DefaultTypeMismatchError",
    "InvalidFlagError",
    "DuplicateFlagError",
    "ParseError",
    "HelpRequested",
    "ModifierError",
    "OptionKind",
    "Var",
    "TextVar",
    "BoolVar",
    "IntVar",
    "VAR_REGISTRY",
    "normalize_kind",
    "get_var_class",
    "kind_of",
    "registered_kinds_snapshot",
    "create_var",
    "Opt",
]

"""Option registry facade, flag engine, modifiers and usage rendering."""
from .engine import (
    ErrorHandling,
    FlagEngine,
)
from .modifiers import (
    Modifier,
    Printer,
    with_usage,
    with_examples,
    with_engine,
    with_printer,
)
from .usage import (
    format_default,
    render_option_lines,
    render_usage,
)
from .argset import ArgSet

__all__ = [
    "ErrorHandling",
    "FlagEngine",
    "Modifier",
    "Printer",
    "with_usage",
    "with_examples",
    "with_engine",
    "with_printer",
    "format_default",
    "render_option_lines",
    "render_usage",
    "ArgSet",
]

"""
Example 00: Registering options, parsing, and printing usage.

Goal:
    Show the usual lifecycle of an ArgSet: construct it from the process
    arguments, register a few options, parse once, and print usage and exit
    with a non-zero status when parsing fails.

Usage:
    python examples/basic/00_quickstart.py --name ada -n 3 --shout
    python examples/basic/00_quickstart.py --help
"""
import sys
from pathlib import Path

# Add src/ to sys.path so the example runs from a plain checkout.
project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from argreg.core.options import BoolVar, HelpRequested, IntVar, ParseError, TextVar
from argreg.facade import ArgSet, with_examples, with_usage


def main(argv=None):
    argset = ArgSet(
        sys.argv[1:] if argv is None else argv,
        with_usage("Usage: quickstart [options]"),
        with_examples("Examples:\n    quickstart --name ada -n 3 --shout"),
    )
    name = argset.add_var(TextVar(), "name", "", "world", "Who to greet")
    times = argset.add_var(IntVar(), "times", "n", 1, "How many greetings to print")
    shout = argset.add_var(BoolVar(), "shout", "s", False, "Upper-case the greeting")

    try:
        argset.parse()
    except HelpRequested:
        return 0
    except ParseError:
        # The engine has already reported the error and printed usage.
        return 2

    greeting = f"hello {name.value}"
    for _ in range(times.value):
        print(greeting.upper() if shout.value else greeting)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line entry point.

This is the caller that owns the exit code: GOOD hands the configuration over
to the read filter, HELP and VERSION exit cleanly, BAD exits with status 1.
"""
import sys

from rich.console import Console
from rich.pretty import pprint

from .faults import console
from .options import version_string
from .outcome import ParseOutcome, parse_arguments


def main(argv=None, /, *, stdout=None, stderr=console):
    result = parse_arguments(sys.argv[1:] if argv is None else argv, console=stderr)

    match result.outcome:
        case ParseOutcome.BAD:
            return 1
        case ParseOutcome.HELP:
            return 0
        case ParseOutcome.VERSION:
            (stdout if stdout is not None else Console()).print(version_string(), highlight=False)
            return 0
        case ParseOutcome.GOOD:
            if result.configuration.verbose:
                pprint(result.configuration, console=stderr, expand_all=True)
            return 0


if __name__ == '__main__':
    sys.exit(main())

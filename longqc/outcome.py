"""
Parse outcome: the single entry point from argv to a configuration.

parse_arguments(argv) always returns a ParseResult; no fault escapes it. The
outcome is decided once, by the first rule that applies:

1. the help flag was reached while scanning        -> HELP    (usage to stderr)
2. scanning failed (unknown flag, bad value, ...)  -> BAD     (one error line to stderr)
3. argv is empty                                   -> HELP    (usage to stderr)
4. --version is present                            -> VERSION
5. input reads are missing or empty                -> BAD     ("Error: input reads are required")
6. otherwise                                       -> GOOD    (configuration assembled)

Scanning is sequential: a help flag met before the first faulty token wins,
a faulty token met before the help flag gives BAD.

Mapping outcomes to exit codes belongs to the caller (see longqc.__main__).
"""
from collections import namedtuple
from enum import Enum

from .configuration import assemble
from .faults import *
from .faults import console
from .layout import configure
from .options import build_parser
from .utils import *


class ParseOutcome(Enum):
    GOOD = "good"
    HELP = "help"
    BAD = "bad"
    VERSION = "version"


ParseResult = namedtuple("ParseResult", ("outcome", "configuration", "fault"), defaults=(None, None))


def parse_arguments(argv, /, *, display=None, console=console, prog=None):
    """
    Turn argv (program name excluded) into a ParseResult.

    Parameters
    - argv: iterable of raw command-line tokens.
    - display: DisplayInfo providing the terminal width for the help layout;
      defaults to the active terminal.
    - console: rich Console receiving help text and diagnostics (stderr by default).
    - prog: program name shown in help.

    Returns
    - ParseResult(outcome, configuration, fault): configuration is set only for
      GOOD, fault only for BAD.
    """
    argv = list(argv)
    parser = namespace = fault = Unset
    helped = False

    try:
        parser = build_parser(configure(display), prog=prog)
        namespace = parser.parse(argv)
    except HelpRequested:
        helped = True
    except ArgumentsException as exception:
        fault = exception

    if helped:
        outcome = ParseOutcome.HELP
    elif fault is not Unset:
        outcome = ParseOutcome.BAD
    elif not argv:
        outcome = ParseOutcome.HELP
    elif namespace.present(parser["version"]):
        outcome = ParseOutcome.VERSION
    elif not namespace.value(parser.positional):
        outcome = ParseOutcome.BAD
        fault = MissingRequiredArgument(
            "input reads are required",
            code=FaultCode.MISSING_INPUT_READS,
        )
    else:
        outcome = ParseOutcome.GOOD

    match outcome:
        case ParseOutcome.HELP:
            parser.print_help(console)
            return ParseResult(outcome)
        case ParseOutcome.BAD:
            report(fault, console=console)
            return ParseResult(outcome, fault=fault)
        case ParseOutcome.VERSION:
            return ParseResult(outcome)
        case ParseOutcome.GOOD:
            return ParseResult(outcome, assemble(parser, namespace))


__all__ = (
    "ParseOutcome",
    "ParseResult",
    "parse_arguments",
)

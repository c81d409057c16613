"""
LongQC faults (command-line errors) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing parse failure,
  grouped by domain so logs and searches stay predictable.
- ArgumentsException: base type carrying a message plus frozen options, able
  to render itself as a single rich line ("Error: ...").
- ParseSyntaxError / ValidationError / TypeCoercionError / MissingRequiredArgument:
  the four failures a parse can end with.
- HelpRequested: control signal raised by the help flag while scanning.
- report(): the single place a fault reaches the diagnostics console.

Integration
- The scanner raises faults; longqc.outcome catches every one of them and
  turns it into a ParseOutcome. No fault crosses the package's public
  boundary as a raised exception.
"""
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - scanning (2110x): UNKNOWN_FLAG, MISSING_VALUE, UNEXPECTED_VALUE, UNEXPECTED_POSITIONAL
    - declarations (2120x): DUPLICATED_TOKEN, MALFORMED_TOKEN, DUPLICATED_POSITIONAL
    - values (2130x): INVALID_VALUE_TYPE
    - requirements (2140x): MISSING_INPUT_READS
    """
    # --- scanning errors ---
    UNKNOWN_FLAG                = 21101
    MISSING_VALUE               = 21102
    UNEXPECTED_VALUE            = 21103
    UNEXPECTED_POSITIONAL       = 21104

    # --- declaration errors ---
    DUPLICATED_TOKEN            = 21201
    MALFORMED_TOKEN             = 21202
    DUPLICATED_POSITIONAL       = 21203

    # --- value errors ---
    INVALID_VALUE_TYPE          = 21301

    # --- requirement errors ---
    MISSING_INPUT_READS         = 21401

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ArgumentsException(Exception):
    def __init__(self, message="", /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        styles = defaultdict(str, {
            "error-label": "bold #FF4DA6",
            "error-message": "#C8C8D0",
        } | getattr(__import__("__main__"), "__styles__", {}))

        return Text.assemble(
            ("Error", styles["error-label"]),
            ": ",
            (str(self.message), styles["error-message"]),
        )

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})

    @property
    def code(self):
        return self.options.get("code")


class ParseSyntaxError(ArgumentsException): ...
class ValidationError(ArgumentsException): ...
class MissingRequiredArgument(ArgumentsException): ...


class TypeCoercionError(ArgumentsException):
    """
    raised by a value reader that rejects the raw text of an option.

    the option's display name and the offending raw value are kept both in the
    message and as attributes.
    """

    def __init__(self, message="", /, **options):
        options.setdefault("code", FaultCode.INVALID_VALUE_TYPE)
        super().__init__(message, **options)

    @classmethod
    def of(cls, name, value, /):
        return cls(
            "argument '%s' received invalid value type '%s'" % (name, value),
            name=name,
            value=value,
        )

    @property
    def name(self):
        return self.options.get("name")

    @property
    def value(self):
        return self.options.get("value")


class HelpRequested(Exception):
    """
    control signal raised when the help flag is scanned; never reported as an error.
    """


def report(fault, /, *, console=console):
    """
    write one human-readable line for a fault to the diagnostics console.
    """
    if not isinstance(fault, ArgumentsException):
        raise TypeError("report() argument must be an arguments exception")
    console.print(fault, soft_wrap=True, highlight=False)


__all__ = (
    "FaultCode",
    "ArgumentsException",
    "ParseSyntaxError",
    "ValidationError",
    "TypeCoercionError",
    "MissingRequiredArgument",
    "HelpRequested",
    "report",
)

"""
Value readers: turn the raw text of an option into its declared type.

Each reader is one member of a closed set, tagged by ReaderKind, and honours
the same contract:

    reader.parse(name, raw) -> value      # or raises TypeCoercionError

where 'name' is the option's display name (used in the diagnostic) and 'raw'
is the exact text taken from argv. Readers hold no state and have no side
effects; 'default' is the zero value reported for an option that was never
supplied.

Members
- STRING:  passthrough, always succeeds.
- INTEGER: signed integer literal ("42", "-7", "+3") within the signed
           64-bit range.
- DOUBLE:  strict reader. Every character must be a digit or '.', and only
           then is the text handed to float(). Signs, exponents and
           whitespace are rejected, and so is any value beyond the range of a
           double.
- FLAG:    presence only; consumes no text.
"""
import math
import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import final

from .faults import TypeCoercionError

_DOUBLE_CHARACTERS = frozenset("0123456789.")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_INTEGER_RANGE = range(-2 ** 63, 2 ** 63)


class ReaderKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    FLAG = "flag"


class Reader(ABC):
    """
    Base of the closed reader set; subclasses are sealed and instantiated once.
    """
    kind = None
    default = None
    takes_value = True

    def __init_subclass__(cls, **options):
        super().__init_subclass__(**options)
        if Reader not in cls.__bases__:
            raise TypeError("type %r is not an acceptable base type" % cls.__name__)

    @abstractmethod
    def parse(self, name, raw, /):
        ...

    def __repr__(self):
        return "%s-reader" % self.kind.value


@final
class StringReader(Reader):
    kind = ReaderKind.STRING
    default = ""

    def parse(self, name, raw, /):
        return raw


@final
class IntegerReader(Reader):
    kind = ReaderKind.INTEGER
    default = 0

    def parse(self, name, raw, /):
        if not _INTEGER_PATTERN.fullmatch(raw):
            raise TypeCoercionError.of(name, raw)
        try:
            value = int(raw)
        except ValueError:
            # past the interpreter's digit limit, far outside the range anyway
            raise TypeCoercionError.of(name, raw) from None
        if value not in _INTEGER_RANGE:
            raise TypeCoercionError.of(name, raw)
        return value


@final
class DoubleReader(Reader):
    kind = ReaderKind.DOUBLE
    default = 0.0

    def parse(self, name, raw, /):
        if not set(raw) <= _DOUBLE_CHARACTERS:
            raise TypeCoercionError.of(name, raw)
        try:
            # the whole text must be one number: "1.2.3" is rejected, not read as 1.2
            value = float(raw)
        except ValueError:
            raise TypeCoercionError.of(name, raw) from None
        if math.isinf(value):
            raise TypeCoercionError.of(name, raw)
        return value


@final
class FlagReader(Reader):
    kind = ReaderKind.FLAG
    default = False
    takes_value = False

    def parse(self, name, raw=None, /):
        return True


STRING = StringReader()
INTEGER = IntegerReader()
DOUBLE = DoubleReader()
FLAG = FlagReader()

READERS = {reader.kind: reader for reader in (STRING, INTEGER, DOUBLE, FLAG)}


__all__ = (
    "ReaderKind",
    "Reader",
    "StringReader",
    "IntegerReader",
    "DoubleReader",
    "FlagReader",
    "STRING",
    "INTEGER",
    "DOUBLE",
    "FLAG",
    "READERS",
)

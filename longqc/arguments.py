r"""
LongQC argument declarations and groups.

Overview
- Specs
  • Positional: the single bare argument (the input reads).
  • ValueFlag: named argument carrying a value, converted by a reader from longqc.readers.
  • Flag: named, presence-only switch (e.g., --verbose); with helper=True it requests help.
- Group: titled, ordered cluster of specs used for help layout.

Introspection & representation
- ArgumentType metaclass provides stable __repr__/__rich_repr__ and exposes the
  fields listed in __introspectable__ as read-only properties (see utils.mirror).

Metadata (sanitized on construction)
- name: display name, non-empty after trimming (e.g., "min score").
- help: short description, non-empty after trimming.
- tokens: flag spellings without dashes ("min_score", "h"). A one-character token
  is shown and matched as a short flag (-h); longer ones as long flags (--min_score).
  Tokens must match r"[^\W\d]\w*" and be unique within a spec.

Quick example:
    >>> from longqc.readers import DOUBLE
    >>> ValueFlag("min score", "reads scoring lower are discarded", ("min_score",), DOUBLE).switches
    ('--min_score',)
"""
import functools
import operator
import re

from .faults import FaultCode, ValidationError
from .readers import Reader, FLAG, STRING
from .utils import *

_TOKEN_PATTERN = re.compile(r"[^\W\d]\w*")


def switch(token, /):
    """
    Spell a dash-less token the way it appears on the command line.
    """
    return ("-" if len(token) == 1 else "--") + token


class ArgumentType(type):
    """
    Metaclass that turns specs into introspectable descriptors.

    Responsibilities
    - Derive __typename__ from the class name (camel-case split with hyphens),
      used in messages and help output.
    - Expose selected fields as read-only properties via mirror() for every
      name listed in __introspectable__.
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: normalize and validate the 'name' and 'help' fields shared by every spec.

    Raises
    - TypeError: if a field is not a string.
    - ValueError: if a field is empty after trimming.
    """
    for field in ("name", "help"):
        if not isinstance(value := metadata[field], str):
            raise TypeError(f"{cls.__typename__} '{field}' must be a string")
        elif not (value := value.strip()):
            raise ValueError(f"{cls.__typename__} '{field}' cannot be empty")
        metadata[field] = value


def _sanitize_named_metadata(cls, metadata, /):
    """
    Internal: validate the tokens of a named spec (ValueFlag, Flag).

    Malformed or repeated tokens are declaration faults and raise ValidationError,
    the same fault the table raises when two specs claim one token.
    """
    tokens = []
    if isinstance(metadata["tokens"], str):
        raise TypeError(f"{cls.__typename__} 'tokens' must be an iterable of strings, not a string")
    for token in metadata["tokens"]:
        if not isinstance(token, str):
            raise TypeError(f"{cls.__typename__} tokens must be strings")
        elif not _TOKEN_PATTERN.fullmatch(token):
            raise ValidationError(
                "argument '%s' declares malformed flag token %r" % (metadata["name"], token),
                code=FaultCode.MALFORMED_TOKEN,
                token=token,
            )
        elif token in tokens:
            raise ValidationError(
                "argument '%s' declares flag token %r twice" % (metadata["name"], token),
                code=FaultCode.DUPLICATED_TOKEN,
                token=token,
            )
        tokens.append(token)

    if not tokens:
        raise TypeError(f"{cls.__typename__} must specify at least one token")
    metadata["tokens"] = tuple(tokens)


class Positional(metaclass=ArgumentType):
    """
    The bare (non-flag) argument; always read as a string.
    """

    __introspectable__ = (
        "name",
        "help",
        "reader",
    )

    def __init__(self, name, help, /):
        metadata = {"name": name, "help": help}
        _sanitize_metadata(type(self), metadata)
        self._name = metadata["name"]
        self._help = metadata["help"]
        self._reader = STRING

    @property
    def label(self):
        return self.name


class ValueFlag(metaclass=ArgumentType):
    """
    Named argument carrying one value.

    The reader decides how the raw text is converted (see longqc.readers); it
    must take a value, so the presence-only FLAG reader is rejected here.
    """

    __introspectable__ = (
        "name",
        "help",
        "tokens",
        "reader",
    )

    def __init__(self, name, help, tokens, reader, /):
        metadata = {"name": name, "help": help, "tokens": tokens}
        _sanitize_metadata(type(self), metadata)
        _sanitize_named_metadata(type(self), metadata)
        if not isinstance(reader, Reader):
            raise TypeError(f"{type(self).__typename__} 'reader' must be a reader")
        elif not reader.takes_value:
            raise TypeError(f"{type(self).__typename__} 'reader' must take a value")
        self._name = metadata["name"]
        self._help = metadata["help"]
        self._tokens = metadata["tokens"]
        self._reader = reader

    @property
    def switches(self):
        return tuple(map(switch, self.tokens))

    @property
    def label(self):
        return "%s [%s]" % (", ".join(self.switches), self.name)


class Flag(metaclass=ArgumentType):
    """
    Named, presence-only switch.

    Highlights
    - Its presence is the signal; no value text is consumed.
    - helper=True marks the help flag: scanning it stops the parse and requests help.
    """

    __introspectable__ = (
        "name",
        "help",
        "tokens",
        "reader",
        "helper",
    )

    def __init__(self, name, help, tokens, /, *, helper=False):
        metadata = {"name": name, "help": help, "tokens": tokens}
        _sanitize_metadata(type(self), metadata)
        _sanitize_named_metadata(type(self), metadata)
        self._name = metadata["name"]
        self._help = metadata["help"]
        self._tokens = metadata["tokens"]
        self._reader = FLAG
        self._helper = bool(helper)

    @property
    def switches(self):
        return tuple(map(switch, self.tokens))

    @property
    def label(self):
        return ", ".join(self.switches)


class Group:
    """
    Titled cluster of specs; insertion order is display order.

    When newline is True the help layout leaves a blank line before the title.
    """

    __slots__ = ("_title", "_newline", "_arguments")

    title = mirror("title")
    newline = mirror("newline")
    arguments = mirror("arguments")

    def __init__(self, title, /, *, newline=False):
        if not isinstance(title, str):
            raise TypeError("group 'title' must be a string")
        elif not (title := title.strip()):
            raise ValueError("group 'title' cannot be empty")
        self._title = title
        self._newline = bool(newline)
        self._arguments = []

    def _append(self, argument, /):
        self._arguments.append(argument)

    def __iter__(self):
        return iter(tuple(self._arguments))

    def __len__(self):
        return len(self._arguments)

    def __repr__(self):
        return "group(title=%r, newline=%r, arguments=%r)" % (self._title, self._newline, self._arguments)


__all__ = (
    "switch",
    "Positional",
    "ValueFlag",
    "Flag",
    "Group",
)

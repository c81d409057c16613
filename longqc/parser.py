"""
LongQC argument table: registration, scanning, and help rendering.

What this module provides
- ArgumentParser: declarative registry of every accepted argument, grouped for
  help display, able to scan a raw argv into a Namespace and to render its own
  terminal-width-adaptive help.
- Namespace: the scan result, recording for each spec whether it was supplied
  and the converted value (the reader's zero value when it was not).

Scanning rules
- '--name value' (single-space long separator) and '--name=value' are both accepted.
- A value flag always consumes the next token verbatim, even one starting with '-'.
- A value flag supplied twice keeps the last value.
- '--' ends flag scanning; every later token is positional.
- A lone '-' is a positional (the usual stdin spelling).
- The help flag stops the scan immediately by raising HelpRequested.

Faults
- ParseSyntaxError: unknown flag, missing value, value given to a presence-only
  flag, or a second bare argument.
- ValidationError: a declaration reuses a token or declares a second positional.
- TypeCoercionError: a reader rejected a value (re-raised with its position).
"""
import copy
import re
from collections import defaultdict, deque

from rich.text import Text

from .arguments import Positional, ValueFlag, Flag, Group, switch
from .faults import *
from .faults import console
from .layout import HelpParams
from .utils import *

_SWITCH_PATTERN = re.compile(r"(?P<input>--?[^\W\d]\w*)(=(?P<value>.*))?", re.DOTALL)


class Namespace:
    """
    Presence and values collected by one scan.

    Lookups are keyed by spec object. value() never fails: an argument that was
    not supplied reports its reader's zero value, so presence and value can be
    read independently.
    """

    def __init__(self):
        self._values = {}

    def _store(self, argument, value, /):
        self._values[argument] = value

    def present(self, argument, /):
        return argument in self._values

    def value(self, argument, /):
        try:
            return self._values[argument]
        except KeyError:
            return argument.reader.default

    def __contains__(self, argument):
        return self.present(argument)

    def __len__(self):
        return len(self._values)

    def __rich_repr__(self):
        for argument, value in self._values.items():
            yield argument.name, value

    def __repr__(self):
        return "namespace(%s)" % ", ".join("%s=%r" % (argument.name, value) for argument, value in self._values.items())


class ArgumentParser:
    """
    Registry of the positional argument and every flag, organized into groups.

    Parameters
    - description: paragraph printed under the program line in help.
    - epilog: paragraph printed at the very end of help.
    - prog: program name; defaults to __main__.__prog__ or "longqc".
    - params: HelpParams controlling the help layout (see longqc.layout.configure).
    """

    def __init__(self, description=Unset, epilog=Unset, *, prog=Unset, params=Unset):
        self.description = coalesce(description)
        self.epilog = coalesce(epilog)
        self.prog = coalesce(prog, getattr(__import__("__main__"), "__prog__", "longqc"))
        self.params = coalesce(params, HelpParams())

        self._positional = None
        self._switches = {}
        self._toplevel = []
        self._groups = []

    # ---- registration -------------------------------------------------------

    def add_group(self, title, /, *, newline=False):
        group = Group(title, newline=newline)
        self._groups.append(group)
        return group

    def register_positional(self, name, help, /):
        if self._positional is not None:
            raise ValidationError(
                "argument '%s' cannot be positional: '%s' already is" % (name, self._positional.name),
                code=FaultCode.DUPLICATED_POSITIONAL,
            )
        self._positional = Positional(name, help)
        self._toplevel.append(self._positional)
        return self._positional

    def register_flag(self, group, name, help, tokens, reader, /):
        return self._register(group, ValueFlag(name, help, tokens, reader))

    def register_boolean_flag(self, group, name, help, tokens, /):
        return self._register(group, Flag(name, help, tokens))

    def register_help_flag(self, name, help, tokens, /):
        return self._register(None, Flag(name, help, tokens, helper=True))

    def _register(self, group, argument, /):
        if group is not None and group not in self._groups:
            raise TypeError("argument group must be created by this parser")

        for spelling in argument.switches:
            if (owner := self._switches.get(spelling)) is not None:
                raise ValidationError(
                    "flag %r of argument '%s' is already used by argument '%s'" % (spelling, argument.name, owner.name),
                    code=FaultCode.DUPLICATED_TOKEN,
                    token=spelling,
                )
        self._switches.update(dict.fromkeys(argument.switches, argument))

        if group is None:
            self._toplevel.append(argument)
        else:
            group._append(argument)
        return argument

    def __getitem__(self, key):
        """
        Look up a spec by dash-less token ("min_score", "h") or by the positional's name.
        """
        if self._positional is not None and key == self._positional.name:
            return self._positional
        return self._switches[switch(key)]

    @property
    def positional(self):
        return self._positional

    @property
    def groups(self):
        return tuple(self._groups)

    # ---- scanning -----------------------------------------------------------

    def _resolve_token(self, token, index, /):
        """
        split a flag-looking token into (spec, spelling, inline value or None).
        """
        if not (match := _SWITCH_PATTERN.fullmatch(token)) or match["input"] not in self._switches:
            raise ParseSyntaxError(
                "unknown flag '%s'" % (match["input"] if match else token),
                code=FaultCode.UNKNOWN_FLAG,
                token=token,
                index=index,
            )
        return self._switches[match["input"]], match["input"], match["value"]

    def parse(self, argv, /):
        """
        Scan argv (program name excluded) into a Namespace.

        Raises HelpRequested when the help flag is reached, or the first fault met.
        """
        namespace = Namespace()
        tokens = deque(argv)
        terminated = False
        index = 0

        while tokens:
            token = tokens.popleft()
            index += 1

            if not terminated and token == "--":
                terminated = True
                continue

            if not terminated and token.startswith("-") and token != "-":
                argument, input, value = self._resolve_token(token, index)

                if isinstance(argument, Flag):
                    if value is not None:
                        raise ParseSyntaxError(
                            "flag '%s' does not take a value" % input,
                            code=FaultCode.UNEXPECTED_VALUE,
                            token=token,
                            index=index,
                        )
                    if argument.helper:
                        raise HelpRequested(input)
                    namespace._store(argument, argument.reader.parse(argument.name))
                    continue

                if value is None:
                    if not tokens:
                        raise ParseSyntaxError(
                            "flag '%s' requires a value but received none" % input,
                            code=FaultCode.MISSING_VALUE,
                            token=token,
                            index=index,
                        )
                    value = tokens.popleft()
                    index += 1

                try:
                    namespace._store(argument, argument.reader.parse(argument.name, value))
                except TypeCoercionError as fault:
                    raise copy.replace(fault, token=input, index=index) from None
                continue

            if self._positional is None or self._positional in namespace:
                raise ParseSyntaxError(
                    "unexpected argument '%s'" % token,
                    code=FaultCode.UNEXPECTED_POSITIONAL,
                    token=token,
                    index=index,
                )
            namespace._store(self._positional, self._positional.reader.parse(self._positional.name, token))

        return namespace

    # ---- help -----------------------------------------------------------------

    def render_help(self, console=console):
        """
        Build the help text as a single rich Text.

        Layout
        - program line at prog_indent, description at description_indent
        - "OPTIONS:" heading, then top-level arguments at flag_indent
        - each group: optional blank line, title at group_indent, arguments at
          group_indent + flag_indent
        - descriptions start at help_indent and wrap to the configured width
        - epilog last

        Palette keys (override through a __styles__ mapping in __main__)
        - program-name, usage-section, description-section, epilog-section
        - group-label, flag-name, argument-description
        """
        styles = defaultdict(str, {
            "program-name": "bold #FF4D94",
            "usage-section": "bold #36C5F0",
            "description-section": "italic #A3A3A3",
            "epilog-section": "#737373",
            "group-label": "bold #FFFFFF",
            "flag-name": "bold #00E6FF",
            "argument-description": "#9CA3AF",
        } | getattr(__import__("__main__"), "__styles__", {}))

        params = self.params
        width = params.width

        def paragraph(content, indent, style):
            section = Text()
            for line in Text(content, style).wrap(console, max(width - indent, 10)):
                section.append(" " * indent).append(line).append("\n")
            return section

        def entry(argument, indent):
            section = Text(" " * indent).append(argument.label, styles["flag-name"])
            wrapped = Text(argument.help, styles["argument-description"]).wrap(
                console, max(width - params.help_indent, 10)
            )
            if len(section) + params.gutter > params.help_indent:
                section.append("\n").append(" " * params.help_indent)
            else:
                section.append(" " * (params.help_indent - len(section)))
            for number, line in enumerate(wrapped):
                if number:
                    section.append("\n").append(" " * params.help_indent)
                section.append(line)
            return section.append("\n")

        renders = Text()

        usage = Text(" " * params.prog_indent).append(self.prog, styles["program-name"])
        usage.append(" {OPTIONS}", styles["usage-section"])
        if self._positional is not None:
            usage.append(" [%s]" % self._positional.name, styles["usage-section"])
        renders.append(usage).append("\n\n")

        if self.description:
            renders.append(paragraph(self.description, params.description_indent, styles["description-section"]))
            renders.append("\n")

        renders.append(" " * params.prog_indent).append("OPTIONS:", styles["group-label"]).append("\n\n")

        for argument in self._toplevel:
            renders.append(entry(argument, params.flag_indent))

        for group in self._groups:
            if group.newline:
                renders.append("\n")
            renders.append(paragraph(group.title, params.group_indent, styles["group-label"]))
            for argument in group:
                renders.append(entry(argument, params.group_indent + params.flag_indent))

        if params.show_terminator:
            renders.append(Text(" " * params.flag_indent).append("\"--\"", styles["flag-name"]))
            renders.append(" " * max(params.help_indent - params.flag_indent - 4, params.gutter))
            renders.append("this option can be used to separate flag options from positional options")
            renders.append("\n")

        if self.epilog:
            renders.append("\n").append(paragraph(self.epilog, params.description_indent, styles["epilog-section"]))

        renders.rstrip()
        return renders

    def print_help(self, console=console):
        console.print(self.render_help(console), soft_wrap=True, highlight=False)


__all__ = (
    "Namespace",
    "ArgumentParser",
)

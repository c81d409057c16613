"""
Terminal layout: display width and help indentation.

The help text adapts to the terminal it is printed on. The width query is the
only OS-level side effect of the whole parse, so it sits behind a tiny
capability (DisplayInfo.width) that tests replace with FixedDisplay.

Mapping (indent_for)
- width > 120       -> 4
- 80 < width <= 120 -> 3
- 60 < width <= 80  -> 2
- width <= 60       -> 1
"""
from typing import Protocol, runtime_checkable

from rich.console import Console

DEFAULT_WIDTH = 80
DEFAULT_HELP_INDENT = 40


@runtime_checkable
class DisplayInfo(Protocol):
    def width(self) -> int: ...


class ConsoleDisplay:
    """
    Width of the active terminal as seen by rich; never raises.
    """

    def __init__(self, console: Console | None = None, default: int = DEFAULT_WIDTH) -> None:
        self._console = console
        self._default = default

    def width(self) -> int:
        try:
            console = self._console if self._console is not None else Console()
            width = console.size.width
        except (OSError, ValueError):
            return self._default
        return width if width > 0 else self._default


class FixedDisplay:
    def __init__(self, width: int) -> None:
        if not isinstance(width, int) or width < 1:
            raise ValueError("FixedDisplay() width must be a positive integer")
        self._width = width

    def width(self) -> int:
        return self._width

    def __repr__(self):
        return "FixedDisplay(%d)" % self._width


class HelpParams:
    """
    Settings consumed by the help renderer.

    Fields
    - show_terminator: list the '--' terminator in help.
    - prog_indent / description_indent: columns of the program line and description.
    - width: total columns available.
    - flag_indent: columns before each flag (added to group_indent inside a group).
    - group_indent: columns before each group title.
    - help_indent: column where descriptions start; clamped to half the width.
    - gutter: minimum spaces between a flag column and its description.
    """

    __slots__ = (
        "show_terminator",
        "prog_indent",
        "description_indent",
        "width",
        "flag_indent",
        "group_indent",
        "help_indent",
        "gutter",
    )

    def __init__(
            self,
            *,
            show_terminator=True,
            prog_indent=2,
            description_indent=4,
            width=DEFAULT_WIDTH,
            flag_indent=6,
            group_indent=2,
            help_indent=DEFAULT_HELP_INDENT,
            gutter=1,
    ):
        self.show_terminator = show_terminator
        self.prog_indent = prog_indent
        self.description_indent = description_indent
        self.width = width
        self.flag_indent = flag_indent
        self.group_indent = group_indent
        self.help_indent = min(help_indent, width // 2)
        self.gutter = gutter

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other):
        if not isinstance(other, HelpParams):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self):
        return "HelpParams(%s)" % ", ".join("%s=%r" % item for item in self.as_dict().items())


def indent_for(width: int) -> int:
    if width > 120:
        return 4
    elif width > 80:
        return 3
    elif width > 60:
        return 2
    else:
        return 1


def configure(display: DisplayInfo | None = None) -> HelpParams:
    """
    Build the help renderer settings for the given display.

    Everything is derived from the single width query: descriptions start at
    column 0, the program line is flush left, and both flags and group titles
    are indented according to indent_for(width).
    """
    width = (display if display is not None else ConsoleDisplay()).width()
    indent = indent_for(width)
    return HelpParams(
        show_terminator=False,
        prog_indent=0,
        description_indent=0,
        width=width,
        flag_indent=indent,
        group_indent=indent,
    )


__all__ = (
    "DEFAULT_WIDTH",
    "DisplayInfo",
    "ConsoleDisplay",
    "FixedDisplay",
    "HelpParams",
    "indent_for",
    "configure",
)

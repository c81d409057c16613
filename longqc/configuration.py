"""
Configuration assembly: from a successful scan to the object handed to the filter.

For every optional argument both facts are recorded independently: whether it
was supplied ('set') and its value (the reader's zero value when it was not).
The two Illumina reference flags are folded into one ordered list holding only
the files that were actually given, in declaration order.

    >>> config.min_score, config.min_score_set
    (0.0, False)
    >>> config.illumina_reads
    ['r2.fastq']
"""
from collections import namedtuple

from .utils import *

Setting = namedtuple("Setting", ("value", "set"))

SETTINGS = (
    "min_score",
    "target_bases",
    "keep_percent",
    "assembly",
    "min_length",
    "min_mean_q",
    "min_window_q",
    "length_weight",
    "mean_q_weight",
    "window_q_weight",
    "window_size",
    "verbose",
)

ILLUMINA_READS = (
    "illumina_reads_1",
    "illumina_reads_2",
)


class Configuration:
    """
    Read-only, presence-annotated configuration for the read filter.

    Attributes
    - input_reads: path of the long reads to filter (never empty).
    - illumina_reads: 0, 1 or 2 reference read files, first flag first.
    - settings: mapping of option name to Setting(value, set).
    - <name> / <name>_set: shortcuts for settings[<name>].value / .set.
    """

    input_reads = mirror("input_reads")
    illumina_reads = mirror("illumina_reads")
    settings = mirror("settings")

    def __init__(self, input_reads, settings, illumina_reads=(), /):
        if not isinstance(input_reads, str) or not input_reads:
            raise ValueError("configuration 'input_reads' must be a non-empty string")
        if missing := set(SETTINGS) - set(settings):
            raise ValueError("configuration is missing settings: %s" % ", ".join(sorted(missing)))
        self._input_reads = input_reads
        self._settings = {name: Setting(*settings[name]) for name in SETTINGS}
        self._illumina_reads = list(illumina_reads)

    def as_dict(self):
        """
        Plain-data view for collaborators that do not want to depend on this class.
        """
        return {
            "input_reads": self._input_reads,
            "illumina_reads": list(self._illumina_reads),
        } | {name: setting._asdict() for name, setting in self._settings.items()}

    def __eq__(self, other):
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __rich_repr__(self):
        yield "input_reads", self._input_reads
        yield "illumina_reads", self._illumina_reads
        for name, setting in self._settings.items():
            if setting.set:
                yield name, setting.value

    def __repr__(self):
        return "configuration(%s)" % ", ".join("%s=%r" % item for item in self.__rich_repr__())


def _value(name, /):
    @rename(name)
    def getter(self):
        return self._settings[name].value

    return property(getter)


def _presence(name, /):
    @rename(name + "_set")
    def getter(self):
        return self._settings[name].set

    return property(getter)


for _name in SETTINGS:
    setattr(Configuration, _name, _value(_name))
    setattr(Configuration, _name + "_set", _presence(_name))
del _name


def assemble(parser, namespace, /):
    """
    Collect presence and value of every optional argument from a finished scan.

    Absence never prevents reading a value: an argument that was not supplied
    contributes its zero value with set=False.
    """
    settings = {}
    for name in SETTINGS:
        argument = parser[name]
        settings[name] = Setting(namespace.value(argument), namespace.present(argument))

    illumina_reads = []
    for name in ILLUMINA_READS:
        if namespace.present(argument := parser[name]):
            illumina_reads.append(namespace.value(argument))

    return Configuration(namespace.value(parser.positional), settings, illumina_reads)


__all__ = (
    "Setting",
    "SETTINGS",
    "Configuration",
    "assemble",
)

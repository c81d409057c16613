"""
The LongQC command line: every argument the tool accepts, in display order.
"""
from . import __version__
from .parser import ArgumentParser
from .readers import DOUBLE, INTEGER, STRING

DESCRIPTION = "LongQC: a quality filtering tool for Nanopore and PacBio reads"
EPILOG = "For more information, go to: https://github.com/rrwick/LongQC"

# (title, newline before title, ((display name, help, token, reader or None for a boolean flag), ...))
GROUPS = (
    ("output thresholds:", False, (
        ("min score", "reads with a final score lower than this will be discarded", "min_score", DOUBLE),
        ("target bases", "keep only the best reads up to this many total bases", "target_bases", INTEGER),
        ("keep percent", "keep only this fraction of the best reads", "keep_percent", DOUBLE),
    )),
    ("external references (if provided, read quality will be determined using these instead of from the "
     "Phred scores):", True, (
        ("assembly", "reference assembly in FASTA format", "assembly", STRING),
        ("illumina reads 1", "reference Illumina reads in FASTQ format", "illumina_reads_1", STRING),
        ("illumina reads 2", "reference Illumina reads in FASTQ format", "illumina_reads_2", STRING),
    )),
    ("hard cut-offs (reads that fall below these thresholds are discarded):", True, (
        ("min length", "minimum length threshold", "min_length", INTEGER),
        ("min mean q", "minimum mean quality threshold", "min_mean_q", DOUBLE),
        ("min window q", "minimum window quality threshold", "min_window_q", DOUBLE),
    )),
    ("score weights (control the relative contribution of each score to the final read score):", True, (
        ("length weight", "weight given to the length score", "length_weight", DOUBLE),
        ("mean q weight", "weight given to the mean quality score", "mean_q_weight", DOUBLE),
        ("window q weight", "weight given to the window quality score", "window_q_weight", DOUBLE),
    )),
    ("other:", True, (
        ("window size", "size of sliding window used when measuring window quality", "window_size", INTEGER),
        ("verbose", "Print a table with info for each read", "verbose", None),
        ("version", "Display the program version and quit", "version", None),
    )),
)


def build_parser(params, /, *, prog=None):
    """
    Declare the LongQC arguments on a fresh parser laid out with the given HelpParams.

    Raises ValidationError if two declarations claim the same flag token.
    """
    parser = ArgumentParser(DESCRIPTION, EPILOG, params=params, **({"prog": prog} if prog else {}))

    parser.register_positional("input_reads", "Input long reads to be filtered")

    for title, newline, arguments in GROUPS:
        group = parser.add_group(title, newline=newline)
        for name, help, token, reader in arguments:
            if reader is None:
                parser.register_boolean_flag(group, name, help, (token,))
            else:
                parser.register_flag(group, name, help, (token,), reader)

    parser.register_help_flag("help", "Display this help menu", ("h", "help"))
    return parser


def version_string():
    return "LongQC v%s" % __version__


__all__ = (
    "DESCRIPTION",
    "EPILOG",
    "GROUPS",
    "build_parser",
    "version_string",
)

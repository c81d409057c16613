__title__ = 'longqc'
__author__ = 'Ryan Wick'
__license__ = 'GPL-3.0-or-later'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.1.0"

from .configuration import *
from .faults import *
from .layout import *
from .outcome import *
from .readers import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the configuration
__all__ += configuration.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the layout
__all__ += layout.__all__  # type: ignore[attr-defined]
# Load the exposed API of the outcome
__all__ += outcome.__all__  # type: ignore[attr-defined]
# Load the exposed API of the readers
__all__ += readers.__all__  # type: ignore[attr-defined]

"""`chooser` - exhaustive runtime selection between behaviour variants.

Modules:
- core: Chooser and Choice
- failure: InvalidArgument error taxonomy
- schemas: Pydantic integration (choices from enumerated config fields)
"""

from chooser.failure import InvalidArgument, UnsupportedChoice, MissingOptions, UnknownOptions
from chooser.base import require
from chooser.core import Chooser, Choice

__version__ = "0.1.0"

__all__ = [
    "Chooser",
    "Choice",
    "InvalidArgument",
    "UnsupportedChoice",
    "MissingOptions",
    "UnknownOptions",
    "require",
]

"""stabver - versions with a stability progression and release planning.

A package for parsing, comparing and increasing versions that move through
alpha, beta and rc before a stable release.
"""

from ._version import __version__
from .exceptions import (
    InvariantError,
    ParseError,
    UnknownIntentError,
    VersionError,
)
from .stability import Stability
from .types import ACCEPTED_INTENTS, Intent, IntentLike
from .version import Version

__all__ = [
    "ACCEPTED_INTENTS",
    "Intent",
    "IntentLike",
    "InvariantError",
    "ParseError",
    "Stability",
    "UnknownIntentError",
    "Version",
    "VersionError",
    "__version__",
]

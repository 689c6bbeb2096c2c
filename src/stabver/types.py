"""Type aliases needed in the package."""

from enum import StrEnum
from typing import Final, TypeAlias


class Intent(StrEnum):
    """Release intents accepted by ``Version.increase``."""

    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"
    STABLE = "stable"
    MAJOR = "major"
    NEXT = "next"
    MINOR = "minor"
    PATCH = "patch"


ACCEPTED_INTENTS: Final[tuple[str, ...]] = tuple(intent.value for intent in Intent)

IntentLike: TypeAlias = Intent | str
VersionTuple: TypeAlias = tuple[int, int, int, int, int]

"""Exceptions raised by stabver."""

from typing import Self


class VersionError(Exception):
    """Base exception for all version errors."""


class ParseError(VersionError, ValueError):
    """Raised when a string does not match the version grammar."""

    def __init__(self: Self, version: str) -> None:
        """Initialize the error.

        Args:
            version: The string that could not be parsed.
        """
        self.version = version
        super().__init__(
            f'Unable to parse version "{version}". Expects a SemVer compatible '
            "version without build-metadata, e.g. "
            '"1.0.0", "1.0", "v1.0.0", "1.0.0-beta1" or "1.0.0-beta-1".'
        )


class InvariantError(VersionError, ValueError):
    """Raised when a version is constructed in an illegal state."""


class UnknownIntentError(VersionError, ValueError):
    """Raised when an unknown intent is passed to ``Version.increase``."""

    def __init__(self: Self, intent: str, accepted: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            intent: The intent that was received.
            accepted: The intents that are accepted.
        """
        self.intent = intent
        self.accepted = accepted
        quoted = '", "'.join(accepted)
        super().__init__(f'Unknown intent "{intent}", accepts "{quoted}".')

"""Next version candidates and release intents."""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, TypeVar

from .exceptions import UnknownIntentError
from .stability import Stability
from .types import ACCEPTED_INTENTS, Intent, IntentLike

if TYPE_CHECKING:
    from .version import Version

logger = logging.getLogger(__name__)

V = TypeVar("V", bound="Version")


def _make(
    version: V,
    major: int,
    minor: int,
    patch: int,
    stability: Stability,
    metaver: int = 0,
) -> V:
    """Construct a new version through the normal constructor."""
    return replace(
        version,
        major=major,
        minor=minor,
        patch=patch,
        stability=stability,
        metaver=metaver,
    )


def next_candidates(version: V) -> list[V]:
    """Return the possible next versions, from smallest to largest change.

    Args:
        version: The current version.

    Returns:
        Ordered list of candidate versions.
    """
    major, minor, patch = version.major, version.minor, version.patch

    # Before the first stable release only alpha with metaver 1 exists, so
    # there is no rc or stable 0.x. RC is valid but too uncommon to suggest.
    if major == 0:
        return [
            _make(version, 0, minor, patch + 1, Stability.ALPHA, 1),
            _make(version, 0, minor + 1, 0, Stability.ALPHA, 1),
            _make(version, 1, 0, 0, Stability.BETA, 1),
            _make(version, 1, 0, 0, Stability.STABLE),
        ]

    # Unstable tags only apply to x.0.0, so only the stability or metaver
    # may increase. RC is only suggested as the step after beta.
    if not version.is_stable:
        candidates = [
            _make(version, major, minor, 0, version.stability, version.metaver + 1)
        ]
        next_tier = Stability(version.stability + 1)
        if not next_tier.is_stable:
            candidates.append(_make(version, major, minor, 0, next_tier, 1))
        candidates.append(_make(version, major, minor, 0, Stability.STABLE))
        return candidates

    return [
        _make(version, major, minor, patch + 1, Stability.STABLE),
        _make(version, major, minor + 1, 0, Stability.BETA, 1),
        _make(version, major, minor + 1, 0, Stability.STABLE),
        _make(version, major + 1, 0, 0, Stability.ALPHA, 1),
        _make(version, major + 1, 0, 0, Stability.BETA, 1),
        _make(version, major + 1, 0, 0, Stability.STABLE),
    ]


def increase(version: V, intent: IntentLike) -> V:
    """Apply a release intent to a version.

    Args:
        version: The current version.
        intent: One of alpha, beta, rc, stable, major, next, minor, patch.

    Returns:
        The increased version.

    Raises:
        UnknownIntentError: If the intent is not recognized.
    """
    if intent not in ACCEPTED_INTENTS:
        raise UnknownIntentError(str(intent), ACCEPTED_INTENTS)

    match Intent(intent):
        case Intent.PATCH:
            if version.major > 0 and version.metaver > 0:
                result = _increase_next(version)
            else:
                result = _make(
                    version,
                    version.major,
                    version.minor,
                    version.patch + 1,
                    Stability.STABLE,
                )
        case Intent.MINOR:
            result = _make(
                version, version.major, version.minor + 1, 0, Stability.STABLE
            )
        case Intent.MAJOR:
            if version.is_stable:
                result = _make(version, version.major + 1, 0, 0, Stability.STABLE)
            else:
                result = _make(version, max(version.major, 1), 0, 0, Stability.STABLE)
        case Intent.ALPHA | Intent.BETA | Intent.RC:
            result = _increase_metaver(version, Stability.from_name(intent))
        case Intent.STABLE:
            result = _increase_stable(version)
        case Intent.NEXT:
            result = _increase_next(version)

    logger.debug("Increased %s with %r to %s", version, str(intent), result)
    return result


def _increase_metaver(version: V, stability: Stability) -> V:
    """Move to an unstable tier, never regressing within the same minor."""
    if stability == version.stability:
        return _make(
            version,
            version.major,
            version.minor,
            0,
            version.stability,
            version.metaver + 1,
        )

    if stability > version.stability:
        return _make(version, version.major, version.minor, 0, stability, 1)

    return _make(version, version.major, version.minor + 1, 0, stability, 1)


def _increase_stable(version: V) -> V:
    if not version.is_stable:
        return _make(version, max(version.major, 1), 0, 0, Stability.STABLE)

    return _make(version, version.major, version.minor + 1, 0, Stability.STABLE)


def _increase_next(version: V) -> V:
    if version.major > 0 and not version.is_stable:
        return _make(
            version,
            version.major,
            version.minor,
            version.patch,
            version.stability,
            version.metaver + 1,
        )

    return _make(version, version.major, version.minor + 1, 0, Stability.STABLE)

"""Models a version with a stability tier."""

import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Final, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from . import _progression
from .exceptions import InvariantError, ParseError
from .stability import Stability
from .types import IntentLike, VersionTuple

# Stability may be separated by a hyphen or a dot, or not at all, for
# historic reasons. The same goes for the metaver.
VERSION_PATTERN: Final = (
    r"(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    r"(?:[-.]?(?P<stability>alpha|beta|rc|stable)(?:[.-]?(?P<metaver>\d+))?)?"
)

_VERSION_RE: Final = re.compile(rf"v?{VERSION_PATTERN}", re.IGNORECASE | re.ASCII)


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """Version with a stability tier.

    Versions below 1.0.0 are always alpha with metaver 1 and are rendered
    without a stability tag. Stable versions have no metaver.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        stability: Stability tier of the release.
        metaver: Release counter within an unstable tier, e.g. 2 for BETA2.
        full: Canonical text, computed on construction.
    """

    major: int
    minor: int
    patch: int
    stability: Stability = Stability.STABLE
    metaver: int = 0
    full: str = field(init=False, repr=False)

    def __post_init__(self: Self) -> None:
        """Normalize and validate the version.

        Raises:
            InvariantError: If a component is negative, the stability is
                unknown, or a stable version has a metaver.
        """
        if min(self.major, self.minor, self.patch, self.metaver) < 0:
            raise InvariantError(
                "Version components cannot be negative: "
                f"{self.major}, {self.minor}, {self.patch}, {self.metaver}"
            )

        try:
            stability = Stability(self.stability)
        except ValueError as e:
            raise InvariantError(f"Unknown stability: {self.stability!r}") from e

        metaver = self.metaver
        # Pre 1.0 versions are never tagged with a stability.
        if self.major == 0:
            stability = Stability.ALPHA
            metaver = 1

        if stability.is_stable and metaver > 0:
            raise InvariantError(
                "Meta version of the stability flag cannot be set for stable."
            )

        object.__setattr__(self, "stability", stability)
        object.__setattr__(self, "metaver", metaver)

        if self.major > 0 and not stability.is_stable:
            full = (
                f"{self.major}.{self.minor}.{self.patch}-{stability.label}{metaver}"
            )
        else:
            full = f"{self.major}.{self.minor}.{self.patch}"
        object.__setattr__(self, "full", full)

    @classmethod
    def parse(cls, version_str: str) -> Self:
        """Parse a version string.

        Accepts an optional "v" prefix, an optional patch and an optional
        stability with metaver, ignoring case. Build metadata is not
        supported.

        Args:
            version_str: Version string, e.g. "1.0", "v1.0.0" or "1.0.0-beta2".

        Returns:
            Parsed Version instance.

        Raises:
            ParseError: If the version string format is invalid.
        """
        match = _VERSION_RE.fullmatch(version_str)
        if match is None:
            raise ParseError(version_str)

        try:
            return cls(
                int(match["major"]),
                int(match["minor"]),
                int(match["patch"] or 0),
                Stability.from_name(match["stability"] or "stable"),
                int(match["metaver"] or 0),
            )
        except InvariantError as e:
            raise ParseError(version_str) from e

    @property
    def is_stable(self: Self) -> bool:
        """Whether this is a stable release."""
        return self.stability.is_stable

    def as_tuple(self: Self) -> VersionTuple:
        """Return the version fields as a sortable tuple.

        Returns:
            Tuple of (major, minor, patch, stability, metaver).
        """
        return (self.major, self.minor, self.patch, int(self.stability), self.metaver)

    def next_candidates(self: Self) -> list[Self]:
        """Return the versions that may follow this one.

        The list is ordered from the smallest to the largest change. An
        RC release is only suggested after a beta.

        Examples:
            * 0.1.0 -> 0.1.1, 0.2.0, 1.0.0-BETA1, 1.0.0
            * 1.0.0 -> 1.0.1, 1.1.0-BETA1, 1.1.0, 2.0.0-ALPHA1,
              2.0.0-BETA1, 2.0.0
            * 1.0.0-ALPHA1 -> 1.0.0-ALPHA2, 1.0.0-BETA1, 1.0.0
            * 1.0.0-BETA1 -> 1.0.0-BETA2, 1.0.0-RC1, 1.0.0

        Returns:
            New list of candidate versions.
        """
        return _progression.next_candidates(self)

    def is_candidate(self: Self, other: "Version") -> bool:
        """Check whether a version is a valid next release for this one.

        Args:
            other: Proposed next version.

        Returns:
            True if other is one of the next candidates.
        """
        return other in self.next_candidates()

    def increase(self: Self, intent: IntentLike) -> Self:
        """Return the version produced by applying a release intent.

        Using "major" on an unstable release creates the stable release
        for that major. Using "stable" on a stable release increases minor.
        Using "patch" on an unstable release increases the metaver instead.

        Args:
            intent: One of alpha, beta, rc, stable, major, next, minor, patch.

        Returns:
            New Version with the change applied.

        Raises:
            UnknownIntentError: If the intent is not recognized.
        """
        return _progression.increase(self, intent)

    def __str__(self: Self) -> str:
        """Return the canonical text of the version."""
        return self.full

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return (
            f"Version({self.major}, {self.minor}, {self.patch}, "
            f"Stability.{self.stability.name}, {self.metaver})"
        )

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.full == other.full

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.as_tuple() < other.as_tuple()

    def __hash__(self: Self) -> int:
        return hash(self.full)

    @classmethod
    def _validate(cls, value: Any) -> "Version":
        if isinstance(value, Version):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"Expected a version string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate versions from strings and serialize them as canonical text."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "examples": ["1.0.0", "1.1.0-BETA1"]}

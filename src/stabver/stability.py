"""Stability tiers of a version."""

from enum import IntEnum
from typing import Self


class Stability(IntEnum):
    """Stability tier of a version, higher means more stable."""

    ALPHA = 0
    BETA = 1
    RC = 2
    STABLE = 3

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Look up a tier by name, ignoring case.

        Args:
            name: Tier name such as "beta" or "RC".

        Returns:
            The matching tier.

        Raises:
            ValueError: If the name is not a known tier.
        """
        try:
            return cls[name.upper()]
        except KeyError as e:
            raise ValueError(f"Unknown stability: {name}") from e

    @property
    def label(self: Self) -> str:
        """Upper-case tag used in canonical version text."""
        return self.name

    @property
    def is_stable(self: Self) -> bool:
        """Whether this is the stable tier."""
        return self is Stability.STABLE

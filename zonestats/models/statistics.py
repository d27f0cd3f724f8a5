"""
Statistics Snapshot.

A point-in-time aggregation over a player's battlefield and graveyard.

INVARIANTS:
- Every count is >= 0
- land_count <= permanent_count and creature_count <= permanent_count
- Snapshots are frozen; a recompute produces a new instance instead of
  mutating the current one
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


class StatisticsInvariantError(ValueError):
    """Raised when a snapshot would violate the count invariants."""

    def __init__(self, field_name: str, value: int, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name}={value}: {reason}")


@dataclass(frozen=True, slots=True)
class Statistics:
    """
    Aggregate counts for one player.

    Attributes:
        permanent_count: Number of entries on the battlefield
        land_count: Battlefield cards whose type line mentions a land
        creature_count: Battlefield cards whose type line mentions a creature
        graveyard_type_counts: Main card type -> number of graveyard cards
    """

    permanent_count: int = 0
    land_count: int = 0
    creature_count: int = 0
    graveyard_type_counts: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("permanent_count", "land_count", "creature_count"):
            value = getattr(self, name)
            if value < 0:
                raise StatisticsInvariantError(name, value, "must be >= 0")
        if self.land_count > self.permanent_count:
            raise StatisticsInvariantError(
                "land_count", self.land_count, "cannot exceed permanent_count"
            )
        if self.creature_count > self.permanent_count:
            raise StatisticsInvariantError(
                "creature_count", self.creature_count, "cannot exceed permanent_count"
            )
        for label, count in self.graveyard_type_counts.items():
            if count < 0:
                raise StatisticsInvariantError(
                    f"graveyard_type_counts[{label!r}]", count, "must be >= 0"
                )
        # Copy so the caller's dict can't reach into a live snapshot
        object.__setattr__(
            self,
            "graveyard_type_counts",
            MappingProxyType(dict(self.graveyard_type_counts)),
        )

    def __hash__(self) -> int:
        return hash(
            (
                self.permanent_count,
                self.land_count,
                self.creature_count,
                frozenset(self.graveyard_type_counts.items()),
            )
        )

    @classmethod
    def zero(cls) -> "Statistics":
        """Snapshot for a player with nothing on the battlefield or in the graveyard."""
        return cls()

    @property
    def graveyard_total(self) -> int:
        """Number of graveyard cards that received a main type."""
        return sum(self.graveyard_type_counts.values())

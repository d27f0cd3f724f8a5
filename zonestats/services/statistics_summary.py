"""
Statistics summary for presentation layers.

Converts a Statistics snapshot into a serializable read model and a
plain-text block with the same lines the in-game overlay shows.
"""

from pydantic import BaseModel, Field

from zonestats.models.statistics import Statistics


class StatisticsSummary(BaseModel):
    """Read model of a player's statistics."""

    player_name: str | None = Field(
        default=None,
        description="Display name of the player, if known",
    )
    permanents: int = Field(..., ge=0, description="Entries on the battlefield")
    lands: int = Field(..., ge=0, description="Lands on the battlefield")
    creatures: int = Field(..., ge=0, description="Creatures on the battlefield")
    graveyard_total: int = Field(
        ...,
        ge=0,
        description="Graveyard cards with a recognized main type",
    )
    graveyard_types: dict[str, int] = Field(
        default_factory=dict,
        description="Main card type -> graveyard count",
    )


def build_summary(statistics: Statistics, player_name: str | None = None) -> StatisticsSummary:
    """Build the read model for a snapshot."""
    return StatisticsSummary(
        player_name=player_name,
        permanents=statistics.permanent_count,
        lands=statistics.land_count,
        creatures=statistics.creature_count,
        graveyard_total=statistics.graveyard_total,
        graveyard_types=dict(statistics.graveyard_type_counts),
    )


def format_statistics(summary: StatisticsSummary) -> str:
    """
    Format a summary as text lines.

    The graveyard line is only included when the graveyard holds at
    least one classified card.
    """
    lines = []
    if summary.player_name:
        lines.append(summary.player_name)
    lines.append(f"Permanents: {summary.permanents}")
    lines.append(f"Lands: {summary.lands}")
    lines.append(f"Creatures: {summary.creatures}")
    if summary.graveyard_total > 0:
        lines.append(f"Graveyard: {summary.graveyard_total}")
    return "\n".join(lines)

import pytest
from pydantic import ValidationError

from zonestats.models.statistics import Statistics
from zonestats.services.statistics_summary import (
    StatisticsSummary,
    build_summary,
    format_statistics,
)


@pytest.fixture
def sample_statistics() -> Statistics:
    return Statistics(
        permanent_count=7,
        land_count=4,
        creature_count=2,
        graveyard_type_counts={"Instant": 2, "Creature": 1},
    )


class TestBuildSummary:
    def test_fields(self, sample_statistics: Statistics) -> None:
        summary = build_summary(sample_statistics, player_name="Alice")

        assert summary.player_name == "Alice"
        assert summary.permanents == 7
        assert summary.lands == 4
        assert summary.creatures == 2
        assert summary.graveyard_total == 3
        assert summary.graveyard_types == {"Instant": 2, "Creature": 1}

    def test_serializable(self, sample_statistics: Statistics) -> None:
        data = build_summary(sample_statistics).model_dump()
        assert data["player_name"] is None
        assert data["graveyard_types"] == {"Instant": 2, "Creature": 1}

    def test_negative_counts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StatisticsSummary(permanents=-1, lands=0, creatures=0, graveyard_total=0)


class TestFormatStatistics:
    def test_full_output(self, sample_statistics: Statistics) -> None:
        text = format_statistics(build_summary(sample_statistics, player_name="Alice"))
        assert text.splitlines() == [
            "Alice",
            "Permanents: 7",
            "Lands: 4",
            "Creatures: 2",
            "Graveyard: 3",
        ]

    def test_empty_graveyard_line_omitted(self) -> None:
        text = format_statistics(build_summary(Statistics.zero()))
        assert text.splitlines() == ["Permanents: 0", "Lands: 0", "Creatures: 0"]

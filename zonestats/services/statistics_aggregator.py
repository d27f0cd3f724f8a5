"""
Statistics aggregation.

Walks a player's battlefield and graveyard and produces a Statistics
snapshot. Pure with respect to its inputs: nothing is mutated and every
call returns a new snapshot.

Two deliberate behaviors are kept as-is:
- permanent_count is the raw battlefield size, so empty or missing
  entries count as permanents while being skipped for land/creature
- land and creature detection is case-insensitive substring matching on
  the type line, not main-type classification
"""

from collections.abc import Sequence

from zonestats.config import Settings, settings
from zonestats.models.card import CardDescriptor
from zonestats.models.statistics import Statistics
from zonestats.models.zone import ZoneSource
from zonestats.services.type_classifier import ClassifierRules, TypeClassifier


CardSequence = Sequence[CardDescriptor | None]


class StatisticsAggregator:
    """Derives battlefield counts and the graveyard type breakdown."""

    def __init__(
        self,
        classifier: TypeClassifier | None = None,
        land_keyword: str = "Land",
        creature_keyword: str = "Creature",
    ) -> None:
        self.classifier = classifier or TypeClassifier()
        self._land_keyword = land_keyword.casefold()
        self._creature_keyword = creature_keyword.casefold()

    @classmethod
    def from_settings(cls, config: Settings) -> "StatisticsAggregator":
        return cls(
            classifier=TypeClassifier(ClassifierRules.from_settings(config)),
            land_keyword=config.land_keyword,
            creature_keyword=config.creature_keyword,
        )

    def aggregate(
        self,
        battlefield: CardSequence | None,
        graveyard: CardSequence | None,
    ) -> Statistics:
        """
        Compute a fresh snapshot.

        Args:
            battlefield: Cards in play; None is treated as empty
            graveyard: Cards in the graveyard; None is treated as empty

        Returns:
            New Statistics instance
        """
        battlefield = battlefield or ()
        graveyard = graveyard or ()

        land_count = 0
        creature_count = 0
        for card in battlefield:
            if card is None or card.is_empty:
                continue
            type_line = (card.type_line or "").casefold()
            if self._land_keyword in type_line:
                land_count += 1
            if self._creature_keyword in type_line:
                creature_count += 1

        graveyard_types: dict[str, int] = {}
        for card in graveyard:
            if card is None or card.is_empty:
                continue
            main_type = self.classifier.classify(card.type_line or "")
            if main_type:
                graveyard_types[main_type] = graveyard_types.get(main_type, 0) + 1

        return Statistics(
            permanent_count=len(battlefield),
            land_count=land_count,
            creature_count=creature_count,
            graveyard_type_counts=graveyard_types,
        )

    def aggregate_zone_source(self, source: ZoneSource | None) -> Statistics:
        """Aggregate the current contents of a player's zones."""
        if source is None:
            return Statistics.zero()
        battlefield = source.battlefield
        graveyard = source.graveyard
        return self.aggregate(
            battlefield.cards if battlefield is not None else None,
            graveyard.cards if graveyard is not None else None,
        )


_default_aggregator = StatisticsAggregator.from_settings(settings)


def aggregate_statistics(
    battlefield: CardSequence | None,
    graveyard: CardSequence | None,
) -> Statistics:
    """Aggregate with the configured default rules."""
    return _default_aggregator.aggregate(battlefield, graveyard)

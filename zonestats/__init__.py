"""
zonestats.

Battlefield and graveyard statistics for a card-game client.
"""

from zonestats.models import (
    CardDescriptor,
    CardNotInZoneError,
    CardZone,
    Player,
    Statistics,
    StatisticsInvariantError,
    Subscription,
    ZoneCard,
    ZoneSource,
)
from zonestats.services import (
    DEFAULT_RULES,
    ClassifierRules,
    InvalidClassifierRulesError,
    StatisticsAggregator,
    StatisticsSummary,
    StatisticsTracker,
    TrackerState,
    TypeClassifier,
    aggregate_statistics,
    build_summary,
    format_statistics,
    get_main_card_type,
)

__all__ = [
    "CardDescriptor",
    "CardNotInZoneError",
    "CardZone",
    "ClassifierRules",
    "DEFAULT_RULES",
    "InvalidClassifierRulesError",
    "Player",
    "Statistics",
    "StatisticsAggregator",
    "StatisticsInvariantError",
    "StatisticsSummary",
    "StatisticsTracker",
    "Subscription",
    "TrackerState",
    "TypeClassifier",
    "ZoneCard",
    "ZoneSource",
    "aggregate_statistics",
    "build_summary",
    "format_statistics",
    "get_main_card_type",
]

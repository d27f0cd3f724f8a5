"""
zonestats services.

Type classification, statistics aggregation and live tracking.
"""

from zonestats.services.statistics_aggregator import (
    StatisticsAggregator,
    aggregate_statistics,
)
from zonestats.services.statistics_summary import (
    StatisticsSummary,
    build_summary,
    format_statistics,
)
from zonestats.services.statistics_tracker import (
    SnapshotListener,
    StatisticsTracker,
    TrackerState,
)
from zonestats.services.type_classifier import (
    DEFAULT_RULES,
    ClassifierRules,
    InvalidClassifierRulesError,
    TypeClassifier,
    get_main_card_type,
)

__all__ = [
    # Type classification
    "ClassifierRules",
    "DEFAULT_RULES",
    "InvalidClassifierRulesError",
    "TypeClassifier",
    "get_main_card_type",
    # Aggregation
    "StatisticsAggregator",
    "aggregate_statistics",
    # Live tracking
    "SnapshotListener",
    "StatisticsTracker",
    "TrackerState",
    # Presentation read model
    "StatisticsSummary",
    "build_summary",
    "format_statistics",
]

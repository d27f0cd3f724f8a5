from zonestats.models.card import CardDescriptor, ZoneCard
from zonestats.models.statistics import Statistics, StatisticsInvariantError
from zonestats.models.zone import (
    CardNotInZoneError,
    CardZone,
    Player,
    Subscription,
    ZoneListener,
    ZoneSource,
)

__all__ = [
    "CardDescriptor",
    "CardNotInZoneError",
    "CardZone",
    "Player",
    "Statistics",
    "StatisticsInvariantError",
    "Subscription",
    "ZoneCard",
    "ZoneListener",
    "ZoneSource",
]

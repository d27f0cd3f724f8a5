"""
Statistics Tracker - keep a player's statistics current.

The tracker subscribes to the battlefield and graveyard zones of a player
and recomputes the full snapshot on every change notification.

STATE MACHINE:
    UNINITIALIZED --(construction, baseline aggregate)--> READY
    READY --(zone notification / refresh)--> READY
    READY --(close)--> CLOSED

INVARIANT: Readers never see a partially built snapshot. Each recompute
builds a new Statistics and replaces the reference in one assignment.

A missing player or zone is not an error: nothing is subscribed for it
and it contributes zero to the statistics.
"""

import logging
from collections.abc import Callable
from enum import Enum

from zonestats.config import settings
from zonestats.models.statistics import Statistics
from zonestats.models.zone import CardZone, Subscription, ZoneSource
from zonestats.services.statistics_aggregator import StatisticsAggregator

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[Statistics], None]


class TrackerState(str, Enum):
    """Lifecycle of a tracker."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    CLOSED = "closed"


class StatisticsTracker:
    """
    Owns the current Statistics snapshot for one player.

    Usage:
        with StatisticsTracker(player) as tracker:
            player.graveyard.add_card(card)
            tracker.statistics.graveyard_type_counts  # already updated
    """

    def __init__(
        self,
        source: ZoneSource | None,
        aggregator: StatisticsAggregator | None = None,
    ) -> None:
        self.state = TrackerState.UNINITIALIZED
        self._source = source
        self._aggregator = aggregator or StatisticsAggregator.from_settings(settings)
        self._statistics = Statistics.zero()
        self._zone_subscriptions: list[Subscription] = []
        self._listeners: list[SnapshotListener] = []

        if source is None:
            logger.warning("Statistics tracker created without a zone source")
        else:
            for label, zone in (
                ("battlefield", source.battlefield),
                ("graveyard", source.graveyard),
            ):
                if zone is None:
                    logger.warning("No %s zone to track; it counts as empty", label)
                    continue
                self._zone_subscriptions.append(zone.subscribe(self._on_zone_changed))
                logger.info("Tracking %s zone %r", label, zone.name)

        self._recompute()
        self.state = TrackerState.READY

    @property
    def statistics(self) -> Statistics:
        """The current snapshot."""
        return self._statistics

    @property
    def subscribed_zone_count(self) -> int:
        return sum(1 for sub in self._zone_subscriptions if sub.active)

    def refresh(self) -> Statistics:
        """Recompute from the zones' current contents and return the new snapshot."""
        return self._recompute()

    def subscribe(self, listener: SnapshotListener) -> Subscription:
        """
        Register a callback for new snapshots.

        The callback runs after the new snapshot has been swapped in, so
        `tracker.statistics` inside it already returns the new value.
        """
        self._listeners.append(listener)
        return Subscription(lambda: self._listeners.remove(listener))

    def close(self) -> None:
        """Release zone subscriptions. The last snapshot stays readable."""
        if self.state is TrackerState.CLOSED:
            return
        for subscription in self._zone_subscriptions:
            subscription.close()
        self._zone_subscriptions.clear()
        self.state = TrackerState.CLOSED
        logger.info("Statistics tracker closed")

    def __enter__(self) -> "StatisticsTracker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _on_zone_changed(self, zone: CardZone) -> None:
        logger.debug("Zone %r changed, recomputing statistics", zone.name)
        self._recompute()

    def _recompute(self) -> Statistics:
        statistics = self._aggregator.aggregate_zone_source(self._source)
        self._statistics = statistics
        logger.debug(
            "Statistics: permanents=%d, lands=%d, creatures=%d, graveyard=%s",
            statistics.permanent_count,
            statistics.land_count,
            statistics.creature_count,
            dict(statistics.graveyard_type_counts),
        )
        for listener in list(self._listeners):
            # A listener that mutated a zone triggered a newer snapshot,
            # which has already been delivered to every listener
            if statistics is not self._statistics:
                break
            listener(statistics)
        return statistics

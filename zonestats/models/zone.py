"""
Card Zones - observable card collections.

A zone holds an ordered collection of cards and notifies subscribers
whenever the collection changes structurally (a card is added or removed).

Subscriptions are explicit handles: whoever subscribes owns the handle
and closes it on teardown. Nothing here is tied to a UI object's lifetime.

Notifications are delivered synchronously, in subscription order, on the
thread that mutated the zone. A listener that raises propagates the error
to the mutating caller.
"""

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Protocol

from zonestats.models.card import ZoneCard

logger = logging.getLogger(__name__)

ZoneListener = Callable[["CardZone"], None]


class CardNotInZoneError(LookupError):
    """Raised when removing a card that the zone does not hold."""

    def __init__(self, card: ZoneCard, zone_name: str) -> None:
        self.card = card
        self.zone_name = zone_name
        super().__init__(f"Card '{card.name}' is not in zone '{zone_name}'")


class Subscription:
    """
    Handle for a registered callback.

    Closing the handle unregisters the callback. Closing twice is a no-op.
    """

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe: Callable[[], None] | None = unsubscribe

    @property
    def active(self) -> bool:
        return self._unsubscribe is not None

    def close(self) -> None:
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class CardZone:
    """An ordered, observable collection of cards."""

    def __init__(self, name: str, cards: list[ZoneCard] | None = None) -> None:
        self.name = name
        self._cards: list[ZoneCard] = list(cards) if cards else []
        self._listeners: list[ZoneListener] = []

    @property
    def cards(self) -> tuple[ZoneCard, ...]:
        """Current contents, in zone order."""
        return tuple(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[ZoneCard]:
        return iter(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def add_card(self, card: ZoneCard, index: int | None = None) -> None:
        """Add a card at the end of the zone, or at `index` if given."""
        self._insert(card, index)
        self._notify()

    def remove_card(self, card: ZoneCard) -> None:
        """Remove the first occurrence of `card`."""
        self._remove(card)
        self._notify()

    def clear(self) -> None:
        """Remove every card. Clearing an empty zone does not notify."""
        if not self._cards:
            return
        self._cards.clear()
        self._notify()

    def subscribe(self, listener: ZoneListener) -> Subscription:
        """Register `listener` for change notifications."""
        self._listeners.append(listener)
        return Subscription(lambda: self._unsubscribe(listener))

    def _unsubscribe(self, listener: ZoneListener) -> None:
        self._listeners.remove(listener)

    def _insert(self, card: ZoneCard, index: int | None = None) -> None:
        if index is None:
            self._cards.append(card)
        else:
            self._cards.insert(index, card)

    def _remove(self, card: ZoneCard) -> None:
        try:
            self._cards.remove(card)
        except ValueError:
            raise CardNotInZoneError(card, self.name) from None

    def _notify(self) -> None:
        logger.debug(
            "Zone %s changed: %d cards, %d listeners",
            self.name,
            len(self._cards),
            len(self._listeners),
        )
        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(self)


class ZoneSource(Protocol):
    """Anything that exposes a player's battlefield and graveyard zones."""

    @property
    def battlefield(self) -> CardZone | None: ...

    @property
    def graveyard(self) -> CardZone | None: ...


@dataclass
class Player:
    """
    A player and the zones the statistics engine reads.

    Either zone may be None (e.g., a spectator view without a graveyard).
    """

    name: str
    battlefield: CardZone | None = field(default_factory=lambda: CardZone("table"))
    graveyard: CardZone | None = field(default_factory=lambda: CardZone("grave"))

    def move_card(self, card: ZoneCard, source: CardZone, destination: CardZone) -> None:
        """
        Move a card between zones; each zone notifies once.

        Both zones are updated before either notifies, so a raising listener
        never leaves the card outside both zones.
        """
        source._remove(card)
        destination._insert(card)
        try:
            source._notify()
        finally:
            destination._notify()

import pytest

from zonestats.models.card import ZoneCard
from zonestats.models.zone import CardNotInZoneError, CardZone, Player, Subscription


class Recorder:
    """Collects zone notifications."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def __call__(self, zone: CardZone) -> None:
        self.calls.append((zone.name, len(zone)))


class TestCardZone:
    def test_initial_cards(self, forest: ZoneCard) -> None:
        zone = CardZone("table", [forest])
        assert zone.cards == (forest,)
        assert len(zone) == 1
        assert forest in zone

    def test_cards_is_snapshot(self, forest: ZoneCard) -> None:
        zone = CardZone("table")
        snapshot = zone.cards
        zone.add_card(forest)
        assert snapshot == ()

    def test_add_card_at_index(self, forest: ZoneCard, llanowar_elves: ZoneCard) -> None:
        zone = CardZone("table", [forest])
        zone.add_card(llanowar_elves, index=0)
        assert list(zone) == [llanowar_elves, forest]

    def test_remove_missing_card(self, forest: ZoneCard) -> None:
        zone = CardZone("grave")
        with pytest.raises(CardNotInZoneError) as exc_info:
            zone.remove_card(forest)
        assert exc_info.value.zone_name == "grave"
        assert exc_info.value.card == forest


class TestNotifications:
    def test_add_and_remove_notify(self, forest: ZoneCard) -> None:
        zone = CardZone("table")
        recorder = Recorder()
        zone.subscribe(recorder)

        zone.add_card(forest)
        zone.remove_card(forest)

        assert recorder.calls == [("table", 1), ("table", 0)]

    def test_clear_notifies_once(self, forest: ZoneCard, llanowar_elves: ZoneCard) -> None:
        zone = CardZone("table", [forest, llanowar_elves])
        recorder = Recorder()
        zone.subscribe(recorder)

        zone.clear()
        zone.clear()

        assert recorder.calls == [("table", 0)]

    def test_failed_remove_does_not_notify(self, forest: ZoneCard) -> None:
        zone = CardZone("grave")
        recorder = Recorder()
        zone.subscribe(recorder)
        with pytest.raises(CardNotInZoneError):
            zone.remove_card(forest)
        assert recorder.calls == []

    def test_listener_error_propagates(self, forest: ZoneCard) -> None:
        def broken(_zone: CardZone) -> None:
            raise RuntimeError("listener failed")

        zone = CardZone("table")
        zone.subscribe(broken)
        with pytest.raises(RuntimeError, match="listener failed"):
            zone.add_card(forest)


class TestSubscription:
    def test_close_stops_notifications(self, forest: ZoneCard) -> None:
        zone = CardZone("table")
        recorder = Recorder()
        subscription = zone.subscribe(recorder)

        subscription.close()
        zone.add_card(forest)

        assert recorder.calls == []
        assert subscription.active is False

    def test_close_is_idempotent(self) -> None:
        zone = CardZone("table")
        subscription = zone.subscribe(Recorder())
        subscription.close()
        subscription.close()

    def test_context_manager(self, forest: ZoneCard) -> None:
        zone = CardZone("table")
        recorder = Recorder()
        with zone.subscribe(recorder) as subscription:
            assert isinstance(subscription, Subscription)
            zone.add_card(forest)
        zone.remove_card(forest)
        assert recorder.calls == [("table", 1)]

    def test_unsubscribe_during_notification(self, forest: ZoneCard) -> None:
        zone = CardZone("table")
        recorder = Recorder()
        subscription: Subscription | None = None

        def one_shot(_zone: CardZone) -> None:
            assert subscription is not None
            subscription.close()

        subscription = zone.subscribe(one_shot)
        zone.subscribe(recorder)
        zone.add_card(forest)
        zone.remove_card(forest)

        assert recorder.calls == [("table", 1), ("table", 0)]


class TestPlayer:
    def test_default_zones(self) -> None:
        player = Player(name="Alice")
        assert player.battlefield is not None
        assert player.graveyard is not None
        assert len(player.battlefield) == 0

    def test_move_card(self, llanowar_elves: ZoneCard) -> None:
        player = Player(name="Alice")
        assert player.battlefield is not None and player.graveyard is not None
        player.battlefield.add_card(llanowar_elves)
        recorder = Recorder()
        player.battlefield.subscribe(recorder)
        player.graveyard.subscribe(recorder)

        player.move_card(llanowar_elves, player.battlefield, player.graveyard)

        assert player.graveyard.cards == (llanowar_elves,)
        assert recorder.calls == [("table", 0), ("grave", 1)]

    def test_move_card_survives_raising_listener(self, llanowar_elves: ZoneCard) -> None:
        def broken(_zone: CardZone) -> None:
            raise RuntimeError("listener failed")

        player = Player(name="Alice")
        assert player.battlefield is not None and player.graveyard is not None
        player.battlefield.add_card(llanowar_elves)
        player.battlefield.subscribe(broken)
        recorder = Recorder()
        player.graveyard.subscribe(recorder)

        with pytest.raises(RuntimeError, match="listener failed"):
            player.move_card(llanowar_elves, player.battlefield, player.graveyard)

        assert player.battlefield.cards == ()
        assert player.graveyard.cards == (llanowar_elves,)
        assert recorder.calls == [("grave", 1)]

    def test_move_missing_card_changes_nothing(self, llanowar_elves: ZoneCard) -> None:
        player = Player(name="Alice")
        assert player.battlefield is not None and player.graveyard is not None
        recorder = Recorder()
        player.graveyard.subscribe(recorder)

        with pytest.raises(CardNotInZoneError):
            player.move_card(llanowar_elves, player.battlefield, player.graveyard)

        assert player.graveyard.cards == ()
        assert recorder.calls == []

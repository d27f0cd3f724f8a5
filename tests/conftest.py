import pytest

from zonestats.models.card import ZoneCard
from zonestats.models.zone import CardZone, Player


@pytest.fixture
def forest() -> ZoneCard:
    return ZoneCard(name="Forest", type_line="Basic Land — Forest", card_id=1)


@pytest.fixture
def llanowar_elves() -> ZoneCard:
    return ZoneCard(name="Llanowar Elves", type_line="Creature — Elf Druid", card_id=2)


@pytest.fixture
def lightning_bolt() -> ZoneCard:
    return ZoneCard(name="Lightning Bolt", type_line="Instant", card_id=3)


@pytest.fixture
def hidden_card() -> ZoneCard:
    """Face-down card: present in the zone but without identity."""
    return ZoneCard(name="", card_id=4)


@pytest.fixture
def player() -> Player:
    """Player with empty battlefield and graveyard."""
    return Player(name="Alice")


@pytest.fixture
def populated_player(forest: ZoneCard, llanowar_elves: ZoneCard) -> Player:
    """Player with a land and a creature in play and two spells in the graveyard."""
    return Player(
        name="Bob",
        battlefield=CardZone("table", [forest, llanowar_elves]),
        graveyard=CardZone(
            "grave",
            [
                ZoneCard(name="Opt", type_line="Instant", card_id=10),
                ZoneCard(name="Divination", type_line="Sorcery", card_id=11),
            ],
        ),
    )

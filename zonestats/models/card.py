from dataclasses import dataclass
from typing import Protocol


class CardDescriptor(Protocol):
    """
    Read-only view of a card as seen by the statistics engine.

    Only two things matter: whether the card has an identity at all,
    and its raw type line.
    """

    @property
    def is_empty(self) -> bool: ...

    @property
    def type_line(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ZoneCard:
    """
    A card occupying a zone.

    Attributes:
        name: Card name; empty for hidden or placeholder cards
        type_line: Full type line (e.g., "Legendary Creature — Elf Warrior")
        card_id: Client-side card ID, unique within a game (optional)
    """

    name: str
    type_line: str = ""
    card_id: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.name

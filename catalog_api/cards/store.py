"""In-memory card store.

Holds the playing-card collection served by the cards API.
"""

from dataclasses import dataclass


@dataclass
class Card:
    """A playing card."""

    id: int
    suit: str
    value: str


INITIAL_CARDS = (
    ("Hearts", "Ace"),
    ("Spades", "King"),
    ("Diamonds", "Queen"),
)


class CardStore:
    """In-memory card collection with sequential ids.

    Ids are never reused: deleting the newest card does not roll the
    counter back.
    """

    def __init__(self, initial: tuple[tuple[str, str], ...] = INITIAL_CARDS) -> None:
        self._cards: list[Card] = []
        self._next_id = 1
        for suit, value in initial:
            self.add(suit, value)

    def list_cards(self) -> list[Card]:
        return list(self._cards)

    def get(self, card_id: int) -> Card | None:
        return next((c for c in self._cards if c.id == card_id), None)

    def add(self, suit: str, value: str) -> Card:
        card = Card(id=self._next_id, suit=suit, value=value)
        self._next_id += 1
        self._cards.append(card)
        return card

    def remove(self, card_id: int) -> bool:
        """Remove a card.

        Returns:
            True if a card was removed, False if none had this id.
        """
        card = self.get(card_id)
        if card is None:
            return False
        self._cards.remove(card)
        return True


_card_store: CardStore | None = None


def get_card_store() -> CardStore:
    """Get or create card store instance."""
    global _card_store
    if _card_store is None:
        _card_store = CardStore()
    return _card_store


def reset_card_store() -> None:
    """Reset card store (for testing)."""
    global _card_store
    _card_store = None

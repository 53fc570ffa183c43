"""Card creation and draw-forcing utilities for testing."""

from random import Random

from highlow.cards import Card, Rank, Suit

RANK_MAP = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

SUIT_MAP = {"h": Suit.HEARTS, "d": Suit.DIAMONDS, "s": Suit.SPADES, "c": Suit.CLUBS}


def make_card(s: str) -> Card:
    """Create a card from a string like 'Ad', '7c', 'Th'."""
    return Card(RANK_MAP[s[0].upper()], SUIT_MAP[s[1].lower()])


class ScriptedRandom(Random):
    """Random source whose randrange returns a fixed sequence of indices.

    Each scripted index is checked against the requested range so a test
    fails loudly instead of drawing out of bounds.
    """

    def __new__(cls, *args, **kwargs):
        # Random.__new__ would try to seed from the index list
        return super().__new__(cls)

    def __init__(self, indices: list[int]) -> None:
        super().__init__(0)
        self._indices = list(indices)
        self.calls: list[int] = []

    def randrange(self, start, stop=None, step=1):
        size = start if stop is None else stop - start
        self.calls.append(size)
        index = self._indices.pop(0)
        assert 0 <= index < size, f"scripted index {index} outside [0, {size})"
        return index


def forcing_indices(cards: list[Card]) -> list[int]:
    """Indices that make a fresh deck deal `cards` in order.

    Mirrors the deck's construction order (rank outer, suit inner) and the
    removal of each card as it is drawn.
    """
    remaining = [Card(rank, suit) for rank in Rank for suit in Suit]
    indices = []
    for card in cards:
        index = remaining.index(card)
        indices.append(index)
        remaining.pop(index)
    return indices

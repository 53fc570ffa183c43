"""Card, Deck, Suit, and Rank definitions for High-Low."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, in deck construction order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    SPADES = "spades"
    CLUBS = "clubs"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks (1-13, where 1 is Ace).

    Ordered by weight. Ranks never compare equal to plain integers.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def weight(self) -> int:
        return self.value

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {1: "Ace", 11: "Jack", 12: "Queen", 13: "King"}[self.value]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.weight >= other.weight


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card.

    Equality uses rank and suit. Ordering uses rank only, so two cards of
    the same rank and different suits are neither less nor greater than
    each other while still being unequal.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def compare(self, other: "Card") -> int:
        """Compare by rank: -1 if lower, 0 if same rank, 1 if higher."""
        if self.rank < other.rank:
            return -1
        if self.rank > other.rank:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank


class DeckExhaustedError(ValueError):
    """Raised when more cards are requested than the deck holds."""

    def __init__(self, requested: int, remaining: int) -> None:
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Cannot draw {requested} cards, only {remaining} remaining")


class Deck:
    """A standard 52-card deck drawn from at random.

    Cards are removed as they are drawn and never put back.
    """

    def __init__(self, seed: int | None = None, rng: Random | None = None) -> None:
        self._rng = rng if rng is not None else Random(seed)
        self._cards: list[Card] = [Card(rank, suit) for rank in Rank for suit in Suit]

    def draw_card(self) -> Card:
        """Remove and return a uniformly random card."""
        if not self._cards:
            raise DeckExhaustedError(1, 0)
        index = self._rng.randrange(len(self._cards))
        card = self._cards.pop(index)
        logger.debug("Drew %r at index %d, %d cards left", card, index, len(self._cards))
        return card

    def draw(self, n: int = 1) -> list[Card]:
        """Draw n cards in order.

        Nothing is removed unless all n cards are available.
        """
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards: {n}")
        if n > len(self._cards):
            raise DeckExhaustedError(n, len(self._cards))
        return [self.draw_card() for _ in range(n)]

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

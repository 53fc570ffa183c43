"""High-Low card game engine."""

from highlow.cards import Card, Deck, DeckExhaustedError, Rank, Suit
from highlow.delegate import CardGameDelegate
from highlow.game import CardGame, HighLow, Outcome, RoundResult, resolve_round

__all__ = [
    "Card",
    "CardGame",
    "CardGameDelegate",
    "Deck",
    "DeckExhaustedError",
    "HighLow",
    "Outcome",
    "Rank",
    "RoundResult",
    "Suit",
    "resolve_round",
]

"""High-Low game orchestration."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto

from highlow.cards import Card, Deck
from highlow.delegate import CardGameDelegate

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """Possible results of a round."""

    TIE = auto()
    PLAYER_1 = auto()
    PLAYER_2 = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class RoundResult:
    """Result of a single round."""

    player1_card: Card
    player2_card: Card
    outcome: Outcome

    @property
    def winning_card(self) -> Card:
        """Card the outcome is reported with (Player 1's card on a tie)."""
        if self.outcome is Outcome.PLAYER_2:
            return self.player2_card
        return self.player1_card

    @property
    def is_tie(self) -> bool:
        return self.outcome is Outcome.TIE


def resolve_round(player1_card: Card, player2_card: Card) -> RoundResult:
    """Compare two cards by rank and decide the round."""
    order = player1_card.compare(player2_card)
    if order == 0:
        outcome = Outcome.TIE
    elif order > 0:
        outcome = Outcome.PLAYER_1
    else:
        outcome = Outcome.PLAYER_2
    return RoundResult(player1_card, player2_card, outcome)


class CardGame(ABC):
    """Abstract card game played from a single deck."""

    deck: Deck

    @abstractmethod
    def play(self) -> RoundResult:
        """Play one round."""
        ...


class HighLow(CardGame):
    """Two players each draw a card; the higher rank wins."""

    def __init__(
        self,
        deck: Deck | None = None,
        delegate: CardGameDelegate | None = None,
        seed: int | None = None,
    ) -> None:
        self.deck = deck if deck is not None else Deck(seed)
        self.delegate = delegate
        self._started = False

    def start(self) -> None:
        """Announce the game to the delegate. Only the first call notifies."""
        if self._started:
            return
        self._started = True
        logger.info("Started a game of High Low with %d cards", len(self.deck))
        if self.delegate is not None:
            self.delegate.notify_game_start(self)

    def play(self) -> RoundResult:
        """Draw one card per player and resolve the round.

        Raises:
            DeckExhaustedError: If fewer than two cards remain. No card is
                drawn in that case.
        """
        self.start()
        player1_card, player2_card = self.deck.draw(2)
        result = resolve_round(player1_card, player2_card)
        logger.debug(
            "Round: %r vs %r -> %s (%d cards left)",
            player1_card,
            player2_card,
            result.outcome,
            len(self.deck),
        )
        if self.delegate is not None:
            self.delegate.notify_round_drawn(player1_card, player2_card)
        return result

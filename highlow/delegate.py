"""Notification interface for observers of a card game."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from highlow.cards import Card

if TYPE_CHECKING:
    from highlow.game import CardGame


class CardGameDelegate(ABC):
    """Abstract base class for anything that follows a card game.

    A game holds at most one delegate and calls it synchronously. Delegates
    only report; they must not draw from the deck or alter the cards.
    """

    @abstractmethod
    def notify_game_start(self, game: "CardGame") -> None:
        """Called once, before the first round of a game is reported.

        Args:
            game: The game that is starting.
        """
        ...

    @abstractmethod
    def notify_round_drawn(self, player1_card: Card, player2_card: Card) -> None:
        """Called once per round with both drawn cards.

        Args:
            player1_card: Card drawn for Player 1 (drawn first).
            player2_card: Card drawn for Player 2.
        """
        ...

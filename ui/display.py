"""Display utilities for the terminal High-Low UI."""

from rich.table import Table

from highlow.cards import Card, Deck, Suit
from highlow.game import Outcome, RoundResult


SUIT_COLORS = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}

OUTCOME_STYLES = {
    Outcome.TIE: "bold yellow",
    Outcome.PLAYER_1: "bold green",
    Outcome.PLAYER_2: "bold green",
}

GAME_START_MESSAGE = "Started a new game of High Low"


def format_draw(player1_card: Card, player2_card: Card) -> str:
    """Announce the cards drawn by both players."""
    return f"Player 1 drew a {player1_card}, player 2 drew a {player2_card}"


def format_outcome(result: RoundResult) -> str:
    """Describe the outcome of a round."""
    if result.outcome is Outcome.TIE:
        return f"Round ends in a tie with {result.winning_card}"
    if result.outcome is Outcome.PLAYER_1:
        return f"Player 1 wins with {result.winning_card}"
    return f"Player 2 wins with {result.winning_card}"


def render_deck(deck: Deck, title: str = "Deck") -> Table:
    """Render the remaining cards of a deck as a table."""
    table = Table(title=f"{title} ({len(deck)} cards)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Rank", style="cyan")
    table.add_column("Suit")
    table.add_column("Weight", justify="right")

    for i, card in enumerate(deck, start=1):
        color = SUIT_COLORS[card.suit]
        table.add_row(str(i), str(card.rank), f"[{color}]{card.suit}[/{color}]", str(card.rank.weight))

    return table

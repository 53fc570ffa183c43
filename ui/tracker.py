"""Console tracker that reports a High-Low game as it is played."""

from rich.console import Console

from highlow.cards import Card
from highlow.delegate import CardGameDelegate
from highlow.game import CardGame, resolve_round
from ui.display import GAME_START_MESSAGE, OUTCOME_STYLES, format_draw, format_outcome


class CardGameTracker(CardGameDelegate):
    """Delegate that prints the draws and the outcome of every round."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def notify_game_start(self, game: CardGame) -> None:
        self.console.print(GAME_START_MESSAGE, style="bold blue", highlight=False)

    def notify_round_drawn(self, player1_card: Card, player2_card: Card) -> None:
        result = resolve_round(player1_card, player2_card)
        self.console.print(format_draw(player1_card, player2_card), highlight=False)
        self.console.print(format_outcome(result), style=OUTCOME_STYLES[result.outcome], highlight=False)

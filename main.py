"""High-Low card game."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from config.settings import DEFAULT_CONFIG, Config, load_config, save_config
from highlow.cards import Deck, DeckExhaustedError
from highlow.game import HighLow
from ui.display import render_deck
from ui.tracker import CardGameTracker
from utils.log import setup_logging

app = typer.Typer(
    name="highlow",
    help="Two-player High-Low: each player draws a card, the higher rank wins.",
)
console = Console()
logger = logging.getLogger(__name__)


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    rounds: Optional[int] = typer.Option(None, "--rounds", "-n", min=1, help="Number of rounds to play"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Play High-Low rounds from a single deck."""
    config = _load(config_path)
    if seed is not None:
        config.game.seed = seed
    if rounds is not None:
        config.game.rounds = rounds

    setup_logging("DEBUG" if verbose else config.logging.level)
    logger.debug("Config: %s", config)

    game = HighLow(delegate=CardGameTracker(console), seed=config.game.seed)
    try:
        for _ in range(config.game.rounds):
            game.play()
    except DeckExhaustedError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def deck(
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed for --draw"),
    draw: int = typer.Option(0, "--draw", "-d", min=0, max=52, help="Cards to draw before listing"),
) -> None:
    """List the cards of a fresh deck."""
    cards = Deck(seed)
    drawn = cards.draw(draw)
    if drawn:
        console.print("Drew: " + ", ".join(str(card) for card in drawn), highlight=False)
    console.print(render_deck(cards))


@app.command(name="init-config")
def init_config(
    path: Path = typer.Argument(..., help="Where to write the YAML config"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration to a YAML file."""
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists, use --force to overwrite[/yellow]")
        raise typer.Exit(1)
    save_config(DEFAULT_CONFIG, path)
    console.print(f"[green]Wrote default config to {path}[/green]")


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()

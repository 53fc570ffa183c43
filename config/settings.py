"""Configuration settings for High-Low."""

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GameConfig:
    """Game configuration."""

    seed: int | None = None
    rounds: int = 1  # Independent rounds played from one deck

    def __post_init__(self) -> None:
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not _is_int(self.rounds):
            raise ValueError(f"rounds must be an integer, got {self.rounds!r}")
        if self.rounds < 1:
            raise ValueError(f"rounds must be at least 1, got {self.rounds}")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"

    def __post_init__(self) -> None:
        if not isinstance(self.level, str):
            raise ValueError(f"log level must be a name such as INFO, got {self.level!r}")
        self.level = self.level.upper()
        if not isinstance(logging.getLevelName(self.level), int):
            raise ValueError(f"Unknown log level: {self.level}")


@dataclass
class Config:
    """Complete configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or holds unknown or
            invalid settings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping of sections")

    unknown = set(data) - {"game", "logging"}
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(sorted(map(str, unknown)))}")

    for section in ("game", "logging"):
        if section in data and not isinstance(data[section], dict):
            raise ValueError(f"Invalid config in {path}: section '{section}' must be a mapping")

    config = Config()

    try:
        if "game" in data:
            config.game = GameConfig(**data["game"])
        if "logging" in data:
            config.logging = LoggingConfig(**data["logging"])
    except TypeError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "game": asdict(config.game),
        "logging": asdict(config.logging),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()

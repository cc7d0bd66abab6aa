"""
Configuration and defaults.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Optional, Sequence

from nim_solver.core.types import Player
from nim_solver.games.nim import DEFAULT_PILES

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Paths & environment
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_PATH = Path("nim_solver.toml")

CONFIG_ENV = "NIM_SOLVER_CONFIG"
LOG_LEVEL_ENV = "NIM_SOLVER_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Solver and play configuration with sensible defaults."""

    FIELDS = ("piles", "first_player", "use_cache", "show_scores", "log_level")

    def __init__(
        self,
        piles: Sequence[int] = DEFAULT_PILES,
        first_player: int = Player.HUMAN,
        use_cache: bool = True,
        show_scores: bool = False,
        log_level: str = "INFO",
    ):
        self.piles = tuple(piles)
        if any(not isinstance(p, int) or isinstance(p, bool) or p < 0 for p in self.piles):
            raise ValueError(f"Piles must be non-negative integers, got {list(self.piles)}")

        try:
            self.first_player = Player(first_player)
        except ValueError as e:
            raise ValueError(f"first_player must be 1 or 2, got {first_player!r}") from e

        self.use_cache = bool(use_cache)
        self.show_scores = bool(show_scores)

        level = str(log_level).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}. Available: {', '.join(LOG_LEVELS)}")
        self.log_level = level

    def replace(self, **overrides) -> "Config":
        """Copy with the given (non-None) fields overridden."""
        values = {name: getattr(self, name) for name in self.FIELDS}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Config(**values)

    @staticmethod
    def load_from_toml(path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        """
        Read the ``[nim]`` table of a TOML file.

        A missing file yields the defaults. Unknown keys are ignored.
        """
        path = Path(path)
        if not path.exists():
            return Config()

        with open(path, "rb") as f:
            raw = tomllib.load(f)

        section = raw.get("nim", {})
        known = {k: v for k, v in section.items() if k in Config.FIELDS}
        ignored = sorted(set(section) - set(known))
        if ignored:
            logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(ignored))

        return Config(**known)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.FIELDS)
        return f"Config({fields})"


def load_config(path: Optional[str | Path] = None) -> Config:
    """
    Load configuration from ``path``, ``$NIM_SOLVER_CONFIG`` or the default file.

    ``$NIM_SOLVER_LOG_LEVEL`` overrides the file's log level.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV, DEFAULT_CONFIG_PATH)

    config = Config.load_from_toml(path)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        config = config.replace(log_level=env_level)

    return config


# Default configuration
DEFAULT_CONFIG = Config()

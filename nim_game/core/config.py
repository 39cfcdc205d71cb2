"""
config.py
Defines the Strategy enum and the GameConfig dataclass, which centralizes all rule options for the NIM engine.
Related modules:
- engine.py: Uses GameConfig to initialize the heaps and enforce the rules.
- UI/cli.py: Builds a GameConfig from command line arguments.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .result import ConfigError

# Largest heap accepted from configuration
MAX_HEAP_SIZE = 32767


class Strategy(Enum):
    """
    Tie-break rule used by the computer when several optimal moves exist.
    """
    SMALLEST = "smallest"
    LARGEST = "largest"


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options for a NIM game.
    Fields:
        heaps (tuple): Initial number of objects per heap.
        strategy (Strategy|None): Move selection rule. None picks the first possible move.
        misere (bool): If True, the player taking the last object loses.
        upper_limit (int|None): Maximum number of objects removable in one move.
        rng_seed (int|None): Seed for the engine's random source.
    """
    heaps: Tuple[int, ...] = (3, 4, 5)
    strategy: Optional[Strategy] = Strategy.LARGEST
    misere: bool = False
    upper_limit: Optional[int] = None
    rng_seed: Optional[int] = None

    def validate(self) -> None:
        """
        Check the configuration invariants.
        Raises:
            ConfigError: If a heap is negative or too large, the upper limit is not positive,
                or the strategy is unknown.
        """
        for i, h in enumerate(self.heaps):
            if not isinstance(h, int) or isinstance(h, bool):
                raise ConfigError(f"Heap {i + 1} must be an integer, got {h!r}")
            if h < 0:
                raise ConfigError(f"Heap {i + 1} must not be negative")
            if h > MAX_HEAP_SIZE:
                raise ConfigError(f"Heap {i + 1} exceeds the maximum of {MAX_HEAP_SIZE}")
        if self.upper_limit is not None:
            if not isinstance(self.upper_limit, int) or isinstance(self.upper_limit, bool):
                raise ConfigError(f"Upper limit must be an integer, got {self.upper_limit!r}")
            if self.upper_limit <= 0:
                raise ConfigError("Upper limit of elements to be removed must be positive")
        if self.strategy is not None and not isinstance(self.strategy, Strategy):
            raise ConfigError(f"Unknown strategy: {self.strategy!r}")

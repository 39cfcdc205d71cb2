import random
from abc import ABC, abstractmethod

from ..core.engine import GameEngine
from ..core.move import Move


class Agent(ABC):
    """
    Abstract base class for all NIM players.
    Agents must implement choose_move(engine), which inspects the engine's position and returns the Move to play.
    Agents never apply the move themselves; the turn loop does.
    """

    def __init__(self, rng=None):
        """
        Args:
            rng: Optional random number generator; a fresh unseeded one is used when omitted.
        """
        self.rng = rng or random.Random()

    @abstractmethod
    def choose_move(self, engine: GameEngine) -> Move:
        """
        Given the engine of the running game, return the next Move to play.
        Args:
            engine (GameEngine): The game being played (read-only for the agent).
        Returns:
            Move: The move to play.
        Raises:
            NoMoveError: If the game is already over.
        """
        raise NotImplementedError

    @property
    def name(self) -> str:
        return type(self).__name__

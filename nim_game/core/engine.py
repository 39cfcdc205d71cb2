"""
engine.py
Implements the GameEngine class, which owns the heaps of a NIM game, computes the Nim-sum,
enumerates and selects moves for the computer, and applies moves.
Related modules:
- config.py: GameConfig is used to configure the engine.
- move.py: Move objects are generated, selected and applied.
- rules.py: Nim-sum and winning-condition helpers.
- result.py: Errors raised here and the Result returned by the try_* methods.
"""

import random
from typing import Iterator, List, Optional, Tuple

from .config import GameConfig, Strategy
from .move import Move
from .result import GameStateError, IllegalMoveError, NimError, NoMoveError, Result
from .rules import is_winning_nim_sum, xor_fold
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class GameEngine:
    """
    State machine for a NIM game. The engine has two states, in progress (objects left) and
    finished (all heaps empty); only apply() moves between them.
    Not thread-safe: callers must serialize access to one engine instance.
    """
    def __init__(self, config: GameConfig):
        """
        Initialize a new game engine with the given configuration.
        Args:
            config (GameConfig): Game configuration.
        Raises:
            ConfigError: If the configuration is invalid.
        """
        config.validate()
        self.config = config
        self.rng = random.Random(config.rng_seed)
        self._heaps: List[int] = list(config.heaps)

    @property
    def heaps(self) -> Tuple[int, ...]:
        """Current heap counts (a copy; mutate only through apply)."""
        return tuple(self._heaps)

    @property
    def strategy(self) -> Optional[Strategy]:
        return self.config.strategy

    @property
    def misere(self) -> bool:
        return self.config.misere

    @property
    def upper_limit(self) -> Optional[int]:
        return self.config.upper_limit

    @property
    def end_of_game(self) -> bool:
        return sum(self._heaps) == 0

    def is_terminal(self) -> bool:
        """
        Returns True if every heap is empty.
        """
        return self.end_of_game

    def nim_sum(self) -> int:
        """
        XOR of all heap counts.
        Returns:
            int: The Nim-sum of the current position.
        Raises:
            GameStateError: If there are no heaps or the game is over.
        """
        if not self._heaps or self.end_of_game:
            raise GameStateError("Playground not initialized or end of game.")
        return xor_fold(self._heaps)

    def nim_sum_after(self, move: Move) -> int:
        """
        Nim-sum the position would have after the move, without changing the heaps.
        Args:
            move (Move): Candidate move.
        Returns:
            int: Resulting Nim-sum.
        Raises:
            GameStateError: If there are no heaps.
            IllegalMoveError: If the move refers to an unknown heap.
        """
        if not self._heaps:
            raise GameStateError("Playground not initialized or end of game.")
        if not 0 <= move.heap < len(self._heaps):
            raise IllegalMoveError("Unknown heap index")
        rest = xor_fold(h for i, h in enumerate(self._heaps) if i != move.heap)
        return rest ^ (self._heaps[move.heap] - move.count)

    def generate_optimal_moves(self) -> Iterator[Move]:
        """
        Yield every move that leaves the Nim-sum favourable to the mover: zero in normal play,
        nonzero in misere play. Heaps are visited in ascending order, counts ascending within a heap.
        The upper limit is not applied here; see candidate_moves().
        """
        for i, size in enumerate(self._heaps):
            for count in range(1, size + 1):
                move = Move(i, count)
                if is_winning_nim_sum(self.nim_sum_after(move), self.misere):
                    yield move

    def candidate_moves(self) -> List[Move]:
        """
        Optimal moves that respect the upper limit, in enumeration order.
        """
        limit = self.upper_limit
        return [m for m in self.generate_optimal_moves() if limit is None or m.count <= limit]

    def select_move(self) -> Move:
        """
        Compute the computer's move.
        Among the optimal moves, SMALLEST takes the fewest objects and LARGEST the most
        (earliest heap on ties); without a strategy the first optimal move is taken.
        When no optimal move exists a legal fallback move is returned instead.
        Returns:
            Move: The selected move.
        Raises:
            NoMoveError: If every heap is empty.
        """
        candidates = self.candidate_moves()
        if candidates:
            if self.strategy is Strategy.SMALLEST:
                return min(candidates, key=lambda m: m.count)
            if self.strategy is Strategy.LARGEST:
                return max(candidates, key=lambda m: m.count)
            return candidates[0]
        return self._fallback_move()

    def _fallback_move(self) -> Move:
        """
        Internal: legal but non-optimal move, used when the position is already lost.
        """
        nonzero = [i for i, h in enumerate(self._heaps) if h > 0]
        if not nonzero:
            raise NoMoveError("No more moves possible.")

        if self.strategy is Strategy.SMALLEST:
            # min() keeps the lowest index among equal heaps
            i = min(nonzero, key=lambda k: self._heaps[k])
            return Move(i, 1)

        if self.strategy is Strategy.LARGEST:
            limit = self.upper_limit
            fitting = [i for i in nonzero if limit is None or self._heaps[i] <= limit]
            if fitting:
                i = max(fitting, key=lambda k: self._heaps[k])
                return Move(i, self._heaps[i])
            # every heap is above the limit: take as much as allowed from the largest
            i = max(nonzero, key=lambda k: self._heaps[k])
            return Move(i, limit)

        return Move(nonzero[0], 1)

    def select_random_move(self, rng: Optional[random.Random] = None) -> Move:
        """
        Pick a random legal move: a uniformly chosen non-empty heap, then a uniform count
        between 1 and the heap size (capped by the upper limit).
        Args:
            rng (random.Random|None): Random source; the engine's own seeded RNG if omitted.
        Returns:
            Move: The random move.
        Raises:
            NoMoveError: If every heap is empty.
        """
        rng = rng or self.rng
        nonzero = [i for i, h in enumerate(self._heaps) if h > 0]
        if not nonzero:
            raise NoMoveError("Playground not initialized or end of game.")
        heap = rng.choice(nonzero)
        most = self._heaps[heap]
        if self.upper_limit is not None:
            most = min(most, self.upper_limit)
        return Move(heap, rng.randint(1, most))

    def apply(self, move: Move) -> None:
        """
        Remove move.count objects from heap move.heap.
        Args:
            move (Move): The move to apply.
        Raises:
            IllegalMoveError: If the heap is unknown, the count is not positive, exceeds the
                objects in the heap, or exceeds the upper limit. The heaps are left unchanged.
        """
        if not 0 <= move.heap < len(self._heaps):
            raise IllegalMoveError("Unknown heap index")
        if move.count < 1:
            raise IllegalMoveError("At least one element must be removed")
        if self._heaps[move.heap] < move.count:
            raise IllegalMoveError("Removed elements exceeded number of available elements")
        if self.upper_limit is not None and self.upper_limit < move.count:
            raise IllegalMoveError("Removed elements exceeded number of allowed elements to be removed")

        self._heaps[move.heap] -= move.count
        logger.debug("Applied move %s, heaps now %s", move, self._heaps)

    def try_apply(self, move: Move) -> Result:
        """
        Non-raising apply(). Returns a Result with the ILLEGAL_MOVE kind on failure.
        """
        return self._attempt(self.apply, move)

    def try_select_move(self) -> Result:
        """Non-raising select_move(); the Result value is the Move."""
        return self._attempt(self.select_move)

    def try_select_random_move(self, rng: Optional[random.Random] = None) -> Result:
        """Non-raising select_random_move(); the Result value is the Move."""
        return self._attempt(self.select_random_move, rng)

    def _attempt(self, fn, *args) -> Result:
        try:
            return Result.success(fn(*args))
        except NimError as e:
            return Result.failure(e)

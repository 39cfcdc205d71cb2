"""
rules.py
Defines helper functions for NIM rules: the Nim-sum and the winning condition.
Related modules:
- engine.py: Uses these helpers to filter candidate moves.
"""

from functools import reduce
from operator import xor
from typing import Iterable


def xor_fold(heaps: Iterable[int]) -> int:
    """
    Bitwise XOR of all heap counts (the Nim-sum).
    Args:
        heaps (iterable): Heap counts.
    Returns:
        int: XOR of all values, 0 for an empty iterable.
    """
    return reduce(xor, heaps, 0)


def is_winning_nim_sum(nim_sum: int, misere: bool = False) -> bool:
    """
    Whether the Nim-sum left behind by a move favours the player who made it.
    Normal play wants 0, misere play wants anything else.
    """
    if misere:
        return nim_sum != 0
    return nim_sum == 0


def last_mover_wins(misere: bool = False) -> bool:
    """
    Whether the player who empties the last heap wins the game.
    """
    return not misere

"""
move.py
Defines the Move model for NIM, including its text form '<heap>:<count>'.
Related modules:
- engine.py: Generates, selects and applies Move objects.
- result.py: MoveParseError is raised by Move.parse.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .result import MoveParseError

# ASCII digits only, optional sign, surrounding blanks allowed
_NUMBER = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


@dataclass(frozen=True)
class Move:
    """
    Represents a single move in NIM: remove 'count' objects from heap 'heap'.
    Args:
        heap (int): Zero-based heap index.
        count (int): Number of objects removed (>= 1).
    """
    heap: int
    count: int

    def __str__(self) -> str:
        return f"{self.heap + 1}:{self.count}"

    @classmethod
    def parse(cls, text: str) -> "Move":
        """
        Convert the text form of a move into a Move.
        The heap number in the text is 1-based; the resulting Move uses a 0-based index.
        Args:
            text (str): Text such as '2:3' (heap 2, three objects).
        Returns:
            Move: The parsed move.
        Raises:
            MoveParseError: If the text is malformed or heap/count are not positive.
        """
        if text is None:
            raise MoveParseError("Invalid input format")
        parts = text.split(":")
        if len(parts) != 2:
            raise MoveParseError(f"Invalid input format: '{text}'")
        if not all(_NUMBER.fullmatch(p) for p in parts):
            raise MoveParseError(f"Invalid input format: '{text}'")
        heap = int(parts[0])
        count = int(parts[1])
        if heap < 1:
            raise MoveParseError("Heap number must be 1 or greater")
        if count < 1:
            raise MoveParseError("Count must be 1 or greater")
        return cls(heap - 1, count)

    @classmethod
    def try_parse(cls, text: str) -> Optional["Move"]:
        """
        Like parse, but returns None instead of raising on malformed input.
        """
        try:
            return cls.parse(text)
        except MoveParseError:
            return None

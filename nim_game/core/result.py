"""
result.py
Defines the error taxonomy of the NIM engine and the Result value returned by the non-raising engine calls.
Related modules:
- engine.py: Raises these errors and wraps them into Result objects in the try_* methods.
- move.py: Raises MoveParseError from Move.parse.
- config.py: Raises ConfigError from GameConfig.validate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """
    Categories of failures a caller can receive from the engine.
    """
    INVALID_STATE = "invalid_state"
    ILLEGAL_MOVE = "illegal_move"
    MALFORMED_MOVE = "malformed_move"
    NO_MOVE = "no_move"
    INVALID_CONFIG = "invalid_config"


class NimError(Exception):
    """
    Base class for every error raised by the NIM engine.
    """
    kind = None


class GameStateError(NimError):
    """
    Raised when the game is queried in a state where the query is undefined (no heaps, or game over).
    """
    kind = ErrorKind.INVALID_STATE


class IllegalMoveError(NimError):
    """
    Raised when a move cannot be applied (unknown heap, too many objects, above the upper limit).
    """
    kind = ErrorKind.ILLEGAL_MOVE


class MoveParseError(NimError, ValueError):
    """
    Raised by Move.parse when the text is not of the form '<heap>:<count>'.
    """
    kind = ErrorKind.MALFORMED_MOVE


class NoMoveError(NimError):
    """
    Raised when a move is requested but every heap is empty.
    """
    kind = ErrorKind.NO_MOVE


class ConfigError(NimError, ValueError):
    """
    Raised when a GameConfig breaks one of its invariants.
    """
    kind = ErrorKind.INVALID_CONFIG


@dataclass(frozen=True)
class Result:
    """
    Explicit outcome of a fallible engine call.
    Fields:
        value: The returned value on success (None for calls without a value).
        error (ErrorKind|None): Kind of failure, None on success.
        message (str): Human readable failure description.
    """
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, exc: NimError) -> "Result":
        return cls(error=exc.kind, message=str(exc))

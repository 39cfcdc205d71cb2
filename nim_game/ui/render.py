"""
render.py
Pure text rendering for NIM positions and move hints. Nothing here prints; callers decide where the text goes.
Related modules:
- engine.py: Source of heaps, Nim-sum and candidate moves.
- UI/cli.py: Prints the rendered text.
"""

from typing import Iterable, List, Optional, Sequence

from ..core.move import Move
from ..core.rules import xor_fold

COLORS = {
    "yellow": "\033[93m",
    "green": "\033[92m",
    "red": "\033[91m",
    "cyan": "\033[96m",
    "dark_cyan": "\033[36m",
}
RESET = "\033[0m"

# Verbosity levels understood by render_position
BOARD = 1
BOARD_XOR = 2
BINARY_XOR = 3
BINARY_XOR_MOVES = 4


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """
    Wrap text in ANSI colour codes.
    Args:
        text (str): Text to colour; may span several lines.
        color (str): Key of COLORS.
        enabled (bool): If False the text is returned unchanged.
    Returns:
        str: Coloured text.
    """
    if not enabled or not text:
        return text
    return f"{COLORS[color]}{text}{RESET}"


def format_heaps(heaps: Sequence[int], nim_sum: Optional[int] = None) -> str:
    """
    One-line decimal view of the heaps, e.g. '     3     4     5 XOR     2'.
    """
    line = "".join(f" {h:5}" for h in heaps)
    if nim_sum is not None:
        line += f" XOR {nim_sum:5}"
    return line


def _bits(value: int, wide: bool) -> str:
    if wide:
        return f"{value >> 8:08b} {value & 0xFF:08b}"
    return f"{value:08b}"


def format_heaps_binary(heaps: Sequence[int], nim_sum: Optional[int] = None) -> str:
    """
    Binary view of the heaps, one numbered line per heap.
    Heaps are shown as one byte, or as two space-separated bytes as soon as any heap exceeds 255.
    With a Nim-sum a rule and an 'XOR:' line close the table, otherwise a blank line does.
    Args:
        heaps (sequence): Heap counts.
        nim_sum (int|None): Nim-sum to display, or None.
    Returns:
        str: Multi-line text without a trailing newline.
    """
    wide = bool(heaps) and max(heaps) > 0xFF
    lines: List[str] = [f"{n:3}: {_bits(h, wide)} = {h:5}" for n, h in enumerate(heaps, start=1)]
    if nim_sum is not None:
        lines.append("     " + ("-------- --------" if wide else "--------"))
        lines.append(f"XOR: {_bits(nim_sum, wide)} = {nim_sum:5}")
    else:
        lines.append("")
    return "\n".join(lines)


def format_moves(moves: Iterable[Move]) -> str:
    """
    Hint text listing the given moves, one per line.
    """
    lines = [f"\t Move {m} possible" for m in moves]
    if not lines:
        return "\t No more optimal move possible"
    return "\n".join(lines)


def render_position(engine, verbosity: int = 0, color: bool = False) -> str:
    """
    Verbose board display used between moves.
    Args:
        engine (GameEngine): Game to display.
        verbosity (int): 0 nothing, 1 board, 2 board with XOR, 3 binary board with XOR,
            4 binary board with XOR and optimal-move hints.
        color (bool): Use ANSI colours.
    Returns:
        str: Text to print, empty for verbosity 0.
    """
    if verbosity <= 0:
        return ""
    heaps = engine.heaps
    nim_sum = xor_fold(heaps)
    if verbosity == BOARD:
        return colorize(format_heaps(heaps), "yellow", color)
    if verbosity == BOARD_XOR:
        return colorize(format_heaps(heaps, nim_sum), "yellow", color)
    parts = [colorize(format_heaps_binary(heaps, nim_sum), "yellow", color)]
    if verbosity >= BINARY_XOR_MOVES:
        parts.append(colorize(format_moves(engine.candidate_moves()), "dark_cyan", color))
    return "\n".join(parts)

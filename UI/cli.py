"""
cli.py
Command line front end for NIM: parses arguments into a GameConfig, then either lets a human play against
the computer or lets two agents play each other.
Usage: nim 3 4 5 [-f] [-s|-l] [-u M] [-m] [-v|-vv|-vvv|-vvvv] [-c] [--auto self|random]
"""

import argparse
import sys
import time
from typing import List, Optional

from nim_game.agents import create_agent
from nim_game.agents.base import Agent
from nim_game.core.config import GameConfig, MAX_HEAP_SIZE, Strategy
from nim_game.core.engine import GameEngine
from nim_game.core.move import Move
from nim_game.core.result import ConfigError
from nim_game.core.rules import last_mover_wins
from nim_game.ui.render import colorize, format_moves, render_position
from nim_game.utils.logging_config import get_logger, setup_logging

logger = get_logger("nim")

PROMPT = "YOUR MOVE? ([Heap]:[Count]) "
EPILOG = """\
After the start of the command you have to enter your moves in [Heap]:[Count] format.
[Heap] represents the number of the heap and [Count] the number of objects taken.
You get a hint by entering a question mark instead of a move."""


def heap_size(s: str) -> int:
    """
    argparse type for a heap size: an integer between 0 and MAX_HEAP_SIZE.
    """
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Unknown command line parameter '{s}'.")
    if not 0 <= value <= MAX_HEAP_SIZE:
        raise argparse.ArgumentTypeError(f"Command line parameter '{s}' out of range.")
    return value


def positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError:
        value = 0
    if value <= 0:
        raise argparse.ArgumentTypeError("Upper limit of elements to be removed is illegal or missing.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nim",
        description="Play NIM against a computer that never misses a winning move.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("heaps", nargs="+", type=heap_size, metavar="N", help="Number of elements in heap.")
    parser.add_argument("-f", dest="first", action="store_true", help="First move by computer.")
    strategy = parser.add_mutually_exclusive_group()
    strategy.add_argument("-s", dest="strategy", action="store_const", const=Strategy.SMALLEST,
                          help="Smallest move by computer.")
    strategy.add_argument("-l", dest="strategy", action="store_const", const=Strategy.LARGEST,
                          help="Largest move by computer (default).")
    parser.set_defaults(strategy=Strategy.LARGEST)
    parser.add_argument("-u", dest="upper", type=positive_int, metavar="M",
                        help="M is the upper limit of elements to be removed.")
    parser.add_argument("-m", dest="misere", action="store_true", help="Misere game in which last element taken loses.")
    parser.add_argument("-v", dest="verbosity", action="count", default=0,
                        help="Verbose output: -v board, -vv with XOR value, -vvv binary board, -vvvv with possible moves.")
    parser.add_argument("-c", dest="color", action="store_true", help="Colorized output.")
    parser.add_argument("--auto", choices=["self", "random"], default=None,
                        help="Let the computer play both sides (optimal or random moves).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random moves.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    return parser


def config_from_args(args: argparse.Namespace) -> GameConfig:
    """
    Build and validate the GameConfig described by parsed arguments.
    Raises:
        ConfigError: If the configuration is invalid.
    """
    cfg = GameConfig(
        heaps=tuple(args.heaps),
        strategy=args.strategy,
        misere=args.misere,
        upper_limit=args.upper,
        rng_seed=args.seed,
    )
    cfg.validate()
    return cfg


def format_elapsed(seconds: float) -> str:
    """Elapsed time as hh:mm:ss."""
    total = int(seconds)
    return f"{total // 3600:02}:{total % 3600 // 60:02}:{total % 60:02}"


def show(engine: GameEngine, verbosity: int, color: bool) -> None:
    text = render_position(engine, verbosity, color)
    if text:
        print(text)


def computer_turn(engine: GameEngine, verbosity: int, color: bool) -> bool:
    """
    Let the computer select and apply its move.
    Returns:
        bool: False if no move could be made.
    """
    result = engine.try_select_move()
    if not result.ok:
        logger.error(result.message)
        return False
    move = result.value
    print(colorize(f"MY MOVE    ([Heap]:[Count]) {move}", "cyan", color))
    engine.apply(move)
    show(engine, verbosity, color)
    return True


def play_interactive(engine: GameEngine, first: bool = False, verbosity: int = 0, color: bool = False) -> Optional[bool]:
    """
    Human against computer. The human enters moves as '<heap>:<count>' or '?' for a hint.
    Args:
        engine (GameEngine): Game to play.
        first (bool): If True the computer moves first.
        verbosity (int): Board display level (see render_position).
        color (bool): Use ANSI colours.
    Returns:
        bool|None: True if the human won, False if the computer won, None if the game was abandoned.
    """
    started = time.monotonic()

    def finish(human_moved_last: bool) -> bool:
        human_won = human_moved_last == last_mover_wins(engine.misere)
        elapsed = format_elapsed(time.monotonic() - started)
        print(colorize(f"YOU {'WIN' if human_won else 'LOST'} AFTER {elapsed}", "red", color))
        return human_won

    show(engine, verbosity, color)

    if first and not engine.is_terminal():
        if not computer_turn(engine, verbosity, color):
            return None
        if engine.is_terminal():
            return finish(human_moved_last=False)

    while not engine.is_terminal():
        try:
            text = input(colorize(PROMPT, "green", color))
        except EOFError:
            print()
            return None

        if text.strip() == "?":
            print(colorize(format_moves(engine.candidate_moves()), "dark_cyan", color))
            continue

        move = Move.try_parse(text)
        if move is None:
            logger.error("Invalid input format")
            continue

        result = engine.try_apply(move)
        if not result.ok:
            logger.error(result.message)
            continue
        show(engine, verbosity, color)
        if engine.is_terminal():
            return finish(human_moved_last=True)

        if not computer_turn(engine, verbosity, color):
            return None
        if engine.is_terminal():
            return finish(human_moved_last=False)
    return None


def play_auto(engine: GameEngine, agents: List[Agent], verbosity: int = 1, color: bool = False) -> Optional[int]:
    """
    Let two agents play each other until the heaps are empty.
    Args:
        engine (GameEngine): Game to play.
        agents (list): Agent for the 1st and the 2nd player.
        verbosity (int): Board display level; at least the plain board is shown.
        color (bool): Use ANSI colours.
    Returns:
        int|None: Index of the winning player (0 = 1st, 1 = 2nd), None if the heaps were empty from the start.
    """
    turns = 0
    while not engine.is_terminal():
        move = agents[turns % 2].choose_move(engine)
        print(move)
        engine.apply(move)
        show(engine, max(verbosity, 1), color)
        turns += 1
    if turns == 0:
        return None
    last_mover = (turns - 1) % 2
    winner = last_mover if last_mover_wins(engine.misere) else 1 - last_mover
    print(colorize(f"END OF GAME - {'1st' if winner == 0 else '2nd'} player wins.", "red", color))
    return winner


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    setup_logging(args.log_level, format_style="plain")

    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        logger.error(str(e))
        parser.print_help()
        return 1
    engine = GameEngine(cfg)

    try:
        if args.auto == "self":
            play_auto(engine, [create_agent("optimal"), create_agent("optimal")], args.verbosity, args.color)
        elif args.auto == "random":
            agents = [create_agent("random", rng=engine.rng), create_agent("random", rng=engine.rng)]
            play_auto(engine, agents, args.verbosity, args.color)
        else:
            play_interactive(engine, first=args.first, verbosity=args.verbosity, color=args.color)
    except KeyboardInterrupt:
        print("\nExiting play loop.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

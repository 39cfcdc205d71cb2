import io
import random
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from UI.cli import build_parser, config_from_args, format_elapsed, main, play_auto, play_interactive
from nim_game.agents.optimal_agent import OptimalAgent
from nim_game.agents.random_agent import RandomAgent
from nim_game.core.config import GameConfig, Strategy
from nim_game.core.engine import GameEngine


def run_interactive(engine, inputs, **kwargs):
    out = io.StringIO()
    with patch('builtins.input', side_effect=inputs), redirect_stdout(out):
        result = play_interactive(engine, **kwargs)
    return result, out.getvalue()


class TestArguments(unittest.TestCase):
    def parse(self, argv):
        return build_parser().parse_intermixed_args(argv)

    def test_all_switches(self):
        args = self.parse(["3", "4", "-s", "-u", "2", "5", "-m", "-vvv", "-c", "-f"])
        self.assertEqual(args.heaps, [3, 4, 5])
        self.assertEqual(args.strategy, Strategy.SMALLEST)
        self.assertEqual(args.upper, 2)
        self.assertTrue(args.misere)
        self.assertEqual(args.verbosity, 3)
        self.assertTrue(args.color)
        self.assertTrue(args.first)

    def test_defaults(self):
        args = self.parse(["7"])
        self.assertEqual(args.strategy, Strategy.LARGEST)
        self.assertIsNone(args.upper)
        self.assertEqual(args.verbosity, 0)
        cfg = config_from_args(args)
        self.assertEqual(cfg, GameConfig(heaps=(7,), strategy=Strategy.LARGEST))

    def test_invalid_arguments_exit(self):
        for argv in (["3", "-u", "0"], ["40000"], ["x"], [], ["3", "-s", "-l"]):
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                self.parse(argv)

    def test_format_elapsed(self):
        self.assertEqual(format_elapsed(0), "00:00:00")
        self.assertEqual(format_elapsed(3725.9), "01:02:05")


class TestInteractive(unittest.TestCase):
    def test_computer_wins_from_zero_position(self):
        engine = GameEngine(GameConfig(heaps=(1, 2, 3)))
        result, out = run_interactive(engine, ["3:3", "1:1"])
        self.assertFalse(result)
        self.assertIn("MY MOVE    ([Heap]:[Count]) 2:1", out)
        self.assertIn("YOU LOST AFTER 00:00:", out)
        self.assertTrue(engine.is_terminal())

    def test_bad_input_is_reported_and_reprompted(self):
        engine = GameEngine(GameConfig(heaps=(1, 2, 3)))
        with self.assertLogs("nim", level="ERROR") as logs:
            result, out = run_interactive(engine, ["bogus", "9:1", "1:5", "?", "3:3", "1:1"])
        self.assertFalse(result)
        messages = " ".join(logs.output)
        self.assertIn("Invalid input format", messages)
        self.assertIn("Unknown heap index", messages)
        self.assertIn("Removed elements exceeded number of available elements", messages)
        self.assertIn("\t No more optimal move possible", out)

    def test_human_takes_last_object(self):
        result, out = run_interactive(GameEngine(GameConfig(heaps=(1,))), ["1:1"])
        self.assertTrue(result)
        self.assertIn("YOU WIN AFTER", out)

    def test_misere_inverts_outcome(self):
        result, out = run_interactive(GameEngine(GameConfig(heaps=(1,), misere=True)), ["1:1"])
        self.assertFalse(result)
        self.assertIn("YOU LOST AFTER", out)

    def test_computer_moves_first(self):
        engine = GameEngine(GameConfig(heaps=(1, 2, 4)))
        result, out = run_interactive(engine, EOFError(), first=True)
        self.assertIsNone(result)
        self.assertIn("MY MOVE    ([Heap]:[Count]) 3:1", out)
        self.assertEqual(engine.heaps, (1, 2, 3))

    def test_computer_first_takes_whole_heap(self):
        result, out = run_interactive(GameEngine(GameConfig(heaps=(3,))), [], first=True)
        self.assertFalse(result)
        self.assertIn("MY MOVE    ([Heap]:[Count]) 1:3", out)

    def test_verbose_board_is_printed(self):
        engine = GameEngine(GameConfig(heaps=(1,)))
        result, out = run_interactive(engine, ["1:1"], verbosity=2)
        self.assertIn("     1 XOR     1", out)
        self.assertIn("     0 XOR     0", out)


class TestAutoPlay(unittest.TestCase):
    def test_optimal_self_play(self):
        engine = GameEngine(GameConfig(heaps=(3, 4, 5)))
        with redirect_stdout(io.StringIO()) as out:
            winner = play_auto(engine, [OptimalAgent(), OptimalAgent()])
        self.assertEqual(winner, 0)
        self.assertIn("END OF GAME - 1st player wins.", out.getvalue())

    def test_random_play_finishes(self):
        engine = GameEngine(GameConfig(heaps=(5, 6), upper_limit=2))
        agents = [RandomAgent(rng=random.Random(4)), RandomAgent(rng=random.Random(5))]
        with redirect_stdout(io.StringIO()):
            winner = play_auto(engine, agents, verbosity=0)
        self.assertIn(winner, (0, 1))
        self.assertTrue(engine.is_terminal())

    def test_misere_auto_play_inverts_winner(self):
        engine = GameEngine(GameConfig(heaps=(1,), misere=True))
        with redirect_stdout(io.StringIO()) as out:
            winner = play_auto(engine, [OptimalAgent(), OptimalAgent()])
        self.assertEqual(winner, 1)
        self.assertIn("2nd player wins", out.getvalue())

    def test_empty_game(self):
        with redirect_stdout(io.StringIO()):
            self.assertIsNone(play_auto(GameEngine(GameConfig(heaps=(0,))), [OptimalAgent(), OptimalAgent()]))


class TestMain(unittest.TestCase):
    def test_main_self_play(self):
        with redirect_stdout(io.StringIO()) as out:
            code = main(["1", "2", "--auto", "self"])
        self.assertEqual(code, 0)
        self.assertIn("END OF GAME - 1st player wins.", out.getvalue())

    def test_main_random_play_is_seeded(self):
        outputs = []
        for _ in range(2):
            with redirect_stdout(io.StringIO()) as out:
                main(["4", "5", "6", "--auto", "random", "--seed", "9"])
            outputs.append(out.getvalue())
        self.assertEqual(outputs[0], outputs[1])

    def test_main_interactive(self):
        with patch('builtins.input', side_effect=["1:1"]), redirect_stdout(io.StringIO()) as out:
            code = main(["1"])
        self.assertEqual(code, 0)
        self.assertIn("YOU WIN", out.getvalue())


if __name__ == '__main__':
    unittest.main()

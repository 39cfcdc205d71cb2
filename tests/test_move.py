import unittest
from nim_game.core.move import Move
from nim_game.core.result import MoveParseError


class TestMoveText(unittest.TestCase):
    """
    Tests for the '<heap>:<count>' text form of a Move:
      - the heap number in text is 1-based, the Move index is 0-based,
      - try_parse returns None instead of raising on bad input.
    """

    def test_parse_converts_heap_to_zero_based(self):
        m = Move.parse("2:3")
        self.assertEqual(m, Move(1, 3))
        self.assertEqual(m.heap, 1)
        self.assertEqual(m.count, 3)

    def test_str_is_one_based(self):
        self.assertEqual(str(Move(0, 7)), "1:7")

    def test_round_trip(self):
        for h in (1, 2, 9, 10, 123):
            for c in (1, 5, 32767):
                text = f"{h}:{c}"
                self.assertEqual(str(Move.parse(text)), text)

    def test_whitespace_around_numbers_is_accepted(self):
        self.assertEqual(Move.try_parse(" 2 : 3 "), Move(1, 3))

    def test_try_parse_rejects_malformed_input(self):
        for text in ("", "abc", "1", "1:", ":1", "1:2:3", "a:1", "1:b", "0:1", "1:0", "-1:2", "1:-2",
                     "1_0:1", "1:1_0", "\uff11:\uff12", "1:\u0662", None):
            self.assertIsNone(Move.try_parse(text), text)

    def test_parse_raises_value_error(self):
        with self.assertRaises(MoveParseError):
            Move.parse("1:0")
        with self.assertRaises(ValueError):
            Move.parse("x")

    def test_move_is_immutable(self):
        m = Move(0, 1)
        with self.assertRaises(Exception):
            m.count = 2


if __name__ == '__main__':
    unittest.main()

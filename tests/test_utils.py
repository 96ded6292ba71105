# tests/test_utils.py

import unittest

from backend.errors import InputError
from backend.utils import (
    BAD_COORDINATES,
    BOARD_TOO_SMALL,
    NOT_AN_INTEGER,
    OFF_THE_BOARD,
    TOO_MANY_MINES,
    get_neighbors,
    parse_board_size,
    parse_coordinates,
    parse_mine_count,
)


class TestGetNeighbors(unittest.TestCase):

    def test_clipped_at_corner(self):
        self.assertEqual(sorted(get_neighbors(2, 2, 3)), [(1, 1), (1, 2), (2, 1)])

    def test_full_neighborhood(self):
        self.assertEqual(len(get_neighbors(1, 1, 3)), 8)


class TestParsing(unittest.TestCase):

    def assertInputError(self, message, fn, *args):
        with self.assertRaises(InputError) as ctx:
            fn(*args)
        self.assertEqual(str(ctx.exception), message)

    def test_board_size(self):
        self.assertEqual(parse_board_size("10"), 10)
        self.assertEqual(parse_board_size(" 2\n"), 2)
        self.assertInputError(NOT_AN_INTEGER, parse_board_size, "ten")
        self.assertInputError(NOT_AN_INTEGER, parse_board_size, "-4")
        self.assertInputError(BOARD_TOO_SMALL, parse_board_size, "1")

    def test_mine_count(self):
        self.assertEqual(parse_mine_count("0", 3), 0)
        self.assertEqual(parse_mine_count("8", 3), 8)
        self.assertInputError(TOO_MANY_MINES, parse_mine_count, "9", 3)
        self.assertInputError(NOT_AN_INTEGER, parse_mine_count, "", 3)

    def test_coordinates(self):
        self.assertEqual(parse_coordinates("1,1", 3), (0, 0))
        self.assertEqual(parse_coordinates("3, 2", 3), (2, 1))
        self.assertInputError(BAD_COORDINATES, parse_coordinates, "1 1", 3)
        self.assertInputError(BAD_COORDINATES, parse_coordinates, "a,b", 3)
        self.assertInputError(OFF_THE_BOARD, parse_coordinates, "4,1", 3)
        self.assertInputError(OFF_THE_BOARD, parse_coordinates, "0,1", 3)


if __name__ == "__main__":
    unittest.main()

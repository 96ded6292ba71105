# backend/utils.py

import re
from typing import List, Tuple

from .errors import InputError

NEIGHBOR_OFFSETS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),          (0, 1),
    (1, -1), (1, 0), (1, 1)
]

INTEGER_PATTERN = re.compile(r"^\d+$")
COORDINATE_PATTERN = re.compile(r"^(\d+),\s*(\d+)$")

NOT_AN_INTEGER = "You need to type a positive integer (e.g. 10):"
BOARD_TOO_SMALL = "The board size needs to be at least 2."
TOO_MANY_MINES = "You need fewer mines than spaces on the board!"
BAD_COORDINATES = "Please type in a valid row,column pair"
OFF_THE_BOARD = "Your values must be on the board"


def get_neighbors(row: int, col: int, size: int) -> List[Tuple[int, int]]:
    """
    Return the valid neighboring coordinates (8-way) of (row, col) on a
    size x size board. Positions off the board are skipped.
    """
    neighbors = []
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < size and 0 <= nc < size:
            neighbors.append((nr, nc))
    return neighbors


def _parse_integer(text: str) -> int:
    text = text.strip()
    if not INTEGER_PATTERN.match(text):
        raise InputError(NOT_AN_INTEGER)
    return int(text)


def parse_board_size(text: str) -> int:
    size = _parse_integer(text)
    if size < 2:
        raise InputError(BOARD_TOO_SMALL)
    return size


def parse_mine_count(text: str, size: int) -> int:
    mines = _parse_integer(text)
    if mines > size * size - 1:
        raise InputError(TOO_MANY_MINES)
    return mines


def parse_coordinates(text: str, size: int) -> Tuple[int, int]:
    """
    Parse a 1-indexed "row,col" pair typed by the player and return the
    0-indexed (row, col) the board works with.
    """
    match = COORDINATE_PATTERN.match(text.strip())
    if match is None:
        raise InputError(BAD_COORDINATES)

    row, col = int(match.group(1)), int(match.group(2))
    if not (1 <= row <= size and 1 <= col <= size):
        raise InputError(OFF_THE_BOARD)
    return row - 1, col - 1

import logging
import random
from enum import Enum

from .errors import InvalidConstructionParameters, OutOfRange
from .utils import get_neighbors

logger = logging.getLogger(__name__)

HIDDEN_MARKER = "X"
MINE_MARKER = "M"


class Outcome(Enum):
    ALREADY_REVEALED = "already_revealed"
    CONTINUE = "continue"
    WIN = "win"
    GAME_OVER = "game_over"

    @property
    def is_terminal(self) -> bool:
        return self in (Outcome.WIN, Outcome.GAME_OVER)


class Cell:
    """
    A single grid position. Mine status is fixed at creation, the adjacency
    count only grows while mines are being placed, and a cell can be
    revealed once and never hidden again.
    """

    def __init__(self, row: int, col: int, mine: bool = False):
        self._row = row
        self._col = col
        self._mine = mine
        self.adjacent_mines = 0
        self._revealed = False

    @property
    def row(self):
        return self._row

    @property
    def col(self):
        return self._col

    def is_mine(self) -> bool:
        return self._mine

    def is_revealed(self) -> bool:
        return self._revealed

    def has_adjacent_mines(self) -> bool:
        return self.adjacent_mines != 0

    def reveal(self):
        self._revealed = True

    def increment_adjacency(self):
        if self._mine:
            raise ValueError(f"mine cell ({self._row}, {self._col}) has no adjacency count")
        self.adjacent_mines += 1

    def render(self, reveal_all=False, hidden_marker=HIDDEN_MARKER, mine_marker=MINE_MARKER) -> str:
        if not (self._revealed or reveal_all):
            return hidden_marker
        if self._mine:
            return mine_marker
        return str(self.adjacent_mines)

    def __repr__(self):
        return f"Cell(row={self._row}, col={self._col}, mine={self._mine})"


class Board:
    def __init__(
        self,
        size,
        num_mines,
        seed=None,
        mine_positions=None,
        hidden_marker=HIDDEN_MARKER,
        mine_marker=MINE_MARKER
    ):
        """
        size:
            Side length of the square board, at least 2.

        num_mines:
            Number of mines, from 0 up to size * size - 1.

        seed:
            Seeds the board's own RNG so that layouts can be reproduced.
            None draws from OS entropy.

        mine_positions:
            Optional iterable of (row, col) pairs. When given, mines are put
            exactly there instead of at random; there must be num_mines
            distinct positions, all on the board.
        """
        self._validate(size, num_mines, seed)

        self._size = size
        self._num_mines = num_mines
        self.rng = random.Random(seed)
        self.hidden_marker = hidden_marker
        self.mine_marker = mine_marker

        self.grid = [[Cell(r, c) for c in range(size)] for r in range(size)]
        self._revealed_count = 0

        if mine_positions is None:
            self.place_mines()
        else:
            self._place_mines_at(self._validate_positions(mine_positions))

    @staticmethod
    def _validate(size, num_mines, seed=None):
        if isinstance(size, bool) or not isinstance(size, int) or size < 2:
            raise InvalidConstructionParameters(
                f"Board size must be an integer of at least 2, got {size!r}"
            )
        if isinstance(num_mines, bool) or not isinstance(num_mines, int):
            raise InvalidConstructionParameters(
                f"Mine count must be an integer, got {num_mines!r}"
            )
        if not 0 <= num_mines <= size * size - 1:
            raise InvalidConstructionParameters(
                f"Cannot place {num_mines} mines on a {size}x{size} board: "
                f"need between 0 and {size * size - 1}."
            )
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise InvalidConstructionParameters(f"Seed must be an integer or None, got {seed!r}")

    def _validate_positions(self, mine_positions):
        positions = [tuple(p) for p in mine_positions]
        if len(positions) != self._num_mines:
            raise InvalidConstructionParameters(
                f"Expected {self._num_mines} mine positions, got {len(positions)}"
            )
        if len(set(positions)) != len(positions):
            raise InvalidConstructionParameters("Mine positions must be distinct")
        for row, col in positions:
            if not self.is_valid_coord(row, col):
                raise InvalidConstructionParameters(
                    f"Mine position ({row}, {col}) is not on the board"
                )
        return positions

    @property
    def size(self):
        return self._size

    @property
    def num_mines(self):
        return self._num_mines

    @property
    def revealed_count(self):
        return self._revealed_count

    @property
    def safe_cells(self):
        """Number of reveals needed to win."""
        return self._size * self._size - self._num_mines

    def place_mines(self):
        """
        Put num_mines mines at random distinct positions. A drawn position
        that already holds a mine is redrawn until a free one comes up.
        """
        for _ in range(self._num_mines):
            while True:
                row = self.rng.randrange(self._size)
                col = self.rng.randrange(self._size)
                if not self.grid[row][col].is_mine():
                    break
            self._put_mine(row, col)

        logger.debug("Placed %d mines on a %dx%d board", self._num_mines, self._size, self._size)

    def _place_mines_at(self, positions):
        for row, col in positions:
            self._put_mine(row, col)
        logger.debug("Placed %d mines at fixed positions", len(positions))

    def _put_mine(self, row, col):
        self.grid[row][col] = Cell(row, col, mine=True)
        for neighbor in self.neighbors_to(row, col):
            if not neighbor.is_mine():
                neighbor.increment_adjacency()

    def is_valid_coord(self, row, col):
        return (
            isinstance(row, int) and not isinstance(row, bool)
            and isinstance(col, int) and not isinstance(col, bool)
            and 0 <= row < self._size and 0 <= col < self._size
        )

    def cell(self, row, col) -> Cell:
        if not self.is_valid_coord(row, col):
            raise OutOfRange(row, col, self._size)
        return self.grid[row][col]

    def neighbors_to(self, row, col):
        """Cells in the Moore neighborhood of (row, col), clipped at the edges."""
        return [self.grid[nr][nc] for nr, nc in get_neighbors(row, col, self._size)]

    def reveal(self, row: int, col: int) -> Outcome:
        """
        Reveal (row, col) and flood-fill outwards from it.

        The fill runs off an explicit stack rather than recursion, so large
        empty boards cannot exhaust the call stack. Cells revealed before a
        mine is popped stay revealed.
        """
        cell = self.cell(row, col)
        if cell.is_revealed():
            return Outcome.ALREADY_REVEALED

        stack = [cell]
        while stack:
            cell = stack.pop()

            # another branch of this fill got here first
            if cell.is_revealed():
                continue

            cell.reveal()
            self._revealed_count += 1

            if cell.is_mine():
                logger.debug("Mine hit at (%d, %d)", cell.row, cell.col)
                return Outcome.GAME_OVER

            if not cell.has_adjacent_mines():
                for neighbor in self.neighbors_to(cell.row, cell.col):
                    if not (neighbor.is_mine() or neighbor.is_revealed()):
                        stack.append(neighbor)

        logger.debug(
            "Reveal at (%d, %d): %d/%d safe cells revealed",
            row, col, self._revealed_count, self.safe_cells
        )
        if self._revealed_count == self.safe_cells:
            return Outcome.WIN
        return Outcome.CONTINUE

    def render(self, reveal_all=False) -> str:
        return "\n".join(
            "".join(
                cell.render(reveal_all, self.hidden_marker, self.mine_marker)
                for cell in row
            )
            for row in self.grid
        )

    def get_visible_state(self, reveal_all=False):
        """
        JSON-friendly view of the board: None for hidden cells, the
        adjacency count for revealed safe cells and the mine marker for
        mines.
        """
        state = []
        for row in self.grid:
            row_cells = []
            for cell in row:
                if not (cell.is_revealed() or reveal_all):
                    row_cells.append(None)
                elif cell.is_mine():
                    row_cells.append(self.mine_marker)
                else:
                    row_cells.append(cell.adjacent_mines)
            state.append(row_cells)
        return state

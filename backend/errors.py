# backend/errors.py


class MinesweeperError(Exception):
    """Base class for every error raised by the game."""


class InvalidConstructionParameters(MinesweeperError, ValueError):
    """Board size, mine count or injected mine layout is not valid."""


class OutOfRange(MinesweeperError, IndexError):
    """A (row, col) pair does not lie on the board."""

    def __init__(self, row, col, size):
        super().__init__(f"({row}, {col}) is outside a {size}x{size} board")
        self.row = row
        self.col = col
        self.size = size


class InputError(MinesweeperError, ValueError):
    """User input failed validation. The message is shown back to the player."""


class ConfigError(MinesweeperError, ValueError):
    pass

# backend/game.py

import logging

from .board import Board, Outcome

logger = logging.getLogger(__name__)

MESSAGES = {
    Outcome.ALREADY_REVEALED: "You've already looked there!",
    Outcome.CONTINUE: "",
    Outcome.WIN: "Congratulations! You win!",
    Outcome.GAME_OVER: "You hit a mine! Game over!",
}


class GameSession:
    """
    A wrapper around Board that manages game state and turn flow.
    """

    def __init__(self, size: int, num_mines: int, seed: int = None, mine_positions=None, board_options: dict = None):
        self.size = size
        self.num_mines = num_mines
        self.seed = seed
        self.mine_positions = mine_positions
        self.board_options = board_options or {}

        self.reset()

    def reveal(self, row: int, col: int) -> dict:
        """
        Reveal (row, col) on the board. Once the game is over this is a
        no-op. Returns a dict describing the game state after the move.
        """
        if self.game_over:
            return self.get_state()

        outcome = self.board.reveal(row, col)
        self.outcome = outcome
        self.message = MESSAGES[outcome]

        if outcome is not Outcome.ALREADY_REVEALED:
            self.moves_made += 1
        if outcome is Outcome.GAME_OVER:
            self.game_over = True
            self.won = False
        elif outcome is Outcome.WIN:
            self.game_over = True
            self.won = True

        if outcome.is_terminal:
            logger.info("Game finished after %d moves: %s", self.moves_made, outcome.value)
        return self.get_state()

    def get_state(self) -> dict:
        """
        Return the current visible board and game status.
        """
        return {
            "board": self.board.get_visible_state(reveal_all=self.game_over),
            "game_over": self.game_over,
            "won": self.won,
            "outcome": self.outcome.value if self.outcome is not None else None,
            "message": self.message,
            "moves_made": self.moves_made,
            "revealed_count": self.board.revealed_count,
            "size": self.size,
            "num_mines": self.num_mines
        }

    def render(self) -> str:
        return self.board.render(reveal_all=self.game_over)

    def reset(self):
        """
        Start over on a fresh board with the same parameters.
        """
        self.board = Board(self.size, self.num_mines, self.seed, self.mine_positions, **self.board_options)
        self.game_over = False
        self.won = False
        self.outcome = None
        self.message = ""
        self.moves_made = 0
        logger.info("New %dx%d game with %d mines", self.size, self.size, self.num_mines)

    def is_game_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.won

    def get_score(self) -> float:
        """
        Fraction of the safe cells revealed so far. A losing reveal also
        counts the mine, so the score is capped at 1.0.
        """
        return min(self.board.revealed_count / self.board.safe_cells, 1.0)

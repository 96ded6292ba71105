# frontend/cli.py

import argparse
import logging

from backend.config import board_options, configure_logging, load_config
from backend.errors import ConfigError, InputError
from backend.game import GameSession
from backend.utils import parse_board_size, parse_coordinates, parse_mine_count

logger = logging.getLogger(__name__)

PLAY_AGAIN_PROMPT = "Would you like to play again? (y/n)"


class TerminalGame:
    """
    Prompt loop around GameSession. `input_fn` and `output_fn` default to
    the builtins and are swapped out in tests.
    """

    def __init__(self, config: dict = None, seed: int = None, input_fn=input, output_fn=print):
        self.config = config or load_config()
        self.seed = seed if seed is not None else self.config["game"].get("seed")
        self.input = input_fn
        self.output = output_fn

    def ask(self, prompt, parse):
        """Print `prompt` and keep reading until `parse` accepts the answer."""
        self.output(prompt)
        while True:
            try:
                return parse(self.input())
            except InputError as e:
                self.output(str(e))

    def ask_size(self):
        return self.ask("Please enter the size of the board you want to play:", parse_board_size)

    def ask_mines(self, size):
        return self.ask(
            "How many mines do you want to have?",
            lambda text: parse_mine_count(text, size)
        )

    def ask_play_again(self) -> bool:
        while True:
            self.output(PLAY_AGAIN_PROMPT)
            answer = self.input().strip()
            if answer in ("y", "n"):
                return answer == "y"

    def show_board(self, session):
        border = "-" * session.size
        self.output("")
        self.output(border)
        self.output(session.render())
        self.output(border)
        self.output("")

    def play_round(self, size, mines) -> GameSession:
        session = GameSession(size, mines, seed=self.seed, board_options=board_options(self.config))

        while not session.is_game_over():
            self.show_board(session)
            row, col = self.ask(
                "Type a row and a column to reveal (row,column):",
                lambda text: parse_coordinates(text, size)
            )
            session.reveal(row, col)
            self.output(session.message)

        self.output(session.render())
        return session

    def run(self, size=None, mines=None):
        self.output("Welcome to Minesweeper!")

        try:
            while True:
                round_size = size if size is not None else self.ask_size()
                round_mines = mines if mines is not None else self.ask_mines(round_size)
                self.play_round(round_size, round_mines)
                if not self.ask_play_again():
                    break
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving the game")
            self.output("")
        self.output("Goodbye!")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument("--config", type=str, default=None, help="Path to a game config yaml")
    parser.add_argument("--seed", type=int, default=None, help="Seed for mine placement")
    parser.add_argument("--size", type=str, default=None, help="Board size (skips the prompt)")
    parser.add_argument("--mines", type=str, default=None, help="Number of mines (skips the prompt)")
    parser.add_argument("--log-level", type=str, default=None, help="Logging level, e.g. DEBUG")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    try:
        configure_logging(args.log_level or config["logging"]["level"])
    except ConfigError as e:
        parser.error(str(e))

    try:
        size = parse_board_size(args.size) if args.size is not None else None
        mines = None
        if args.mines is not None:
            # a mine count alone plays on the configured default size
            if size is None:
                size = parse_board_size(str(config["game"]["default_size"]))
            mines = parse_mine_count(args.mines, size)
    except InputError as e:
        parser.error(str(e))

    TerminalGame(config=config, seed=args.seed).run(size=size, mines=mines)


if __name__ == "__main__":
    main()

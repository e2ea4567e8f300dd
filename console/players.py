"""
Players for TicTacToe.
A human typing moves, or the computer using the AI.
"""

import random
from typing import Callable, Optional

from logic.ai_player import AIPlayer
from logic.board import Board
from logic.move_validator import MoveValidator, ValidationResult
from .config import DisplayConfig
from .display import Display, join_or


class Player:
    """
    Base class for anything that can take a turn.

    Subclasses only decide *where* to move (choose_move);
    make_move() checks the choice and marks the board.
    """

    default_name = "Player"

    def __init__(self, mark: str, name: Optional[str] = None):
        self.mark = mark
        self.name = name or self.default_name
        self.validator = MoveValidator()

    def make_move(self, board: Board) -> int:
        """
        Ask for a move until a legal one comes back, then play it.

        Returns:
            The position that was marked.
        """
        while True:
            choice = self.choose_move(board)
            result = self.check_move(board, choice)
            if result.is_valid:
                board.place(result.position, self.mark)
                return result.position
            self.handle_invalid_move(board, result)

    def choose_move(self, board: Board):
        raise NotImplementedError(
            f"choose_move() not implemented in {type(self).__name__}"
        )

    def check_move(self, board: Board, choice) -> ValidationResult:
        return self.validator.validate_move(board, choice)

    def handle_invalid_move(self, board: Board, result: ValidationResult):
        """Called after choose_move() returned an illegal move."""

    def __str__(self):
        return self.name


class HumanPlayer(Player):
    """A person at the keyboard."""

    default_name = DisplayConfig.HUMAN_NAME

    def __init__(
        self,
        mark: str,
        name: Optional[str] = None,
        input_func: Callable[[str], str] = input,
        display: Optional[Display] = None
    ):
        super().__init__(mark, name)
        self.input_func = input_func
        self.display = display or Display()

    def choose_move(self, board: Board) -> str:
        """Returns the raw text typed in; check_move() parses it."""
        self.display.prompt(f"{self.name} ({self.mark}), please choose a move:")
        return self.input_func(DisplayConfig.PROMPT)

    def check_move(self, board: Board, choice) -> ValidationResult:
        return self.validator.parse_move(board, choice)

    def handle_invalid_move(self, board: Board, result: ValidationResult):
        valid_moves = self.validator.get_valid_moves(board)

        if len(valid_moves) == 1:
            hint = f"You can only choose {valid_moves[0]}!"
        else:
            hint = f"Please choose {join_or(valid_moves)}."

        self.display.prompt(f"Invalid move! {result.error_message}", hint)


class ComputerPlayer(Player):
    """The unbeatable AI."""

    default_name = DisplayConfig.COMPUTER_NAME

    def __init__(
        self,
        mark: str,
        name: Optional[str] = None,
        opponent_mark: Optional[str] = None,
        rng: Optional[random.Random] = None,
        show_scores: bool = False,
        verbose: bool = False,
        display: Optional[Display] = None
    ):
        super().__init__(mark, name)
        self.ai = AIPlayer(mark, opponent_mark=opponent_mark, rng=rng, verbose=verbose)
        self.show_scores = show_scores
        self.display = display or Display()

    def choose_move(self, board: Board) -> int:
        if self.show_scores and not board.is_empty():
            scores = self.ai.get_move_scores(board)
            self.display.prompt(f"{self.name} ({self.mark}) rates each square:")
            print(self.display.render_scores(board, scores))

        return self.ai.choose_move(board)

"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from .board import Board
from .config import GameConfig


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    position: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Position must be one of 1-9
    3. Can only place on empty positions
    """

    def validate_move(self, board: Board, position) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            position: Position to mark (1-9).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if board.is_end_state():
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not isinstance(position, int) or isinstance(position, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Must be a number."
            )

        first, last = GameConfig.POSITIONS[0], GameConfig.POSITIONS[-1]
        if position not in GameConfig.POSITIONS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be {first}-{last}."
            )

        mark = board.mark_at(position)
        if mark is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Square {position} is already taken by {mark}."
            )

        return ValidationResult(is_valid=True, position=position)

    def parse_move(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a move typed in by a human.

        Args:
            board: Current board.
            text: Raw input, e.g. " 5\\n".

        Returns:
            ValidationResult; position is set when the move is valid.
        """
        text = (text or "").strip()

        try:
            position = int(text)
        except ValueError:
            return ValidationResult(
                is_valid=False,
                error_message=f"'{text}' is not a number."
            )

        return self.validate_move(board, position)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves.

        Returns:
            Unmarked positions in order, or [] if the game is over.
        """
        if board.is_end_state():
            return []
        return board.unmarked_positions()

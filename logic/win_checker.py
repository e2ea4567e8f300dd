"""
Win checker for TicTacToe.
Finds the first winning line on the board.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from .config import GameConfig


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # Winning lines as 0-based indexes into the cell array (8x3)
    LINE_INDEXES = np.array(GameConfig.WINNING_LINES) - 1

    def find_winner(self, squares: Dict[int, Optional[str]]) -> Optional[str]:
        """
        Check if there's a winner.

        Args:
            squares: Mapping of position (1-9) to mark, None when empty.

        Returns:
            The winning mark, or None if no winner yet.
        """
        line = self.find_winning_line(squares)
        if line is None:
            return None
        return squares[line[0]]

    def find_winning_line(
        self,
        squares: Dict[int, Optional[str]]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line, in GameConfig.WINNING_LINES order.

        Args:
            squares: Mapping of position (1-9) to mark, None when empty.

        Returns:
            The winning line as a tuple of positions, or None.
        """
        cells = np.array(
            [squares[pos] for pos in GameConfig.POSITIONS],
            dtype=object
        )
        lines = cells[self.LINE_INDEXES]

        # A line wins when its first cell is marked and all three match
        filled = np.not_equal(lines[:, 0], None)
        uniform = (lines[:, 0] == lines[:, 1]) & (lines[:, 1] == lines[:, 2])
        hits = np.flatnonzero(filled & uniform)

        if hits.size == 0:
            return None
        return GameConfig.WINNING_LINES[int(hits[0])]


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    checker = WinChecker()
    empty = {pos: None for pos in GameConfig.POSITIONS}

    # Test 1: Horizontal win
    squares = {**empty, 1: "X", 2: "X", 3: "X", 5: "O", 7: "O"}
    winner = checker.find_winner(squares)
    print(f"Test 1 (horizontal): winner = {winner}")
    assert winner == "X"

    # Test 2: Diagonal win
    squares = {**empty, 3: "O", 5: "O", 7: "O", 1: "X", 2: "X"}
    print(f"Test 2 (diagonal): line = {checker.find_winning_line(squares)}")
    assert checker.find_winning_line(squares) == (7, 5, 3)

    # Test 3: No winner
    squares = {**empty, 1: "X", 2: "O", 5: "X"}
    winner = checker.find_winner(squares)
    print(f"Test 3 (no winner): winner = {winner}")
    assert winner is None

    print("\nWinChecker test done!")

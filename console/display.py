"""
Terminal display for TicTacToe.
Draws the board and prints prompts.
"""

import os
from typing import Dict, List, Sequence

import numpy as np

from logic.board import Board
from logic.config import GameConfig
from .config import DisplayConfig


def join_or(items: Sequence, separator: str = ", ", word: str = "or") -> str:
    """
    Join items for a sentence.

    join_or([1])       -> "1"
    join_or([1, 2])    -> "1 or 2"
    join_or([1, 2, 3]) -> "1, 2, or 3"
    """
    items = [str(item) for item in items]
    if len(items) < 2:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} {word} {items[1]}"
    return separator.join(items[:-1]) + f"{separator}{word} {items[-1]}"


class Display:
    """
    Everything the game prints goes through here.
    """

    def __init__(self, clear: bool = DisplayConfig.CLEAR_SCREEN):
        self.clear = clear

    def clear_screen(self):
        if self.clear:
            os.system("cls" if os.name == "nt" else "clear")

    def prompt(self, *messages: str):
        """Print each message after the prompt marker."""
        for msg in messages:
            print(DisplayConfig.PROMPT + msg)

    def show_board(self, board: Board):
        print(self.render_board(board))

    def render_board(self, board: Board) -> str:
        """
        Draw the board as text.

        Marked squares show their mark, empty ones their number, e.g.

             *───────*───────*───────*
             |       |       |       |
             |   X   |  <2>  |  <3>  |
             |       |       |       |
             *───────*───────*───────*
            ...
        """
        border = DisplayConfig.L_MARGIN + DisplayConfig.H_LINE
        spacer = DisplayConfig.L_MARGIN + DisplayConfig.V_LINES_WITH_SPACE

        lines: List[str] = []
        size = GameConfig.BOARD_SIZE
        for start in range(0, len(GameConfig.POSITIONS), size):
            row = GameConfig.POSITIONS[start:start + size]
            squares = "".join(
                self._symbol(board, pos) + DisplayConfig.V_LINE for pos in row
            )
            lines += [
                border,
                spacer,
                DisplayConfig.L_MARGIN + DisplayConfig.V_LINE + squares,
                spacer,
            ]
        lines.append(border)

        return "\n".join(lines)

    def render_scores(self, board: Board, scores: Dict[int, int]) -> str:
        """
        Draw the AI's evaluation of each empty square as a 3x3 grid.

        Args:
            board: Board the scores were computed on.
            scores: {position: value} from AIPlayer.get_move_scores().
        """
        size = GameConfig.BOARD_SIZE
        grid = np.full((size, size), np.nan)
        for pos, score in scores.items():
            row, col = divmod(pos - 1, size)
            grid[row, col] = score

        rows = []
        for row in grid:
            cells = ["." if np.isnan(value) else f"{int(value):+d}" for value in row]
            rows.append(DisplayConfig.L_MARGIN + " ".join(c.rjust(3) for c in cells))
        return "\n".join(rows)

    def _symbol(self, board: Board, position: int) -> str:
        mark = board.mark_at(position)
        text = mark if mark is not None else f"<{position}>"
        return text.center(DisplayConfig.SQ_WIDTH)

"""
Board for TicTacToe.
Tracks which mark sits on each of the 9 positions.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .config import GameConfig
from .win_checker import WinChecker


_win_checker = WinChecker()


def _empty_squares() -> Dict[int, Optional[str]]:
    return {pos: None for pos in GameConfig.POSITIONS}


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Positions are numbered 1-9 left to right, top to bottom.
    A position is None until marked; once marked it is never
    cleared or re-marked during a game.
    """

    squares: Dict[int, Optional[str]] = field(default_factory=_empty_squares)

    # Winner is cached once found - marks are never removed, so it can't change
    _winning_mark: Optional[str] = field(
        default=None, init=False, repr=False, compare=False
    )

    @classmethod
    def from_marks(cls, marks: Dict[str, Iterable[int]]) -> "Board":
        """
        Build a board from a {mark: positions} mapping.

        Example:
            Board.from_marks({"X": [1, 5], "O": [9]})
        """
        board = cls()
        for mark, positions in marks.items():
            for pos in positions:
                board.place(pos, mark)
        return board

    def mark_at(self, position: int) -> Optional[str]:
        """Get the mark at a position (None if unmarked)."""
        return self.squares[position]

    def place(self, position: int, mark: str):
        """
        Put a mark on a position.

        No checks are done here - call is_legal_move() first.
        """
        self.squares[position] = mark

    def is_legal_move(self, position) -> bool:
        """True if position is one of 1-9 and still unmarked."""
        return (
            isinstance(position, int)
            and not isinstance(position, bool)
            and position in self.squares
            and self.squares[position] is None
        )

    def unmarked_positions(self) -> List[int]:
        """All empty positions, in order 1-9."""
        return [pos for pos, mark in self.squares.items() if mark is None]

    def marked_positions(self, mark: Optional[str] = None) -> List[int]:
        """
        Positions holding a mark, in order 1-9.

        Args:
            mark: Only positions with this mark. None means any mark.
        """
        if mark is None:
            return [pos for pos, m in self.squares.items() if m is not None]
        return [pos for pos, m in self.squares.items() if m == mark]

    def marks(self) -> Set[str]:
        """The distinct marks on the board."""
        return {m for m in self.squares.values() if m is not None}

    def is_empty(self) -> bool:
        return all(m is None for m in self.squares.values())

    def is_full(self) -> bool:
        return all(m is not None for m in self.squares.values())

    def winning_mark(self) -> Optional[str]:
        """
        Get the mark that completed a winning line.

        Lines are scanned in GameConfig.WINNING_LINES order and the
        first complete one wins.

        Returns:
            The winning mark, or None if no line is complete.
        """
        if self._winning_mark is None:
            self._winning_mark = _win_checker.find_winner(self.squares)
        return self._winning_mark

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """The line that won the game, or None."""
        return _win_checker.find_winning_line(self.squares)

    def is_end_state(self) -> bool:
        """True if the board is full or somebody has won."""
        return self.is_full() or self.winning_mark() is not None

    def clone(self) -> "Board":
        """
        Create an independent copy of the board.
        Marking the copy never touches the original (and vice versa).
        """
        snapshot = Board(squares=dict(self.squares))
        snapshot._winning_mark = self._winning_mark
        return snapshot


# Quick test
if __name__ == "__main__":
    print("Testing Board...")

    board = Board()
    print(f"Empty: {board.is_empty()}, moves: {board.unmarked_positions()}")

    for pos, mark in [(5, "X"), (1, "O"), (3, "X"), (9, "O"), (7, "X")]:
        board.place(pos, mark)
        print(f"{mark} -> {pos}  winner={board.winning_mark()}")

    assert board.winning_mark() == "X"
    assert board.winning_line() == (7, 5, 3)
    assert board.is_end_state()

    snapshot = board.clone()
    snapshot.place(2, "O")
    assert board.mark_at(2) is None

    print("\nBoard test done!")

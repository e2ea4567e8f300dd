"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import random
from enum import Enum
from typing import Dict, Optional

from .board import Board
from .config import GameConfig


class Side(Enum):
    """Who makes the next (imaginary) move during the search."""
    ENGINE = "engine"
    OPPONENT = "opponent"

    def opposite(self) -> "Side":
        """Get the other side."""
        return Side.OPPONENT if self == Side.ENGINE else Side.ENGINE


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).

    The whole game tree is searched every time. No pruning and no
    caching between moves: a 3x3 board is small enough.
    """

    def __init__(
        self,
        mark: str,
        opponent_mark: Optional[str] = None,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the AI player.

        Args:
            mark: The mark the AI plays with (e.g. "O").
            opponent_mark: The other player's mark. If None it is read
                off the board, falling back to the other GameConfig.MARKS
                entry while the opponent hasn't moved yet.
            rng: Random source for the opening move.
            verbose: Print a summary after each search.
        """
        if opponent_mark is not None and opponent_mark == mark:
            raise ValueError(f"AI and opponent can't both play {mark!r}")

        self.mark = mark
        self.opponent_mark = opponent_mark
        self.rng = rng or random.Random()
        self.verbose = verbose

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def choose_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        Args:
            board: Current board. It is only read, never changed.

        Returns:
            Position (1-9) of the best move.

        Raises:
            ValueError: If the game on this board is already over.
        """
        if board.is_end_state():
            raise ValueError("Can't choose a move: the game is already over")

        self.positions_evaluated = 0

        # Every corner is an equally good opening, no need to search
        if board.is_empty():
            move = self.rng.choice(GameConfig.CORNERS)
            if self.verbose:
                print(f"AI ({self.mark}) opens in a random corner: {move}")
            return move

        scores = self.get_move_scores(board)

        # First winning move in board order, then first tying one
        move = self._first_with_score(scores, GameConfig.WIN)
        if move is None:
            move = self._first_with_score(scores, GameConfig.TIE)
        if move is None:
            # Lost whatever we do - take the first free square
            move = board.unmarked_positions()[0]

        if self.verbose:
            print(
                f"AI ({self.mark}) evaluated {self.positions_evaluated} positions. "
                f"Best move: {move} (score: {scores[move]})"
            )

        return move

    def get_move_scores(self, board: Board) -> Dict[int, int]:
        """
        Score every legal move for the AI.

        Args:
            board: Current board.

        Returns:
            {position: WIN/TIE/LOSS} in board order.
        """
        return {
            pos: self.evaluate(board, pos, Side.ENGINE)
            for pos in board.unmarked_positions()
        }

    def evaluate(self, board: Board, move: int, side: Side) -> int:
        """
        Minimax: value of `side` playing `move` on `board`.

        Plays the move on a copy of the board, then assumes both sides
        play perfectly until the game ends.

        Args:
            board: Position before the move.
            move: Position to mark.
            side: Who is making the move.

        Returns:
            GameConfig.WIN, TIE or LOSS, always from the AI's point of view.
        """
        self.positions_evaluated += 1

        snapshot = board.clone()
        if side == Side.ENGINE:
            mark = self.mark
        else:
            mark = self._resolve_opponent_mark(board)
        snapshot.place(move, mark)

        if snapshot.is_end_state():
            return self._terminal_value(snapshot)

        next_side = side.opposite()
        scores = [
            self.evaluate(snapshot, pos, next_side)
            for pos in snapshot.unmarked_positions()
        ]

        # Opponent picks what's worst for us, we pick what's best
        if next_side == Side.OPPONENT:
            return min(scores)
        return max(scores)

    def _terminal_value(self, board: Board) -> int:
        """Value of a finished board."""
        winner = board.winning_mark()
        if winner is None:
            return GameConfig.TIE
        if winner == self.mark:
            return GameConfig.WIN
        return GameConfig.LOSS

    def _resolve_opponent_mark(self, board: Board) -> str:
        """
        Work out which mark the opponent plays with.

        Raises:
            ValueError: If it can't be told from the board or config.
        """
        if self.opponent_mark is not None:
            return self.opponent_mark

        others = sorted(board.marks() - {self.mark})
        if others:
            return others[0]

        fallback = GameConfig.other_mark(self.mark)
        if fallback is None:
            raise ValueError(
                f"Can't tell the opponent's mark for AI playing {self.mark!r}"
            )
        return fallback

    @staticmethod
    def _first_with_score(scores: Dict[int, int], wanted: int) -> Optional[int]:
        for pos, score in scores.items():
            if score == wanted:
                return pos
        return None


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer("O")

    # Test 1: AI should block a winning move
    board = Board.from_marks({"X": [3, 6], "O": [5]})
    print("\nAI is O. X is about to win with 9!")

    move = ai.choose_move(board)
    print(f"AI's move: {move}")

    assert move == 9, f"Expected 9, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = Board.from_marks({"O": [1, 2], "X": [5]})
    print("\nAI is O. Can win with 3!")

    move = ai.choose_move(board)
    print(f"AI's move: {move}")

    assert move == 3, f"Expected 3, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")

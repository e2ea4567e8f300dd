"""
A single game of TicTacToe.
Takes turns between two players until the board is won or full.
"""

import random
from typing import List, Optional, Tuple

from logic.board import Board
from .display import Display
from .players import Player


class Game:
    """
    One game between two players.

    Game flow:
    1. Shuffle who goes first
    2. Show the board, current player moves
    3. Swap players
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        players: Tuple[Player, Player],
        board: Optional[Board] = None,
        display: Optional[Display] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Args:
            players: The two players. Their marks must differ.
            board: Board to play on (a fresh one by default).
            display: Where output goes.
            rng: Random source for the turn order.
        """
        self.player1, self.player2 = players
        if self.player1.mark == self.player2.mark:
            raise ValueError(f"Both players can't use the mark {self.player1.mark!r}")

        self.board = board if board is not None else Board()
        self.display = display or Display()
        self.rng = rng or random.Random()

        self.sequence: List[Player] = [self.player1, self.player2]
        self.rng.shuffle(self.sequence)

    @property
    def current_player(self) -> Player:
        return self.sequence[0]

    def play(self) -> Optional[Player]:
        """
        Play the game to the end.

        Returns:
            The winner, or None for a tie.
        """
        self.display.clear_screen()
        self.display.prompt(
            f"{self.current_player} ({self.current_player.mark}) goes first."
        )

        while not self.is_finished():
            self.next_move()

        self._show_result()
        return self.winner()

    def next_move(self) -> int:
        """Let the current player move, then hand over the turn."""
        self.display.show_board(self.board)
        player = self.current_player
        position = player.make_move(self.board)
        self.sequence.reverse()
        self.display.clear_screen()
        self.display.prompt(f"{player} ({player.mark}) chose {position}.")
        return position

    def is_finished(self) -> bool:
        return self.board.is_end_state()

    def winner(self) -> Optional[Player]:
        """The player whose mark won, or None."""
        mark = self.board.winning_mark()
        if mark is None:
            return None
        return self.player1 if mark == self.player1.mark else self.player2

    def _show_result(self):
        self.display.show_board(self.board)

        winner = self.winner()
        if winner is None:
            self.display.prompt("It's a tie!")
        else:
            line = "-".join(str(pos) for pos in self.board.winning_line())
            self.display.prompt(f"{winner} wins! ({line})")

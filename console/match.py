"""
A match of TicTacToe: several games, first to N wins.
"""

import random
from typing import Dict, Optional, Tuple

from .config import DisplayConfig
from .display import Display
from .game import Game
from .players import Player


class Match:
    """
    Plays games until one player has won `wins_to_match` of them.
    Ties don't count towards anybody.
    """

    def __init__(
        self,
        players: Tuple[Player, Player],
        wins_to_match: int = DisplayConfig.WINS_TO_MATCH,
        display: Optional[Display] = None,
        rng: Optional[random.Random] = None,
        max_games: Optional[int] = None
    ):
        """
        Args:
            players: The two players.
            wins_to_match: Game wins needed to take the match.
            display: Where output goes.
            rng: Random source handed to every game.
            max_games: Stop after this many games even without a
                match winner (two perfect AIs only ever tie).
        """
        if wins_to_match < 1:
            raise ValueError(f"wins_to_match must be at least 1, got {wins_to_match}")
        if players[0].mark == players[1].mark:
            raise ValueError(f"Both players can't use the mark {players[0].mark!r}")

        self.players = players
        self.wins_to_match = wins_to_match
        self.display = display or Display()
        self.rng = rng or random.Random()
        self.max_games = max_games

        self.scores: Dict[Player, int] = {player: 0 for player in players}
        self.ties = 0
        self.games_played = 0

    def play(self) -> Optional[Player]:
        """
        Play the whole match.

        Returns:
            The match winner, or None if max_games ran out first.
        """
        self.display.prompt(
            "Welcome to Tic-Tac-Toe!",
            f"First to {self.wins_to_match} wins takes the match."
        )

        while self.match_winner() is None:
            if self.max_games is not None and self.games_played >= self.max_games:
                break
            self.play_game()

        self._show_match_result()
        return self.match_winner()

    def play_game(self) -> Optional[Player]:
        """Play one game and record the result."""
        game = Game(self.players, display=self.display, rng=self.rng)
        winner = game.play()

        self.games_played += 1
        if winner is None:
            self.ties += 1
        else:
            self.scores[winner] += 1

        self.display.prompt(self.scoreboard())
        return winner

    def match_winner(self) -> Optional[Player]:
        for player, score in self.scores.items():
            if score >= self.wins_to_match:
                return player
        return None

    def scoreboard(self) -> str:
        """e.g. 'Player: 1 | Computer: 2 | Ties: 0'"""
        parts = [f"{player}: {score}" for player, score in self.scores.items()]
        parts.append(f"Ties: {self.ties}")
        return " | ".join(parts)

    def _show_match_result(self):
        winner = self.match_winner()
        if winner is None:
            self.display.prompt(f"No winner after {self.games_played} games.")
        else:
            self.display.prompt(f"{winner} wins the match!")
        self.display.prompt("Thanks for playing. Bye!")

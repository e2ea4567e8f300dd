"""
Console module for TicTacToe.
Handles drawing, players, and running games and matches in a terminal.
"""

from .config import DisplayConfig
from .display import Display, join_or
from .players import Player, HumanPlayer, ComputerPlayer
from .game import Game
from .match import Match

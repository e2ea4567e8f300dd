"""
Logic module for TicTacToe.
Handles the board, rules, and the unbeatable AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .board import Board
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, Side

"""
Game configuration for TicTacToe.
Board layout, winning lines and the values the AI scores positions with.
"""


class GameConfig:
    """
    Configuration class for the game rules.
    These never change at runtime.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, positions numbered like a phone keypad
    #   1 | 2 | 3
    #   4 | 5 | 6
    #   7 | 8 | 9
    BOARD_SIZE = 3
    POSITIONS = tuple(range(1, BOARD_SIZE * BOARD_SIZE + 1))

    # Checked in this order - the first full line decides the winner
    WINNING_LINES = (
        # Rows
        (1, 2, 3), (4, 5, 6), (7, 8, 9),
        # Columns
        (1, 4, 7), (2, 5, 8), (3, 6, 9),
        # Diagonals
        (1, 5, 9), (7, 5, 3),
    )

    CORNERS = (1, 3, 7, 9)

    # ==================== MARKS ====================
    MARKS = ("X", "O")

    # ==================== POSITION VALUES ====================
    # Always from the point of view of the AI that owns the evaluation
    WIN = 1
    TIE = 0
    LOSS = -1

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    @classmethod
    def other_mark(cls, mark: str):
        """The other default mark, or None if mark isn't one of MARKS."""
        if mark not in cls.MARKS:
            return None
        return cls.MARKS[1] if mark == cls.MARKS[0] else cls.MARKS[0]

"""
Console configuration for TicTacToe.
How the board is drawn and how long a match lasts.
"""


class DisplayConfig:
    """
    Configuration class for the terminal front end.
    Change these values to taste!
    """

    # ==================== BOARD DRAWING ====================
    H_LINE = " *───────*───────*───────* "
    V_LINE = " | "
    SQ_WIDTH = 5
    V_LINES_WITH_SPACE = ((V_LINE + " " * SQ_WIDTH) * 3) + V_LINE

    # ==================== PROMPTS ====================
    PROMPT = ">> "
    L_MARGIN = " " * (len(PROMPT) - 1)

    # Set to False to keep the scrollback (e.g. when piping output)
    CLEAR_SCREEN = True

    # ==================== MATCH SETTINGS ====================
    WINS_TO_MATCH = 3

    HUMAN_NAME = "Player"
    COMPUTER_NAME = "Computer"

"""
Tests for the TicTacToe logic module: board, win checking,
move validation and the minimax AI.

Run with: pytest
"""

import random

import pytest

from logic.ai_player import AIPlayer, Side
from logic.board import Board
from logic.config import GameConfig
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker


# X O X
# X O O
# O X X
TIE_BOARD = {"X": [1, 3, 4, 8, 9], "O": [2, 5, 6, 7]}


# ==================== BOARD ====================

def test_new_board_is_empty():
    board = Board()
    assert board.is_empty()
    assert board.unmarked_positions() == list(range(1, 10))
    assert board.marks() == set()
    assert not board.is_end_state()


def test_legal_moves():
    board = Board.from_marks({"X": [5]})
    assert board.is_legal_move(1)
    assert not board.is_legal_move(5)
    assert not board.is_legal_move(0)
    assert not board.is_legal_move(10)
    assert not board.is_legal_move("1")
    assert not board.is_legal_move(True)


def test_unmarked_positions_keep_board_order():
    board = Board.from_marks({"X": [9, 1], "O": [5]})
    assert board.unmarked_positions() == [2, 3, 4, 6, 7, 8]
    assert board.marked_positions() == [1, 5, 9]
    assert board.marked_positions("X") == [1, 9]


def test_clone_is_independent():
    board = Board.from_marks({"X": [1]})
    snapshot = board.clone()

    snapshot.place(2, "O")
    board.place(3, "X")

    assert board.mark_at(2) is None
    assert snapshot.mark_at(3) is None
    assert snapshot.mark_at(1) == "X"


def test_full_board_without_winner_is_a_tie():
    board = Board.from_marks(TIE_BOARD)
    assert board.is_full()
    assert board.winning_mark() is None
    assert board.is_end_state()


def test_winner_is_found_and_kept():
    board = Board.from_marks({"O": [3, 5], "X": [1, 2]})
    assert board.winning_mark() is None

    board.place(7, "O")
    assert board.winning_mark() == "O"
    assert board.winning_line() == (7, 5, 3)
    assert board.is_end_state()

    board.place(4, "X")
    assert board.winning_mark() == "O"


def test_first_winning_line_in_scan_order():
    # Row 1-2-3 comes before column 1-4-7
    board = Board.from_marks({"X": [1, 2, 3, 4, 7]})
    assert board.winning_line() == (1, 2, 3)


@pytest.mark.parametrize("line", GameConfig.WINNING_LINES)
def test_every_line_wins(line):
    board = Board.from_marks({"O": line})
    assert board.winning_mark() == "O"
    assert WinChecker().find_winning_line(board.squares) == line


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_square():
    result = MoveValidator().validate_move(Board(), 5)
    assert result.is_valid
    assert result.position == 5


@pytest.mark.parametrize("position, message", [
    (0, "Must be 1-9"),
    (10, "Must be 1-9"),
    ("5", "Must be a number"),
    (5, "already taken by X"),
])
def test_validator_rejects_bad_moves(position, message):
    board = Board.from_marks({"X": [5]})
    result = MoveValidator().validate_move(board, position)
    assert not result.is_valid
    assert message in result.error_message


def test_validator_rejects_moves_after_game_over():
    board = Board.from_marks({"X": [1, 2, 3], "O": [4, 5]})
    result = MoveValidator().validate_move(board, 9)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert MoveValidator().get_valid_moves(board) == []


def test_parse_move():
    validator = MoveValidator()
    board = Board.from_marks({"X": [5]})

    assert validator.parse_move(board, " 7\n").position == 7
    assert not validator.parse_move(board, "seven").is_valid
    assert not validator.parse_move(board, "").is_valid
    assert "already taken" in validator.parse_move(board, "5").error_message


# ==================== AI PLAYER ====================

def test_side_opposite():
    assert Side.ENGINE.opposite() == Side.OPPONENT
    assert Side.OPPONENT.opposite() == Side.ENGINE


def test_ai_completes_its_row():
    board = Board.from_marks({"O": [1, 2], "X": [5]})
    assert AIPlayer("O").choose_move(board) == 3


def test_ai_blocks_the_opponent():
    board = Board.from_marks({"X": [3, 6], "O": [5]})
    assert AIPlayer("O").choose_move(board) == 9


def test_ai_prefers_winning_over_blocking():
    # X threatens 7 (column 1-4-7), O can win at 9 (column 3-6-9)
    board = Board.from_marks({"X": [1, 4, 5, 8], "O": [2, 3, 6]})
    ai = AIPlayer("O")

    scores = ai.get_move_scores(board)
    assert scores == {7: GameConfig.LOSS, 9: GameConfig.WIN}
    assert ai.choose_move(board) == 9


def test_ai_picks_lowest_winning_position():
    # O wins at 2 (row 1-2-3) or 6 (column 3-6-9)
    board = Board.from_marks({"O": [1, 3, 9], "X": [4, 5, 7]})
    ai = AIPlayer("O")

    scores = ai.get_move_scores(board)
    assert scores[2] == GameConfig.WIN
    assert scores[6] == GameConfig.WIN
    assert ai.choose_move(board) == 2


def test_ai_falls_back_to_first_square_when_lost():
    # X has three open lines (2, 4 and 5), O can't stop them all
    board = Board.from_marks({"X": [1, 3, 7], "O": [6, 8]})
    ai = AIPlayer("O")

    assert set(ai.get_move_scores(board).values()) == {GameConfig.LOSS}
    assert ai.choose_move(board) == 2


def test_ai_opens_in_a_corner():
    seen = set()
    for seed in range(40):
        move = AIPlayer("X", rng=random.Random(seed)).choose_move(Board())
        assert move in GameConfig.CORNERS
        seen.add(move)
    assert seen == set(GameConfig.CORNERS)


def test_ai_is_deterministic_after_the_opening():
    board = Board.from_marks({"X": [1, 9], "O": [5]})
    ai = AIPlayer("O")
    assert ai.choose_move(board) == ai.choose_move(board)


def test_ai_refuses_finished_boards():
    ai = AIPlayer("O")
    with pytest.raises(ValueError):
        ai.choose_move(Board.from_marks(TIE_BOARD))
    with pytest.raises(ValueError):
        ai.choose_move(Board.from_marks({"X": [1, 2, 3], "O": [4, 5]}))


def test_evaluate_leaves_board_alone():
    board = Board.from_marks({"O": [1, 2], "X": [5]})
    before = dict(board.squares)

    ai = AIPlayer("O")
    assert ai.evaluate(board, 3, Side.ENGINE) == GameConfig.WIN
    assert board.squares == before
    assert ai.positions_evaluated > 0


def test_evaluate_scores_opponent_moves():
    board = Board.from_marks({"X": [1, 2], "O": [5, 9]})
    # X playing 3 ends the game in X's favour
    assert AIPlayer("O").evaluate(board, 3, Side.OPPONENT) == GameConfig.LOSS


def test_opponent_mark_is_read_from_the_board():
    board = Board.from_marks({"B": [1], "A": [5]})
    # No opponent mark given, B is the only other mark on the board
    move = AIPlayer("A").choose_move(board)
    assert board.is_legal_move(move)


def test_unknown_opponent_mark_is_an_error():
    with pytest.raises(ValueError):
        AIPlayer("A").choose_move(Board.from_marks({"A": [1]}))


def test_ai_and_opponent_need_different_marks():
    with pytest.raises(ValueError):
        AIPlayer("X", opponent_mark="X")


def _random_positions(count):
    """Boards reached by random play that are still in progress."""
    rng = random.Random(7)
    boards = []
    while len(boards) < count:
        board = Board()
        for ply in range(rng.randint(3, 7)):
            mark = GameConfig.MARKS[ply % 2]
            board.place(rng.choice(board.unmarked_positions()), mark)
            if board.is_end_state():
                break
        if not board.is_end_state():
            boards.append(board)
    return boards


def test_ai_always_returns_a_legal_move():
    for board in _random_positions(25):
        to_move = GameConfig.MARKS[len(board.marked_positions()) % 2]
        move = AIPlayer(to_move).choose_move(board)
        assert board.is_legal_move(move)


@pytest.mark.parametrize("first", GameConfig.MARKS)
def test_ai_against_itself_is_a_tie(first):
    rng = random.Random(3)
    ais = {mark: AIPlayer(mark, rng=rng) for mark in GameConfig.MARKS}
    board = Board()

    mark = first
    while not board.is_end_state():
        move = ais[mark].choose_move(board)
        assert board.is_legal_move(move)
        board.place(move, mark)
        mark = GameConfig.other_mark(mark)

    assert board.is_full()
    assert board.winning_mark() is None


def _assert_never_loses(ai, board, ai_to_move):
    if board.is_end_state():
        assert board.winning_mark() != ai.opponent_mark
        return

    if ai_to_move:
        snapshot = board.clone()
        snapshot.place(ai.choose_move(board), ai.mark)
        _assert_never_loses(ai, snapshot, False)
        return

    for pos in board.unmarked_positions():
        snapshot = board.clone()
        snapshot.place(pos, ai.opponent_mark)
        _assert_never_loses(ai, snapshot, True)


def test_ai_never_loses_moving_first():
    ai = AIPlayer("O", opponent_mark="X", rng=random.Random(0))
    _assert_never_loses(ai, Board(), ai_to_move=True)


@pytest.mark.parametrize("opening", [1, 2, 5])
def test_ai_never_loses_moving_second(opening):
    ai = AIPlayer("O", opponent_mark="X")
    _assert_never_loses(ai, Board.from_marks({"X": [opening]}), ai_to_move=True)

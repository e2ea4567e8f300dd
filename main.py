"""
Main script for TicTacToe.

Play a match against the computer in the terminal:

    python main.py                 # you are X, first to 3 wins
    python main.py --mark O --wins 1
    python main.py --watch         # computer vs computer

The computer searches the whole game tree, so the best you can get is a tie!
"""

import argparse
import random

from logic.config import GameConfig
from console.config import DisplayConfig
from console.display import Display
from console.players import ComputerPlayer, HumanPlayer
from console.match import Match


def build_players(args, display: Display, rng: random.Random):
    """Create the two players from the command-line options."""
    human_mark = args.mark
    computer_mark = GameConfig.other_mark(human_mark)

    computer = ComputerPlayer(
        computer_mark,
        name=f"{DisplayConfig.COMPUTER_NAME} {computer_mark}" if args.watch else None,
        opponent_mark=human_mark,
        rng=rng,
        show_scores=args.hints,
        verbose=args.debug,
        display=display
    )

    if args.watch:
        other = ComputerPlayer(
            human_mark,
            name=f"{DisplayConfig.COMPUTER_NAME} {human_mark}",
            opponent_mark=computer_mark,
            rng=rng,
            show_scores=args.hints,
            verbose=args.debug,
            display=display
        )
    else:
        other = HumanPlayer(human_mark, name=args.name, display=display)

    return other, computer


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="TicTacToe against an unbeatable computer")
    parser.add_argument(
        "--mark",
        choices=GameConfig.MARKS,
        default=GameConfig.MARKS[0],
        help="Your mark (the computer takes the other one)"
    )
    parser.add_argument(
        "--name",
        default=None,
        help="Your name on the scoreboard"
    )
    parser.add_argument(
        "--wins",
        type=int,
        default=DisplayConfig.WINS_TO_MATCH,
        help="Games needed to win the match"
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Watch the computer play itself"
    )
    parser.add_argument(
        "--hints",
        action="store_true",
        help="Show how the computer rates every square before it moves"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=GameConfig.DEBUG_MODE,
        help="Print search statistics for every computer move"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Don't clear the screen between moves"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (turn order and opening corner)"
    )
    args = parser.parse_args(argv)
    if args.wins < 1:
        parser.error("--wins must be at least 1")
    return args


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    display = Display(clear=DisplayConfig.CLEAR_SCREEN and not args.no_clear)
    rng = random.Random(args.seed)

    players = build_players(args, display, rng)

    # Two perfect players only ever tie, so cap a watched match
    max_games = args.wins * 3 if args.watch else None
    match = Match(players, wins_to_match=args.wins, display=display, rng=rng, max_games=max_games)

    try:
        match.play()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user. Goodbye!")


if __name__ == "__main__":
    main()

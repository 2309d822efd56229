#!/usr/bin/env python3
"""
CLI interface for playing Five-Dot Lines in the terminal.
"""
import argparse
import logging
import os
import sys

# Add the parent directory to Python path so we can import fivelines
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from fivelines.core.config import DEFAULT_BOARD_SIZE, DEFAULT_LINE_LENGTH, GameConfig
from fivelines.core.errors import ConfigError
from fivelines.core.game import Game, Rejection
from fivelines.highscore import HighScoreStore

REJECTION_MESSAGES = {
    Rejection.OUT_OF_BOUNDS: "That cell is off the board!",
    Rejection.CELL_OCCUPIED: "That cell already has a dot!",
    Rejection.ILLEGAL_MOVE: "Invalid move: either no five-in-a-row, or it overlaps a scored line.",
    Rejection.GAME_OVER: "The game is over. Type 'reset' to play again.",
}


def display_board(game):
    """Display the current board state in ASCII format."""
    size = game.board.size
    hints = {(m.x, m.y): m.count for m in game.revealed_moves}

    print("\n   ", end="")
    for x in range(size):
        print(f"{x:2d}", end=" ")
    print()
    print("   " + "---" * size)

    for y in range(size):
        print(f"{y:2d}|", end="")
        for x in range(size):
            if game.board.is_occupied(x, y):
                print(" ●", end=" ")
            elif (x, y) in hints:
                print(f"{hints[(x, y)]:2d}", end=" ")
            else:
                print(" ·", end=" ")
        print(f"|{y:2d}")

    print("   " + "---" * size)


def parse_move(move_input, size):
    """
    Parse move input from user.

    Args:
        move_input (str): User input like "10 6" or "10,6"
        size (int): Board size

    Returns:
        tuple: (x, y) or None if invalid
    """
    try:
        if ',' in move_input:
            parts = move_input.split(',')
        else:
            parts = move_input.split()

        if len(parts) != 2:
            return None

        x = int(parts[0].strip())
        y = int(parts[1].strip())

        if 0 <= x < size and 0 <= y < size:
            return (x, y)
        return None

    except ValueError:
        return None


def print_status(game, high_score):
    print(f"\nScore: {game.score}   High score: {high_score}   Moves: {game.move_count}")
    if not game.hint_used and not game.is_game_over:
        print("Type 'hint' once per game to reveal every legal spot.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Five-Dot Lines (solo)")
    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE,
                        help="Board size (odd, at least 13)")
    parser.add_argument("--line-length", type=int, default=DEFAULT_LINE_LENGTH,
                        help="Length of each arm of the starting cross (at least 5)")
    parser.add_argument("--data-dir", default=None, help="Directory for the high score file")
    parser.add_argument("--verbose", action="store_true", help="Log game events")
    return parser.parse_args(argv)


def main(argv=None):
    """Main game loop."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="[%(asctime)s] %(name)s %(levelname)s: %(message)s")

    try:
        game = Game(GameConfig(board_size=args.size, line_length=args.line_length))
    except ConfigError as e:
        print(f"ERROR: {e}")
        return 2

    store = HighScoreStore(args.data_dir)
    high_score = store.load()

    print("=" * 60)
    print("                 FIVE-DOT LINES (Solo)")
    print("=" * 60)
    print("Place a dot that completes a straight line of five including it.")
    print("No overlap on the same axis with lines already scored.")
    print("Up to 2 lines per axis per move. Game ends when no move is left.")
    print("Enter moves as: x y   Commands: hint, reset, quit")
    print("=" * 60)

    try:
        while True:
            display_board(game)
            print_status(game, high_score)

            if game.is_game_over:
                print(f"\nGame over - no legal moves remain. Final score: {game.score}.")

            command = input("\nYour move: ").strip().lower()

            if command in ['quit', 'exit', 'q']:
                break

            if command == 'reset':
                game.reset()
                print("New game started.")
                continue

            if command == 'hint':
                moves = game.reveal_moves()
                if moves is None:
                    print("The hint is no longer available this game.")
                elif moves:
                    print(f"Revealed {len(moves)} legal spots.")
                else:
                    print("No legal moves to reveal.")
                continue

            move = parse_move(command, game.board.size)
            if move is None:
                print("Invalid input! Please enter: x y (e.g., '10 6')")
                continue

            result = game.submit_move(*move)
            if not result.accepted:
                print(REJECTION_MESSAGES[result.rejection])
                continue

            print("Nice! +1 line." if result.count == 1 else f"Great! +{result.count} lines.")
            if store.save(game.score):
                high_score = game.score

    except (KeyboardInterrupt, EOFError):
        pass

    print("\nThanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

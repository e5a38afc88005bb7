"""
Console front-end for 3D TicTacToe.

This script ties together:
- Logic (board, win detection, game session)
- A text view of the board, one layer per z

Run this script to play 3D TicTacToe in the terminal, two players sharing
the keyboard.
"""

import argparse
import logging
from typing import Optional, Tuple

from logic.config import GameConfig
from logic.game_session import GameSession


class ConsoleGame:
    """
    Main controller for a console game.

    Game flow:
    1. Show the board and whose turn it is
    2. Read "x y z" (1-based) from the player
    3. Pass the move to the session
    4. Repeat until someone wins or it's a draw
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.is_running = False

    def start(self):
        """Start the game."""
        print("\n" + "=" * 60)
        print(f"   3D TicTacToe - {self.session.width}x{self.session.height}x{self.session.depth}, "
              f"{self.session.win_length} in a row")
        print("=" * 60)
        print("Enter moves as 'x y z' (1-based). 'r' resets, 'q' quits.\n")

        self.is_running = True
        self.session.print_board()
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            try:
                line = input(f"\n{GameConfig.MARK_SYMBOLS[self.session.current_player]}> ")
            except EOFError:
                break

            command = line.strip().lower()
            if command in ("q", "quit", "exit"):
                break
            if command in ("r", "reset"):
                self.session.reset()
                self.session.print_board()
                continue

            move = self._parse_move(command)
            if move is None:
                print("Enter three numbers, e.g. '1 2 3'")
                continue

            self._process_move(*move)

    def _parse_move(self, command: str) -> Optional[Tuple[int, int, int]]:
        """Turn 'x y z' or 'x,y,z' into a tuple, None if it doesn't parse."""
        parts = command.replace(",", " ").split()
        if len(parts) != 3:
            return None
        try:
            x, y, z = (int(p) for p in parts)
        except ValueError:
            return None
        return x, y, z

    def _process_move(self, x: int, y: int, z: int):
        """Play a move and report the result."""
        check = self.session.validate_move(x, y, z)
        if not check.is_valid:
            print(check.error_message)
            return

        outcome = self.session.make_move(x, y, z)
        self.session.print_board()

        if outcome.is_terminal:
            self._show_game_result()

    def _show_game_result(self):
        """Print the final result."""
        print("\n" + "=" * 60)
        if self.session.winner is not None:
            cells = " ".join(f"({x},{y},{z})" for x, y, z in self.session.winning_line)
            print(f"   Winning line: {cells}")
        print("   Type 'r' to play again or 'q' to quit.")
        print("=" * 60)


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="3D TicTacToe")
    parser.add_argument("--width", type=int, default=GameConfig.DEFAULT_WIDTH, help="Cells along X")
    parser.add_argument("--height", type=int, default=GameConfig.DEFAULT_HEIGHT, help="Cells along Y")
    parser.add_argument("--depth", type=int, default=GameConfig.DEFAULT_DEPTH, help="Cells along Z")
    parser.add_argument(
        "--win-length",
        type=int,
        default=GameConfig.DEFAULT_WIN_LENGTH,
        help="Marks in a row needed to win (default: smallest dimension)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every move"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        session = GameSession(args.width, args.height, args.depth, args.win_length)
    except ValueError as e:
        parser.error(str(e))

    game = ConsoleGame(session)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()

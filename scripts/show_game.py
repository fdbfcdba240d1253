#!/usr/bin/env python
"""Print the board and status after a sequence of moves. Run from project root with venv activated.

Usage: python scripts/show_game.py 0 3 1 4 2
"""
import sys
sys.path.insert(0, '.')

from app.projects.tic_tac_toe.core.constants import BOARD_SIZE, BOARD_WIDTH
from app.projects.tic_tac_toe.core.game_state import GameState


def parse_moves(args):
    """Cell numbers from argv; anything else is reported and skipped."""
    moves = []
    for arg in args:
        try:
            index = int(arg)
        except ValueError:
            print(f"Skipping {arg!r}: not a cell number")
            continue
        if not 0 <= index < BOARD_SIZE:
            print(f"Skipping {index}: cells are numbered 0-{BOARD_SIZE - 1}")
            continue
        moves.append(index)
    return moves


def render_board(game):
    separator = "+".join(["---"] * BOARD_WIDTH)
    lines = ["=" * len(separator)]
    for row in range(BOARD_WIDTH):
        cells = game.board[row * BOARD_WIDTH:(row + 1) * BOARD_WIDTH]
        lines.append(" " + " | ".join(cell.value if cell else " " for cell in cells))
        if row < BOARD_WIDTH - 1:
            lines.append(separator)
    lines.append("=" * len(separator))
    return "\n".join(lines)


def main(args):
    game = GameState()
    game.subscribe(lambda state, index, marker: print(f"{marker.value} -> cell {index}"))
    for index in parse_moves(args):
        game.play(index)
    print(render_board(game))
    print(game.status())
    return game


if __name__ == "__main__":
    main(sys.argv[1:])

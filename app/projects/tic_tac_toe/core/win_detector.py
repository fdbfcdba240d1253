"""
Win detection for Tic-Tac-Toe.
Pure functions over a 9-cell board snapshot; no state, no side effects.
"""
from typing import Optional, Sequence

from app.projects.tic_tac_toe.core.constants import WINNING_LINES, Marker

Board = Sequence[Optional[Marker]]


def winning_line(board: Board) -> Optional[tuple[int, int, int]]:
    """
    Return the first winning triple on the board, or None.
    A triple wins when its three cells hold the same marker.
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def evaluate(board: Board) -> Optional[Marker]:
    """Return the marker owning a complete line, or None if nobody has won."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]

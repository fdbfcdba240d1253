"""
Constants for Tic-Tac-Toe: board geometry, markers, winning lines, status text.
Single source of truth for the game state, the win detector and the templates.
"""
from enum import Enum


class Marker(str, Enum):
    """The two player symbols."""
    X = "X"
    O = "O"

    def opposite(self) -> "Marker":
        return Marker.O if self is Marker.X else Marker.X


# --- Board geometry ---
BOARD_WIDTH = 3
BOARD_SIZE = BOARD_WIDTH * BOARD_WIDTH

FIRST_MARKER = Marker.X

# Rows, then columns, then diagonals. Indices are row * 3 + col.
WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

# --- Status line ---
WINNER_STATUS = "{marker} has won"
NEXT_PLAYER_STATUS = "Next player: {marker}"

# Flask session key holding the serialized game
SESSION_KEY = "tic_tac_toe"

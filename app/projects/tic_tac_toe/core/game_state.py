"""
Game state for Tic-Tac-Toe.
Owns the board and the turn; every mutation goes through play().
"""
from typing import Callable, Optional

from app.projects.tic_tac_toe.core import win_detector
from app.projects.tic_tac_toe.core.constants import (
    BOARD_SIZE,
    FIRST_MARKER,
    NEXT_PLAYER_STATUS,
    WINNER_STATUS,
    Marker,
)

# listener(state, index, marker) runs after each accepted move
MoveListener = Callable[["GameState", int, Marker], None]


class GameState:
    """
    One game of Tic-Tac-Toe.

    The board is a list of 9 cells (None or a Marker), indexed row * 3 + col.
    Cells only go from empty to a marker. The turn flips once per accepted move.
    """

    def __init__(self, board=None, x_is_next=True):
        self.board: list[Optional[Marker]] = (
            list(board) if board is not None else [None] * BOARD_SIZE
        )
        self.x_is_next = x_is_next
        self._listeners: list[MoveListener] = []

    @property
    def next_marker(self) -> Marker:
        return FIRST_MARKER if self.x_is_next else FIRST_MARKER.opposite()

    def play(self, index: int) -> None:
        """
        Place the current marker at index (0-8) and pass the turn.

        Does nothing if the game is already won or the cell is taken.
        Index range is the caller's responsibility.
        """
        if win_detector.evaluate(self.board) is not None or self.board[index] is not None:
            return

        marker = self.next_marker
        self.board[index] = marker
        self.x_is_next = not self.x_is_next

        for listener in list(self._listeners):
            listener(self, index, marker)

    def winner(self) -> Optional[Marker]:
        return win_detector.evaluate(self.board)

    def winning_line(self) -> Optional[tuple[int, int, int]]:
        return win_detector.winning_line(self.board)

    def is_over(self) -> bool:
        # No draw state: a full board without a line is not "over"
        return self.winner() is not None

    def status(self) -> str:
        winner = self.winner()
        if winner is not None:
            return WINNER_STATUS.format(marker=winner.value)
        return NEXT_PLAYER_STATUS.format(marker=self.next_marker.value)

    def cells(self) -> list[tuple[int, Optional[Marker]]]:
        """(index, cell) pairs in board order, for rendering."""
        return list(enumerate(self.board))

    # --- Observers ---

    def subscribe(self, listener: MoveListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: MoveListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Session round-trip ---

    def to_dict(self) -> dict:
        return {
            "board": [cell.value if cell is not None else None for cell in self.board],
            "x_is_next": self.x_is_next,
        }

    @classmethod
    def from_dict(cls, data) -> "GameState":
        """
        Rebuild a game from to_dict() output.
        Raises ValueError if the payload is not a well-formed game, or if the
        marker counts could not come from alternating moves starting with X.
        """
        if not isinstance(data, dict):
            raise ValueError("Game data must be a dict")
        try:
            raw_board = data["board"]
            x_is_next = data["x_is_next"]
        except KeyError as e:
            raise ValueError(f"Game data is missing {e}") from e

        if not isinstance(raw_board, list) or len(raw_board) != BOARD_SIZE:
            raise ValueError(f"Board must be a list of {BOARD_SIZE} cells")
        if not isinstance(x_is_next, bool):
            raise ValueError("x_is_next must be a bool")

        board = [Marker(cell) if cell is not None else None for cell in raw_board]
        x_count, o_count = board.count(Marker.X), board.count(Marker.O)
        if x_is_next and x_count != o_count:
            raise ValueError(f"X to play needs equal counts, got {x_count} X and {o_count} O")
        if not x_is_next and x_count != o_count + 1:
            raise ValueError(f"O to play needs one more X than O, got {x_count} X and {o_count} O")
        return cls(board=board, x_is_next=x_is_next)

    def __repr__(self):
        cells = "".join(cell.value if cell else "." for cell in self.board)
        return f"<GameState {cells} next={self.next_marker.value}>"

from __future__ import annotations

from typing import Optional


class OthelloError(Exception):
    """Base class for every error raised by the engine."""


class InvalidMoveError(OthelloError):
    """Raised when a move targets an occupied cell or flips nothing."""

    def __init__(self, row: int, col: int, player: object, reason: Optional[str] = None) -> None:
        self.row = row
        self.col = col
        self.player = player
        self.reason = reason or "move does not flip any disc"
        name = getattr(player, "name", str(player)).lower()
        super().__init__(f"Illegal move for {name} at ({row}, {col}): {self.reason}")


class IllegalStateError(OthelloError):
    """Raised when a move is attempted out of turn or after the game ended."""


class InvalidCoordinateError(OthelloError, ValueError):
    """Raised at the boundary for malformed or off-board coordinates."""

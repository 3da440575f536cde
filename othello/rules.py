"""Othello move rules: flip sets, legality, move application and terminal detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .board import BOARD_SIZE, Board, Cell, Coordinate, Player, in_bounds
from .errors import InvalidMoveError

# N, NE, E, SE, S, SW, W, NW
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
)


@dataclass(frozen=True)
class DiscCount:
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    @property
    def margin(self) -> int:
        """White minus Black."""
        return self.white - self.black


def flippable(board: Board, row: int, col: int, player: Player) -> List[Coordinate]:
    """Return the opponent discs a disc at ``(row, col)`` would flip.

    An empty list means the move is not legal, including when the target
    cell is off the board or already occupied.
    """
    if not in_bounds(row, col) or board.cell(row, col) is not Cell.EMPTY:
        return []
    mine = player.cell
    theirs = player.opponent.cell
    flips: List[Coordinate] = []
    for dr, dc in DIRECTIONS:
        run: List[Coordinate] = []
        r, c = row + dr, col + dc
        while in_bounds(r, c) and board.cell(r, c) is theirs:
            run.append((r, c))
            r += dr
            c += dc
        if run and in_bounds(r, c) and board.cell(r, c) is mine:
            flips.extend(run)
    return flips


def is_legal(board: Board, row: int, col: int, player: Player) -> bool:
    return bool(flippable(board, row, col, player))


def legal_moves(board: Board, player: Player) -> List[Coordinate]:
    """All legal moves for ``player`` in row-major order."""
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if is_legal(board, r, c, player)
    ]


def has_legal_move(board: Board, player: Player) -> bool:
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if is_legal(board, r, c, player):
                return True
    return False


def place(board: Board, row: int, col: int, player: Player, flips: Sequence[Coordinate]) -> None:
    """Unchecked move application; ``flips`` must come from :func:`flippable`."""
    cell = player.cell
    board._set(row, col, cell)
    for r, c in flips:
        board._set(r, c, cell)


def undo(board: Board, row: int, col: int, player: Player, flips: Sequence[Coordinate]) -> None:
    """Reverse a :func:`place` call made with the same arguments."""
    board._set(row, col, Cell.EMPTY)
    opp = player.opponent.cell
    for r, c in flips:
        board._set(r, c, opp)


def apply_move(board: Board, row: int, col: int, player: Player) -> List[Coordinate]:
    """Play ``player`` at ``(row, col)`` in place and return the flipped discs.

    Raises:
        InvalidMoveError: if the cell is off the board, occupied, or nothing
            would flip.
    """
    if not in_bounds(row, col):
        raise InvalidMoveError(row, col, player, "cell is off the board")
    if board.cell(row, col) is not Cell.EMPTY:
        raise InvalidMoveError(row, col, player, "cell is occupied")
    flips = flippable(board, row, col, player)
    if not flips:
        raise InvalidMoveError(row, col, player)
    place(board, row, col, player, flips)
    return flips


def count_discs(board: Board) -> DiscCount:
    black = white = 0
    for _, _, value in board.cells():
        if value is Cell.BLACK:
            black += 1
        elif value is Cell.WHITE:
            white += 1
    return DiscCount(black=black, white=white)


def is_terminal(board: Board) -> bool:
    return not has_legal_move(board, Player.BLACK) and not has_legal_move(board, Player.WHITE)

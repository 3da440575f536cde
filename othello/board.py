from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import InvalidCoordinateError

BOARD_SIZE = 8

Coordinate = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


class Player(IntEnum):
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> "Player":
        return Player.WHITE if self is Player.BLACK else Player.BLACK

    @property
    def cell(self) -> Cell:
        return Cell(self.value)


_SYMBOLS = {Cell.EMPTY: ".", Cell.BLACK: "B", Cell.WHITE: "W"}
_FROM_SYMBOL = {v: k for k, v in _SYMBOLS.items()}


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def validate_coordinate(value: object) -> Coordinate:
    """Coerce ``value`` into an on-board ``(row, col)`` pair.

    Accepts any two-item sequence of integers (lists arrive this way from
    JSON). Booleans and non-integral values are rejected.
    """
    try:
        row, col = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Coordinate must be a (row, col) pair, got {value!r}") from None
    for part in (row, col):
        if isinstance(part, bool) or not isinstance(part, int):
            raise InvalidCoordinateError(f"Coordinate parts must be integers, got {value!r}")
    if not in_bounds(row, col):
        raise InvalidCoordinateError(f"Coordinate ({row}, {col}) is off the board")
    return row, col


class Board:
    """Fixed 8x8 Othello grid.

    The board has no public mutators. Discs are placed and flipped only
    through :mod:`othello.rules` so the occupied count can never shrink
    during play.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Sequence[Sequence[Cell]] | None = None) -> None:
        if grid is None:
            self._grid: List[List[Cell]] = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        else:
            if len(grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in grid):
                raise ValueError("Board must be 8x8")
            self._grid = [[Cell(v) for v in row] for row in grid]

    @classmethod
    def initial(cls) -> "Board":
        board = cls()
        board._grid[3][3] = Cell.WHITE
        board._grid[3][4] = Cell.BLACK
        board._grid[4][3] = Cell.BLACK
        board._grid[4][4] = Cell.WHITE
        return board

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "Board":
        """Build a board from 8 strings of ``.``, ``B`` and ``W``.

        Whitespace inside a row is ignored, so ``"B W . . . . . ."`` works too.
        """
        grid = []
        for raw in rows:
            row = raw.replace(" ", "")
            try:
                grid.append([_FROM_SYMBOL[ch] for ch in row])
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol {exc.args[0]!r} in row {raw!r}") from None
        return cls(grid)

    def cell(self, row: int, col: int) -> Cell:
        return self._grid[row][col]

    def _set(self, row: int, col: int, value: Cell) -> None:
        self._grid[row][col] = value

    def copy(self) -> "Board":
        clone = Board.__new__(Board)
        clone._grid = [row[:] for row in self._grid]
        return clone

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self._grid):
            for c, value in enumerate(row):
                yield r, c, value

    def occupied_cells(self) -> List[Coordinate]:
        return [(r, c) for r, c, v in self.cells() if v is not Cell.EMPTY]

    def empty_cells(self) -> List[Coordinate]:
        return [(r, c) for r, c, v in self.cells() if v is Cell.EMPTY]

    def filled_count(self) -> int:
        return sum(1 for row in self._grid for v in row if v is not Cell.EMPTY)

    def rows(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    def to_strings(self) -> List[str]:
        return ["".join(v.symbol for v in row) for row in self._grid]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    # boards change in place during search
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board({self.to_strings()!r})"

    def __str__(self) -> str:
        lines = ["  " + " ".join(str(c) for c in range(BOARD_SIZE))]
        for r, row in enumerate(self.to_strings()):
            lines.append(f"{r} " + " ".join(row))
        return "\n".join(lines)

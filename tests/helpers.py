from __future__ import annotations

import random

from othello import Board, Player
from othello.rules import apply_move, legal_moves

EMPTY_ROW = "........"

PASS_ROWS = [
    "B.......",
    "W.......",
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    EMPTY_ROW,
    "BW......",
]


def board_with_filled(n: int) -> Board:
    """A board whose first ``n`` cells (row-major) hold black discs."""
    cells = ["B"] * n + ["."] * (64 - n)
    return Board.from_strings("".join(cells[i:i + 8]) for i in range(0, 64, 8))


def random_position(seed: int, plies: int) -> tuple[Board, Player]:
    rng = random.Random(seed)
    board = Board.initial()
    player = Player.BLACK
    for _ in range(plies):
        moves = legal_moves(board, player)
        if not moves:
            player = player.opponent
            moves = legal_moves(board, player)
            if not moves:
                break
        r, c = rng.choice(moves)
        apply_move(board, r, c, player)
        player = player.opponent
    return board, player

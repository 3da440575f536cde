from __future__ import annotations

from typing import List

from .board import Board, Cell, Player
from .rules import count_discs, legal_moves


class Evaluator:
    """Static evaluation for Othello positions.

    Positive scores favor White, negative scores favor Black.
    """

    # Corners are permanently stable; X- and C-squares next to an empty
    # corner hand it to the opponent.
    WEIGHTS: List[List[int]] = [
        [120, -20, 20, 5, 5, 20, -20, 120],
        [-20, -40, -5, -5, -5, -5, -40, -20],
        [20, -5, 15, 3, 3, 15, -5, 20],
        [5, -5, 3, 3, 3, 3, -5, 5],
        [5, -5, 3, 3, 3, 3, -5, 5],
        [20, -5, 15, 3, 3, 15, -5, 20],
        [-20, -40, -5, -5, -5, -5, -40, -20],
        [120, -20, 20, 5, 5, 20, -20, 120],
    ]

    MOBILITY_WEIGHT = 5
    WIN_SCORE = 10000

    @classmethod
    def square_weight(cls, row: int, col: int) -> int:
        return cls.WEIGHTS[row][col]

    @classmethod
    def positional_score(cls, board: Board) -> int:
        score = 0
        for r, c, value in board.cells():
            if value is Cell.WHITE:
                score += cls.WEIGHTS[r][c]
            elif value is Cell.BLACK:
                score -= cls.WEIGHTS[r][c]
        return score

    @classmethod
    def mobility_score(cls, board: Board) -> int:
        white_moves = len(legal_moves(board, Player.WHITE))
        black_moves = len(legal_moves(board, Player.BLACK))
        return cls.MOBILITY_WEIGHT * (white_moves - black_moves)

    @classmethod
    def evaluate(cls, board: Board) -> int:
        """Heuristic score used at search cutoffs of unfinished games."""
        return cls.positional_score(board) + cls.mobility_score(board)

    @classmethod
    def terminal_score(cls, board: Board) -> int:
        """Score of a finished game, always outside the heuristic range."""
        counts = count_discs(board)
        if counts.white > counts.black:
            return cls.WIN_SCORE + counts.margin
        if counts.black > counts.white:
            return -cls.WIN_SCORE + counts.margin
        return 0

    @classmethod
    def max_heuristic_magnitude(cls) -> int:
        cells = sum(len(row) for row in cls.WEIGHTS)
        return sum(abs(w) for row in cls.WEIGHTS for w in row) + cls.MOBILITY_WEIGHT * cells

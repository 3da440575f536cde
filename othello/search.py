from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import logging

from .board import Board, Coordinate, Player
from .config import CONFIG, SearchConfig
from .evaluator import Evaluator
from .rules import flippable, legal_moves, place, undo

logger = logging.getLogger(__name__)

INF = 10**9


@dataclass
class SearchResult:
    best_move: Optional[Coordinate]
    score: int
    nodes: int
    depth: int
    scored_moves: Optional[List[Tuple[Coordinate, int]]] = None


class Searcher:
    """Minimax with alpha-beta pruning over White's evaluation.

    White is always the maximizing side. The searched board is a private
    copy; moves are made and unmade in place on that copy.
    """

    def __init__(self, config: Optional[SearchConfig] = None, prune: bool = True) -> None:
        self.config = config or CONFIG.search
        self.prune = prune
        self.nodes = 0

    def depth_for(self, board: Board) -> int:
        filled = board.filled_count()
        if filled >= self.config.endgame_filled:
            return self.config.endgame_depth
        if filled >= self.config.midgame_filled:
            return self.config.midgame_depth
        return self.config.default_depth

    def search(self, board: Board, player: Player = Player.WHITE, depth: Optional[int] = None) -> SearchResult:
        """Score every legal root move and return the best one for ``player``.

        White takes the first move with the highest value and Black the first
        with the lowest, so ties go to the earliest move in scan order.
        """
        if depth is None:
            depth = self.depth_for(board)
        self.nodes = 0
        search_board = board.copy()
        maximizing = player is Player.WHITE

        best_move: Optional[Coordinate] = None
        best_score = -INF if maximizing else INF
        scored_moves: List[Tuple[Coordinate, int]] = []

        for r, c in legal_moves(search_board, player):
            flips = flippable(search_board, r, c, player)
            place(search_board, r, c, player, flips)
            try:
                score = self.minimax(search_board, depth - 1, -INF, INF, not maximizing)
            finally:
                undo(search_board, r, c, player, flips)
            scored_moves.append(((r, c), score))
            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = (r, c)

        if best_move is None:
            best_score = Evaluator.evaluate(search_board)

        logger.debug(
            "search player=%s depth=%d best=%s score=%d nodes=%d",
            player.name, depth, best_move, best_score, self.nodes,
        )
        return SearchResult(
            best_move=best_move,
            score=best_score,
            nodes=self.nodes,
            depth=depth,
            scored_moves=scored_moves,
        )

    def minimax(self, board: Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        self.nodes += 1
        player = Player.WHITE if maximizing else Player.BLACK
        moves = legal_moves(board, player)

        if depth <= 0 or not moves:
            if not moves:
                if not legal_moves(board, player.opponent):
                    return Evaluator.terminal_score(board)
                # a pass costs no depth
                return self.minimax(board, depth, alpha, beta, not maximizing)
            return Evaluator.evaluate(board)

        if maximizing:
            value = -INF
            for r, c in moves:
                flips = flippable(board, r, c, player)
                place(board, r, c, player, flips)
                try:
                    score = self.minimax(board, depth - 1, alpha, beta, False)
                finally:
                    undo(board, r, c, player, flips)
                value = max(value, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    break
            return value
        else:
            value = INF
            for r, c in moves:
                flips = flippable(board, r, c, player)
                place(board, r, c, player, flips)
                try:
                    score = self.minimax(board, depth - 1, alpha, beta, True)
                finally:
                    undo(board, r, c, player, flips)
                value = min(value, score)
                beta = min(beta, score)
                if self.prune and beta <= alpha:
                    break
            return value

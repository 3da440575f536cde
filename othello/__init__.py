"""Othello engine package providing the board, rules, evaluation, and AI search.

Modules:
- board: 8x8 board model, cell and player enums
- rules: flip sets, legal moves, move application, terminal detection
- evaluator: positional weight table, mobility and terminal scoring
- search: minimax with alpha-beta pruning and adaptive depth
- ai: random, weighted-greedy and search-based move policies
- game: turn controller owning the live game state and emitting events
"""

from .ai import AIPlayer, Difficulty
from .board import Board, Cell, Player
from .errors import IllegalStateError, InvalidCoordinateError, InvalidMoveError, OthelloError
from .evaluator import Evaluator
from .game import (
    Game,
    GameMode,
    GameOver,
    GameState,
    MoveApplied,
    Passed,
    attempt_move,
    choose_ai_move,
    legal_moves,
    new_game,
)
from .search import Searcher, SearchResult

__all__ = [
    "AIPlayer",
    "Board",
    "Cell",
    "Difficulty",
    "Evaluator",
    "Game",
    "GameMode",
    "GameOver",
    "GameState",
    "IllegalStateError",
    "InvalidCoordinateError",
    "InvalidMoveError",
    "MoveApplied",
    "OthelloError",
    "Passed",
    "Player",
    "SearchResult",
    "Searcher",
    "attempt_move",
    "choose_ai_move",
    "legal_moves",
    "new_game",
]

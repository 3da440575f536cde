from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

import logging
import random
import threading

from .board import Board, Coordinate, Player
from .evaluator import Evaluator
from .rules import legal_moves
from .search import Searcher

logger = logging.getLogger(__name__)


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "str | Difficulty") -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {value!r}") from None


class RandomPolicy:
    """Pick any legal move uniformly."""

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def choose(self, board: Board, moves: Sequence[Coordinate], player: Player) -> Coordinate:
        return self.rng.choice(list(moves))


class GreedyPolicy:
    """Pick the move whose target square carries the highest static weight.

    No lookahead and no mobility term; equal weights are broken at random.
    """

    def __init__(self, rng: random.Random) -> None:
        self.rng = rng

    def choose(self, board: Board, moves: Sequence[Coordinate], player: Player) -> Coordinate:
        best_score: Optional[int] = None
        best_moves: List[Coordinate] = []
        for r, c in moves:
            score = Evaluator.square_weight(r, c)
            if best_score is None or score > best_score:
                best_score = score
                best_moves = [(r, c)]
            elif score == best_score:
                best_moves.append((r, c))
        return self.rng.choice(best_moves)


class SearchPolicy:
    def __init__(self, searcher: Searcher) -> None:
        self.searcher = searcher

    def choose(self, board: Board, moves: Sequence[Coordinate], player: Player) -> Coordinate:
        result = self.searcher.search(board, player)
        if result.best_move is None:
            return moves[0]
        return result.best_move


class AIPlayer:
    """Chooses CPU moves for a difficulty level.

    All randomness flows through one ``random.Random`` so a fixed seed
    reproduces the same games.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        searcher: Optional[Searcher] = None,
    ) -> None:
        self.rng = rng or random.Random(seed)
        self.searcher = searcher or Searcher()
        self.policies: Dict[Difficulty, object] = {
            Difficulty.EASY: RandomPolicy(self.rng),
            Difficulty.NORMAL: GreedyPolicy(self.rng),
            Difficulty.HARD: SearchPolicy(self.searcher),
        }
        self._lock = threading.RLock()
        self.last_error: Optional[Exception] = None
        self._generation = 0
        self._thread: Optional[threading.Thread] = None

    def choose_move(
        self,
        board: Board,
        player: Player = Player.WHITE,
        difficulty: "Difficulty | str" = Difficulty.HARD,
    ) -> Optional[Coordinate]:
        """Return the move ``player`` should play, or None when it must pass."""
        difficulty = Difficulty.parse(difficulty)
        moves = legal_moves(board, player)
        if not moves:
            return None
        move = self.policies[difficulty].choose(board, moves, player)
        logger.info("AI (%s, %s) plays %s", player.name.lower(), difficulty.value, move)
        return move

    def start_search(
        self,
        board: Board,
        player: Player,
        difficulty: "Difficulty | str",
        callback: Callable[[Optional[Coordinate]], None],
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        """Run :meth:`choose_move` on a worker thread and report through ``callback``.

        If the search raises, the exception is logged and handed to
        ``on_error``; without one, ``callback`` receives None and the
        exception is kept on :attr:`last_error`.

        Starting another search or calling :meth:`cancel` discards the outcome
        of the one in flight; neither callback is invoked for it.
        """
        difficulty = Difficulty.parse(difficulty)
        search_board = board.copy()
        worker_ai = self._fork()
        with self._lock:
            self._generation += 1
            generation = self._generation

        def worker():
            error: Optional[Exception] = None
            move: Optional[Coordinate] = None
            try:
                move = worker_ai.choose_move(search_board, player, difficulty)
            except Exception as exc:
                logger.exception("Background search failed")
                error = exc
            # delivery and cancel() are serialized on the lock
            with self._lock:
                if generation != self._generation:
                    logger.debug("Discarding stale search outcome move=%s error=%r", move, error)
                    return
                if error is None:
                    callback(move)
                elif on_error is not None:
                    on_error(error)
                else:
                    self.last_error = error
                    callback(None)

        self._thread = threading.Thread(target=worker, daemon=True)
        self._thread.start()

    def _fork(self) -> "AIPlayer":
        # the worker gets its own searcher and RNG, seeded from ours
        searcher = Searcher(self.searcher.config, prune=self.searcher.prune)
        return AIPlayer(rng=random.Random(self.rng.getrandbits(64)), searcher=searcher)

    def cancel(self) -> None:
        with self._lock:
            self._generation += 1

    def wait(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout=timeout)

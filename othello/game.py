from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple, Union

import logging

from .ai import AIPlayer, Difficulty
from .board import Board, Coordinate, Player, validate_coordinate
from .errors import IllegalStateError
from .rules import apply_move, count_discs, has_legal_move
from .rules import legal_moves as board_legal_moves

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveApplied:
    coordinate: Coordinate
    flips: Tuple[Coordinate, ...]
    mover: Player


@dataclass(frozen=True)
class Passed:
    player: Player


@dataclass(frozen=True)
class GameOver:
    black_count: int
    white_count: int

    @property
    def winner(self) -> Optional[Player]:
        if self.black_count > self.white_count:
            return Player.BLACK
        if self.white_count > self.black_count:
            return Player.WHITE
        return None


Event = Union[MoveApplied, Passed, GameOver]


@dataclass
class GameState:
    board: Board
    current: Player = Player.BLACK
    terminal: bool = False
    history: List[Tuple[Player, Coordinate]] = field(default_factory=list)


@dataclass
class TurnResult:
    state: GameState
    flips: List[Coordinate]
    events: List[Event]


def new_game() -> GameState:
    return GameState(board=Board.initial(), current=Player.BLACK)


def legal_moves(state: GameState) -> List[Coordinate]:
    if state.terminal:
        return []
    return board_legal_moves(state.board, state.current)


def attempt_move(state: GameState, coordinate: object, player: Player) -> TurnResult:
    """Apply ``player``'s move to a copy of ``state`` and advance the turn.

    The returned state reflects the move plus any pass or game-over
    transition that follows it. ``state`` itself is left untouched.

    Raises:
        InvalidCoordinateError: ``coordinate`` is malformed or off the board.
        IllegalStateError: the game is over or it is not ``player``'s turn.
        InvalidMoveError: the target is occupied or flips nothing.
    """
    row, col = validate_coordinate(coordinate)
    if state.terminal:
        raise IllegalStateError("Game is already over")
    if player is not state.current:
        raise IllegalStateError(f"It is {state.current.name.lower()}'s turn, not {player.name.lower()}'s")

    board = state.board.copy()
    flips = apply_move(board, row, col, player)
    events: List[Event] = [MoveApplied(coordinate=(row, col), flips=tuple(flips), mover=player)]

    next_state = GameState(
        board=board,
        current=player,
        terminal=False,
        history=state.history + [(player, (row, col))],
    )
    events.extend(_advance_turn(next_state, player))
    return TurnResult(state=next_state, flips=flips, events=events)


def _advance_turn(state: GameState, mover: Player) -> List[Event]:
    opponent = mover.opponent
    if has_legal_move(state.board, opponent):
        state.current = opponent
        return []
    if has_legal_move(state.board, mover):
        state.current = mover
        logger.info("%s has no legal move and passes", opponent.name.lower())
        return [Passed(player=opponent)]
    state.terminal = True
    counts = count_discs(state.board)
    logger.info("Game over: black=%d white=%d", counts.black, counts.white)
    return [GameOver(black_count=counts.black, white_count=counts.white)]


def choose_ai_move(
    state: GameState,
    difficulty: "Difficulty | str",
    ai: Optional[AIPlayer] = None,
) -> Coordinate:
    """Pick a move for the side to move without touching ``state``."""
    if state.terminal:
        raise IllegalStateError("Game is already over")
    ai = ai or AIPlayer()
    move = ai.choose_move(state.board, state.current, difficulty)
    if move is None:
        # _advance_turn never hands the turn to a player without moves
        raise IllegalStateError(f"{state.current.name.lower()} has no legal move")
    return move


class GameMode(str, Enum):
    HUMAN = "human"
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def difficulty(self) -> Optional[Difficulty]:
        if self is GameMode.HUMAN:
            return None
        return Difficulty(self.value)

    @classmethod
    def parse(cls, value: "str | GameMode") -> "GameMode":
        if isinstance(value, GameMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown game mode: {value!r}") from None


Listener = Callable[[Event], None]


class Game:
    """Owns the live game state and exposes it to the presentation layer.

    In CPU modes the human plays Black and the computer plays White. Every
    state change is reported to subscribed listeners as events, in order.
    """

    CPU_PLAYER = Player.WHITE

    def __init__(
        self,
        mode: "GameMode | str" = GameMode.HUMAN,
        ai: Optional[AIPlayer] = None,
        state: Optional[GameState] = None,
    ) -> None:
        self.mode = GameMode.parse(mode)
        self.ai = ai or AIPlayer()
        self.state = state or new_game()
        self._listeners: List[Listener] = []

    def reset(self, mode: "GameMode | str | None" = None) -> None:
        if mode is not None:
            self.mode = GameMode.parse(mode)
        self.state = new_game()

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    @property
    def board(self) -> Board:
        return self.state.board

    @property
    def current(self) -> Player:
        return self.state.current

    def is_cpu_turn(self) -> bool:
        return (
            self.mode is not GameMode.HUMAN
            and not self.state.terminal
            and self.state.current is self.CPU_PLAYER
        )

    def get_legal_moves(self) -> List[Coordinate]:
        return legal_moves(self.state)

    def play(self, row: int, col: int) -> TurnResult:
        """Apply a human move for the side to move."""
        if self.is_cpu_turn():
            raise IllegalStateError("It is the computer's turn")
        return self._commit(attempt_move(self.state, (row, col), self.state.current))

    def play_cpu_turns(self) -> List[TurnResult]:
        """Let the CPU move for as long as it holds the turn."""
        results: List[TurnResult] = []
        while self.is_cpu_turn():
            move = choose_ai_move(self.state, self.mode.difficulty, self.ai)
            results.append(self._commit(attempt_move(self.state, move, self.CPU_PLAYER)))
        return results

    def _commit(self, result: TurnResult) -> TurnResult:
        self.state = result.state
        for event in result.events:
            for listener in self._listeners:
                listener(event)
        return result

    def is_game_over(self) -> bool:
        return self.state.terminal

    def get_result(self) -> Optional[str]:
        if not self.state.terminal:
            return None
        counts = count_discs(self.state.board)
        if counts.black > counts.white:
            return "black"
        if counts.white > counts.black:
            return "white"
        return "draw"

    def snapshot(self) -> Dict[str, object]:
        counts = count_discs(self.state.board)
        last_move: Optional[List[int]] = None
        if self.state.history:
            last_move = list(self.state.history[-1][1])
        return {
            "board": self.state.board.to_strings(),
            "turn": self.state.current.name.lower(),
            "legal_moves": [list(m) for m in self.get_legal_moves()],
            "black": counts.black,
            "white": counts.white,
            "game_over": self.state.terminal,
            "result": self.get_result(),
            "mode": self.mode.value,
            "last_move": last_move,
        }


def event_to_dict(event: Event) -> Dict[str, object]:
    if isinstance(event, MoveApplied):
        return {
            "type": "move_applied",
            "coordinate": list(event.coordinate),
            "flips": [list(f) for f in event.flips],
            "mover": event.mover.name.lower(),
        }
    if isinstance(event, Passed):
        return {"type": "passed", "player": event.player.name.lower()}
    winner = event.winner
    return {
        "type": "game_over",
        "black": event.black_count,
        "white": event.white_count,
        "winner": winner.name.lower() if winner else None,
    }

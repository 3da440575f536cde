from __future__ import annotations

import random

import pytest

from othello import (
    AIPlayer,
    Board,
    Game,
    GameMode,
    GameOver,
    GameState,
    IllegalStateError,
    InvalidCoordinateError,
    InvalidMoveError,
    MoveApplied,
    Passed,
    Player,
    attempt_move,
    choose_ai_move,
    legal_moves,
    new_game,
)
from othello.game import event_to_dict

from helpers import PASS_ROWS


def pass_state() -> GameState:
    return GameState(board=Board.from_strings(PASS_ROWS), current=Player.BLACK)


def test_new_game_black_moves_first():
    state = new_game()
    assert state.current is Player.BLACK
    assert not state.terminal
    assert state.board == Board.initial()
    assert legal_moves(state) == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_attempt_move_returns_new_state():
    state = new_game()
    result = attempt_move(state, (2, 3), Player.BLACK)
    assert result.flips == [(3, 3)]
    assert result.events == [MoveApplied(coordinate=(2, 3), flips=((3, 3),), mover=Player.BLACK)]
    assert result.state.current is Player.WHITE
    assert result.state.history == [(Player.BLACK, (2, 3))]
    # the input state is untouched
    assert state.board == Board.initial()
    assert state.current is Player.BLACK
    assert state.history == []


def test_attempt_move_errors():
    state = new_game()
    with pytest.raises(IllegalStateError):
        attempt_move(state, (2, 4), Player.WHITE)
    with pytest.raises(InvalidMoveError):
        attempt_move(state, (0, 0), Player.BLACK)
    with pytest.raises(InvalidMoveError):
        attempt_move(state, (3, 3), Player.BLACK)
    with pytest.raises(InvalidCoordinateError):
        attempt_move(state, (8, 3), Player.BLACK)
    assert state.board == Board.initial()


def test_white_without_moves_passes():
    result = attempt_move(pass_state(), (7, 2), Player.BLACK)
    assert result.flips == [(7, 1)]
    assert result.events[1:] == [Passed(player=Player.WHITE)]
    assert result.state.current is Player.BLACK
    assert not result.state.terminal
    assert legal_moves(result.state) == [(2, 0)]


def test_game_over_when_nobody_can_move():
    state = attempt_move(pass_state(), (7, 2), Player.BLACK).state
    result = attempt_move(state, (2, 0), Player.BLACK)
    assert result.events[-1] == GameOver(black_count=6, white_count=0)
    assert result.events[-1].winner is Player.BLACK
    assert result.state.terminal
    assert legal_moves(result.state) == []
    with pytest.raises(IllegalStateError):
        attempt_move(result.state, (5, 5), Player.BLACK)
    with pytest.raises(IllegalStateError):
        choose_ai_move(result.state, "easy")


def test_choose_ai_move_does_not_touch_state():
    state = new_game()
    move = choose_ai_move(state, "normal", AIPlayer(seed=1))
    assert move in legal_moves(state)
    assert state.board == Board.initial()


def test_game_mode_parse():
    assert GameMode.parse("Hard") is GameMode.HARD
    assert GameMode.HUMAN.difficulty is None
    assert GameMode.EASY.difficulty.value == "easy"
    with pytest.raises(ValueError):
        GameMode.parse("online")


def test_listeners_receive_events_in_order():
    game = Game(state=pass_state())
    seen = []
    game.subscribe(seen.append)
    game.play(7, 2)
    game.play(2, 0)
    assert [type(e) for e in seen] == [MoveApplied, Passed, MoveApplied, GameOver]
    assert game.is_game_over()
    assert game.get_result() == "black"
    assert [event_to_dict(e)["type"] for e in seen] == ["move_applied", "passed", "move_applied", "game_over"]


def test_cpu_replies_in_cpu_mode():
    game = Game(GameMode.EASY, ai=AIPlayer(seed=3))
    game.play(2, 3)
    assert game.is_cpu_turn()
    with pytest.raises(IllegalStateError):
        game.play(2, 2)
    results = game.play_cpu_turns()
    assert len(results) == 1
    assert results[0].events[0].mover is Player.WHITE
    assert game.current is Player.BLACK
    assert not game.is_cpu_turn()


def test_human_mode_never_moves_for_anyone():
    game = Game(GameMode.HUMAN)
    game.play(2, 3)
    assert game.play_cpu_turns() == []
    assert game.current is Player.WHITE
    game.play(2, 2)
    assert game.current is Player.BLACK


def test_full_game_against_normal_cpu():
    rng = random.Random(9)
    game = Game("normal", ai=AIPlayer(seed=9))
    events = []
    game.subscribe(events.append)
    while not game.is_game_over():
        moves = game.get_legal_moves()
        assert game.current is Player.BLACK
        game.play(*rng.choice(moves))
        game.play_cpu_turns()
    finals = [e for e in events if isinstance(e, GameOver)]
    assert len(finals) == 1
    snap = game.snapshot()
    assert (snap["black"], snap["white"]) == (finals[0].black_count, finals[0].white_count)
    assert snap["game_over"] is True
    assert snap["legal_moves"] == []
    assert snap["result"] == game.get_result()


def test_reset_restores_initial_state():
    game = Game()
    game.play(2, 3)
    game.reset("hard")
    assert game.mode is GameMode.HARD
    assert game.board == Board.initial()
    snap = game.snapshot()
    assert snap["turn"] == "black"
    assert snap["last_move"] is None
    assert snap["board"][3] == "...WB..."

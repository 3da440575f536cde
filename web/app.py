from __future__ import annotations

from flask import Flask, jsonify, request
import logging
import sys
import threading
from pathlib import Path

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from othello import AIPlayer, Difficulty, Game, GameMode, OthelloError
from othello.config import CONFIG
from othello.game import event_to_dict

logger = logging.getLogger(__name__)


def create_app(seed: int | None = None) -> Flask:
    app = Flask(__name__)

    game = Game(ai=AIPlayer(seed=seed))
    events: list = []
    game.subscribe(lambda event: events.append(event_to_dict(event)))
    # one request at a time touches the game and its event buffer
    game_lock = threading.Lock()

    def _respond(ai_moves=None):
        snap = game.snapshot()
        snap["events"] = list(events)
        snap["ai_moves"] = ai_moves or []
        events.clear()
        return jsonify(snap)

    @app.get("/api/state")
    def api_state():
        with game_lock:
            return jsonify(game.snapshot())

    @app.post("/api/new")
    def api_new():
        data = request.get_json(silent=True) or {}
        try:
            mode = GameMode.parse(data.get("mode", "human"))
            seed = int(data["seed"]) if data.get("seed") is not None else None
        except (TypeError, ValueError) as exc:
            return jsonify({"error": str(exc)}), 400

        with game_lock:
            if seed is not None:
                game.ai = AIPlayer(seed=seed)
            game.reset(mode)
            events.clear()
            logger.info("New game, mode=%s", mode.value)
            return _respond()

    @app.post("/api/move")
    def api_move():
        payload = request.get_json(silent=True) or {}
        if "row" not in payload or "col" not in payload:
            return jsonify({"error": "Missing row/col"}), 400

        with game_lock:
            try:
                game.play(payload["row"], payload["col"])
            except OthelloError as exc:
                events.clear()
                return jsonify({"error": str(exc)}), 400

            # CPU reply; it may move several times if the human has to pass
            ai_moves = [list(result.events[0].coordinate) for result in game.play_cpu_turns()]
            return _respond(ai_moves)

    @app.post("/api/ai-move")
    def api_ai_move():
        data = request.get_json(silent=True) or {}
        try:
            difficulty = Difficulty.parse(data.get("difficulty", "hard"))
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400

        with game_lock:
            if game.is_game_over():
                return jsonify({"error": "Game is already over"}), 400
            move = game.ai.choose_move(game.board, game.current, difficulty)
            return jsonify({"move": list(move) if move else None, "turn": game.current.name.lower()})

    return app


app = create_app()


def main() -> None:
    logging.basicConfig(
        level=CONFIG.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(host=CONFIG.web.host, port=CONFIG.web.port, debug=CONFIG.web.debug)


if __name__ == "__main__":
    main()

"""Flask JSON API for running RPS Arena tournaments."""

import json
import time
import queue
import threading
from flask import Flask, request, jsonify, Response

from .players import PlayerIdentity, get_strategy, get_player_by_name
from .tournament import run_tournament, DEFAULT_ROUNDS
from .export import tournament_to_dict

app = Flask(__name__)

MAX_ROUNDS = 1_000_000
PROGRESS_EVERY = 100


class InvalidParameter(ValueError):
    pass


def _parse_int(value, field_name: str, default=None):
    if value is None:
        return default
    if isinstance(value, bool):
        raise InvalidParameter(f"'{field_name}' must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidParameter(f"'{field_name}' must be an integer") from None


def _parse_rounds(value) -> int:
    rounds = _parse_int(value, "rounds", DEFAULT_ROUNDS)
    if rounds < 0 or rounds > MAX_ROUNDS:
        raise InvalidParameter(f"'rounds' must be between 0 and {MAX_ROUNDS}")
    return rounds


def _parse_bool(value, field_name: str, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidParameter(f"'{field_name}' must be true or false")
    return value


@app.errorhandler(InvalidParameter)
def handle_invalid_parameter(exc):
    return jsonify({"error": str(exc)}), 400


def _player_dict(player: PlayerIdentity) -> dict:
    strategy = get_strategy(player)
    return {
        "player": player.name,
        "value": player.value,
        "name": strategy.name,
        "description": strategy.description,
    }


@app.route("/api/players")
def api_players():
    return jsonify([_player_dict(player) for player in PlayerIdentity])


@app.route("/api/players/<name>")
def api_player(name):
    """Look up one player by strategy name, identity name or number."""
    try:
        player = get_player_by_name(name)
    except ValueError as e:
        return jsonify({"error": str(e)}), 404
    return jsonify(_player_dict(player))


@app.route("/api/tournament", methods=["POST"])
def api_tournament():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidParameter("request body must be a JSON object")
    rounds = _parse_rounds(data.get("rounds"))
    seed = _parse_int(data.get("seed"), "seed")
    include_matches = _parse_bool(data.get("include_matches"), "include_matches")

    start_time = time.time()
    result = run_tournament(rounds=rounds, seed=seed)
    payload = tournament_to_dict(result, include_matches=include_matches)
    payload["elapsed"] = round(time.time() - start_time, 3)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# SSE streaming endpoint for live progress tracking
# ---------------------------------------------------------------------------

def _sse_event(data: dict, event: str = "message") -> str:
    """Format a Server-Sent Event string."""
    payload = json.dumps(data)
    return f"event: {event}\ndata: {payload}\n\n"


@app.route("/api/tournament/stream")
def api_tournament_stream():
    """SSE endpoint that streams tournament progress."""
    rounds = _parse_rounds(request.args.get("rounds"))
    seed = _parse_int(request.args.get("seed"), "seed")

    def generate():
        progress_queue = queue.Queue()
        start_time = time.time()
        final_result = [None]

        def on_round_done(completed, total, match):
            if completed % PROGRESS_EVERY and completed != total:
                return
            progress_queue.put({
                "completed": completed,
                "total": total,
                "match": match.describe(),
                "elapsed": round(time.time() - start_time, 1),
                "pct": round(completed / total * 100, 1),
            })

        def run():
            final_result[0] = run_tournament(
                rounds=rounds, seed=seed, on_round_done=on_round_done,
            )
            progress_queue.put("DONE")

        thread = threading.Thread(target=run, daemon=True)
        thread.start()

        while True:
            try:
                item = progress_queue.get(timeout=60)
            except queue.Empty:
                yield ": keepalive\n\n"
                continue

            if item == "DONE":
                payload = tournament_to_dict(final_result[0], include_matches=False)
                payload["elapsed"] = round(time.time() - start_time, 1)
                yield _sse_event(payload, event="done")
                break
            yield _sse_event(item, event="progress")

    return Response(
        generate(),
        mimetype="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
            "Connection": "keep-alive",
        },
    )


def main():
    print("\n🎮 RPS Arena API")
    print("  → http://localhost:5000\n")
    app.run(debug=True, port=5000)


if __name__ == "__main__":
    main()

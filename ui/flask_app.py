"""
Flask JSON API for knight shortest-path queries.

Squares are addressed with "x-y" identifiers. Board rendering and click
handling belong to the client; this app only answers queries and keeps the
start/end selection in the signed cookie session.
"""

import logging
from functools import lru_cache
from numbers import Integral

from flask import Flask, jsonify, request, session

from knight_path.board import Coordinate, format_square_id, parse_square_id
from knight_path.config import (
    DEFAULT_BOARD_SIZE,
    INDEX_CACHE_SIZE,
    LOG_LEVEL,
    MAX_BOARD_SIZE,
    SECRET_KEY,
)
from knight_path.errors import InvalidBoardSize, KnightPathError, Unreachable
from knight_path.game import PathfinderSession
from knight_path.graph import ReachabilityIndex

app = Flask(__name__)
app.secret_key = SECRET_KEY

logger = logging.getLogger(__name__)


@lru_cache(maxsize=INDEX_CACHE_SIZE)
def cached_index(start: Coordinate, board_size: int) -> ReachabilityIndex:
    """Build (or reuse) the index for a start square. Indexes are immutable."""
    return ReachabilityIndex.build(start, board_size)


def parse_board_size(raw: object) -> int:
    """Board size from a query/body value, defaulting to DEFAULT_BOARD_SIZE."""
    if raw is None or raw == "":
        return DEFAULT_BOARD_SIZE
    if isinstance(raw, str):
        digits = raw.strip()
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidBoardSize(raw, MAX_BOARD_SIZE)
        size = int(digits)
    elif isinstance(raw, Integral) and not isinstance(raw, bool):
        size = int(raw)
    else:
        raise InvalidBoardSize(raw, MAX_BOARD_SIZE)
    if not 1 <= size <= MAX_BOARD_SIZE:
        raise InvalidBoardSize(size, MAX_BOARD_SIZE)
    return size


def json_body() -> dict:
    """Request JSON object, or {} for a missing, invalid or non-object body."""
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def require_square(raw: object, board_size: int) -> Coordinate:
    """Parse a required square id (missing values are invalid too)."""
    return parse_square_id(raw if raw is not None else "", board_size)


# ====================
# Error Handling
# ====================


@app.errorhandler(KnightPathError)
def handle_knight_path_error(error: KnightPathError):
    status = 404 if isinstance(error, Unreachable) else 400
    logger.warning(f"{request.method} {request.path} -> {status}: {error}")
    return jsonify({"error": type(error).__name__, "message": str(error)}), status


# ====================
# Stateless Queries
# ====================


@app.route("/api/path")
def path():
    """Shortest path between ?start= and ?end= on a board of ?size=."""
    board_size = parse_board_size(request.args.get("size"))
    start = require_square(request.args.get("start"), board_size)
    end = require_square(request.args.get("end"), board_size)

    squares = cached_index(start, board_size).shortest_path(end)

    return jsonify({
        "start": format_square_id(start),
        "end": format_square_id(end),
        "board_size": board_size,
        "moves": max(len(squares) - 1, 0),
        "path": [format_square_id(square) for square in squares],
    })


@app.route("/api/reachability")
def reachability():
    """Distance from ?start= to every reachable square."""
    board_size = parse_board_size(request.args.get("size"))
    start = require_square(request.args.get("start"), board_size)

    index = cached_index(start, board_size)

    return jsonify({
        "start": format_square_id(start),
        "board_size": board_size,
        "reachable": len(index),
        "max_distance": index.max_distance,
        "distances": {
            format_square_id(square): index.distance_to(square)
            for square in index.reachable()
        },
    })


# ====================
# Selection Session
# ====================


def load_session() -> PathfinderSession:
    """Rebuild the selection session from the cookie."""
    selection = PathfinderSession(
        board_size=session.get("board_size", DEFAULT_BOARD_SIZE),
        index_factory=cached_index,
    )
    if "start" in session:
        selection.choose_start(parse_square_id(session["start"], selection.board_size))
        if "end" in session:
            selection.choose_end(parse_square_id(session["end"], selection.board_size))
    return selection


def session_payload(selection: PathfinderSession) -> dict:
    payload = {
        "phase": selection.phase.value,
        "message": selection.message,
        "board_size": selection.board_size,
        "start": format_square_id(selection.start) if selection.start else None,
        "result": None,
    }
    if selection.result is not None:
        payload["result"] = selection.result.to_dict()
        payload["result"]["steps"] = {
            format_square_id(square): step
            for square, step in selection.result.step_numbers.items()
        }
    return payload


@app.route("/api/session")
def session_state():
    return jsonify(session_payload(load_session()))


@app.route("/api/session/start", methods=["POST"])
def session_start():
    """Choose the start square. Discards any previous selection."""
    body = json_body()
    board_size = parse_board_size(body.get("size"))

    selection = PathfinderSession(board_size=board_size, index_factory=cached_index)
    index = selection.choose_start(require_square(body.get("square"), board_size))

    session.clear()
    session["board_size"] = board_size
    session["start"] = format_square_id(index.start)

    return jsonify(session_payload(selection))


@app.route("/api/session/end", methods=["POST"])
def session_end():
    """Choose the end square and answer the query."""
    body = json_body()
    selection = load_session()

    result = selection.choose_end(require_square(body.get("square"), selection.board_size))
    session["end"] = format_square_id(result.end)

    return jsonify(session_payload(selection))


@app.route("/api/session/reset", methods=["POST"])
def session_reset():
    session.clear()
    return jsonify(session_payload(PathfinderSession(index_factory=cached_index)))


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    print("\n=== Knight Path API ===")
    print("Try http://localhost:5000/api/path?start=0-0&end=7-7\n")
    app.run(debug=True, port=5000)

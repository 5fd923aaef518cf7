"""
main.py — Algorithm Trace Visualizer Flask App
================================================
JSON host over the trace engine.  The browser renders; this server runs
algorithms, owns the playback cursor and answers with reconstructed
frames.

Routes:
  GET  /api/algorithms         – registry cards (label, category, pseudocode …)
  POST /api/run                – select algorithm + input, record the run
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N (clamped)
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – let auto-play advance if its deadline passed
  POST /api/config/speed       – speed multiplier or preset name
  GET  /api/state              – current frame (for polling)
  POST /api/explain            – natural-language note on the current step

State management:
  Each browser gets an id in the Flask session cookie; the matching
  VisualizerSession (log + cursor) lives in this process, in
  app.extensions["visualizer_sessions"].  Nothing large goes into the
  cookie.  The store keeps the app.config["MAX_SESSIONS"] most recently
  used sessions and closes whatever falls off the end.

Explanations:
  app.config["EXPLAIN_BACKEND"] may hold any callable prompt → text.
  Left unset, it is built from app.config["EXPLAIN"] ("claude" or
  empty); with neither, /api/explain answers with the "unavailable"
  notice.
"""

import logging
import secrets
import threading
from collections import OrderedDict
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request, session

from algorithms import list_algorithms
from config import EXPLAIN, EXPLAIN_MODEL, HOST, MAX_SESSIONS, PORT, SECRET_KEY, setup_logging
from engine import VisualizerSession, backend_from_config, random_values
from errors import InvalidInputError, TraceError
from graph import Graph, Lattice

logger = logging.getLogger(__name__)

_store_lock = threading.Lock()


def _no_backend(prompt: str) -> str:
    raise RuntimeError("no explanation backend configured")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def _sessions(app: Flask) -> "OrderedDict[str, VisualizerSession]":
    return app.extensions.setdefault("visualizer_sessions", OrderedDict())


def get_session(app: Flask) -> VisualizerSession:
    """This browser's VisualizerSession, created on first use."""
    sid = session.get("sid")
    store = _sessions(app)
    with _store_lock:
        if sid is not None and sid in store:
            store.move_to_end(sid)
            return store[sid]
        sid = secrets.token_hex(16)
        session["sid"] = sid
        vs = store[sid] = VisualizerSession()
        logger.debug("new visualizer session %s", sid)
        while len(store) > app.config["MAX_SESSIONS"]:
            old_sid, old = store.popitem(last=False)
            old.close()
            logger.debug("evicted visualizer session %s", old_sid)
    return vs


def close_sessions(app: Flask) -> None:
    """Close and forget every live session (shutdown)."""
    store = _sessions(app)
    with _store_lock:
        while store:
            _, vs = store.popitem()
            vs.close()


def require_run(vs: VisualizerSession) -> VisualizerSession:
    if vs.log is None:
        raise InvalidInputError("Run an algorithm first")
    return vs


def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def _run_kwargs(data: Dict[str, Any]) -> Dict[str, Any]:
    """Translate a /api/run body into VisualizerSession.select() arguments."""
    kwargs: Dict[str, Any] = {}
    try:
        if "random" in data:
            kwargs["values"] = random_values(int(data["random"]), data.get("seed"))
        elif "values" in data:
            kwargs["values"] = data["values"]
        if "search_value" in data:
            kwargs["search_value"] = data["search_value"]
        if "graph" in data:
            kwargs["graph"] = Graph.from_dict(data["graph"])
        if "lattice" in data:
            kwargs["lattice"] = Lattice.from_dict(data["lattice"])
    except (KeyError, TypeError, ValueError) as exc:
        if isinstance(exc, TraceError):
            raise
        raise InvalidInputError(f"Malformed input: {exc}") from exc
    for key in ("source", "target"):
        if key in data:
            kwargs[key] = str(data[key])
    return kwargs


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    setup_logging()

    app = Flask(__name__)
    app.secret_key = SECRET_KEY or secrets.token_hex(32)
    app.config.update(
        MAX_SESSIONS=MAX_SESSIONS,
        EXPLAIN=EXPLAIN,
        EXPLAIN_MODEL=EXPLAIN_MODEL,
        EXPLAIN_BACKEND=None,
    )
    if config:
        app.config.update(config)
    if app.config["EXPLAIN_BACKEND"] is None:
        backend = backend_from_config(app.config["EXPLAIN"], app.config["EXPLAIN_MODEL"])
        app.config["EXPLAIN_BACKEND"] = backend or _no_backend

    @app.errorhandler(TraceError)
    def handle_trace_error(exc: TraceError):
        logger.info("rejected request: %s", exc)
        return jsonify({"error": str(exc)}), 400

    # ------------------------------------------------------------------
    # API: Registry
    # ------------------------------------------------------------------
    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})

    # ------------------------------------------------------------------
    # API: Run
    # ------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data = _body()
        algo_key = data.get("algo_key")
        if not algo_key:
            return jsonify({"error": "algo_key is required"}), 400
        vs = get_session(app)
        vs.select(algo_key, **_run_kwargs(data))
        return jsonify(vs.snapshot())

    # ------------------------------------------------------------------
    # API: Step Navigation
    # ------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        vs = require_run(get_session(app))
        vs.cursor.step_forward()
        return jsonify(vs.snapshot())

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        vs = require_run(get_session(app))
        vs.cursor.step_backward()
        return jsonify(vs.snapshot())

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        vs = require_run(get_session(app))
        idx = _body().get("index")
        if isinstance(idx, bool) or not isinstance(idx, int):
            return jsonify({"error": "index must be an integer"}), 400
        vs.cursor.seek(idx)
        return jsonify(vs.snapshot())

    @app.route("/api/step/play", methods=["POST"])
    def api_step_play():
        vs = require_run(get_session(app))
        vs.cursor.toggle_play()
        return jsonify(vs.snapshot())

    @app.route("/api/step/tick", methods=["POST"])
    def api_step_tick():
        vs = require_run(get_session(app))
        moved = vs.cursor.tick()
        frame = vs.snapshot()
        frame["advanced"] = moved
        return jsonify(frame)

    # ------------------------------------------------------------------
    # API: Config Changes
    # ------------------------------------------------------------------
    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        vs = get_session(app)
        speed = _body().get("speed", "normal")
        try:
            if isinstance(speed, str):
                vs.cursor.set_speed_preset(speed)
            else:
                vs.cursor.set_speed(speed)
        except ValueError as exc:
            return jsonify({"error": str(exc)}), 400
        return jsonify({"speed": vs.cursor.speed, "delay": vs.cursor.delay})

    # ------------------------------------------------------------------
    # API: State & Explanation
    # ------------------------------------------------------------------
    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(get_session(app).snapshot())

    @app.route("/api/explain", methods=["POST"])
    def api_explain():
        vs = require_run(get_session(app))
        text = vs.explain(app.config["EXPLAIN_BACKEND"])
        return jsonify({"position": vs.cursor.position, "explanation": text})

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Algorithm Trace Visualizer on http://%s:%d", HOST, PORT)
    try:
        app.run(host=HOST, port=PORT)
    finally:
        close_sessions(app)

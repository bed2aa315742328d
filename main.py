"""
main.py — Algorithm Visualizer Flask App
==========================================
The JSON web server that powers the visualizer.

Routes:
  GET  /                              – service index (categories → algorithm keys)
  GET  /api/algorithms                – list algorithms (?category= filters)
  GET  /api/algorithms/<key>          – params, example, pseudocode, complexity
  POST /api/algorithms/<key>/random   – fresh random example params
  GET  /api/graph/templates           – template names
  POST /api/graph/template            – build a template graph
  POST /api/graph/import              – import a graph from adjacency-list text
  POST /api/run                       – run an algorithm, store the trace
  POST /api/step/next                 – advance one step
  POST /api/step/prev                 – rewind one step
  POST /api/step/goto                 – jump to step N
  POST /api/step/play                 – toggle play/pause
  POST /api/step/reset                – back to step 0, paused
  POST /api/config/speed              – playback preset or interval in ms
  GET  /api/state                     – tick playback, return the current step

State management:
  Completed runs live in the in-memory RUNS store, keyed by a run id
  kept in the Flask session.  The store is bounded by MAX_STORED_RUNS;
  the least recently used run is evicted first.
"""

import logging
import secrets
from collections import OrderedDict
from typing import Optional, Tuple

from flask import Flask, jsonify, request, session

import config
from graph import Graph, TEMPLATES, build_template
from algorithms import (
    CATEGORIES,
    algorithms_by_category,
    get_algorithm,
    list_algorithms,
    random_params,
)
from algorithms.params import parse_int
from engine import Recorder, Stepper, SPEED_PRESETS

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

NO_STEPS_MESSAGE = "Invalid input or no steps to visualize."

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

# run id → Recorder (holds the trace and its Stepper)
RUNS: "OrderedDict[str, Recorder]" = OrderedDict()


# ---------------------------------------------------------------------------
# Run Store Helpers
# ---------------------------------------------------------------------------
def store_run(rec: Recorder) -> str:
    run_id = secrets.token_hex(8)
    RUNS[run_id] = rec
    while len(RUNS) > config.MAX_STORED_RUNS:
        evicted, _ = RUNS.popitem(last=False)
        log.debug("evicted run %s", evicted)
    session["run_id"] = run_id
    return run_id


def current_run() -> Optional[Recorder]:
    run_id = session.get("run_id")
    rec = RUNS.get(run_id) if run_id else None
    if rec is not None:
        RUNS.move_to_end(run_id)
    return rec


def current_stepper() -> Optional[Stepper]:
    rec = current_run()
    return rec.stepper if rec else None


def error(message: str, status: int = 400):
    return jsonify({"error": message}), status


def body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def optional_seed(data: dict) -> Tuple[Optional[int], Optional[str]]:
    """(seed, None) or (None, error message)."""
    raw = data.get("seed")
    if raw is None:
        return None, None
    try:
        return parse_int(raw), None
    except ValueError as exc:
        return None, f"seed: {exc}"


def playback_payload(stepper: Stepper) -> dict:
    payload = stepper.to_dict()
    payload["run_id"] = session.get("run_id")
    return payload


# ---------------------------------------------------------------------------
# Index & Catalogue
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    return jsonify({
        "name": "Algorithm Visualizer",
        "categories": {
            cat: [info.key for info in algorithms_by_category(cat)]
            for cat in CATEGORIES
        },
        "speed_presets": SPEED_PRESETS,
    })


@app.route("/api/algorithms")
def api_algorithms():
    category = request.args.get("category")
    if category:
        if category not in CATEGORIES:
            return error(f"Unknown category '{category}'", 404)
        algos = algorithms_by_category(category)
    else:
        algos = list_algorithms()
    return jsonify({"algorithms": [info.to_dict() for info in algos]})


@app.route("/api/algorithms/<key>")
def api_algorithm_detail(key):
    info = get_algorithm(key)
    if info is None:
        return error(f"Unknown algorithm '{key}'", 404)
    return jsonify(info.to_dict())


@app.route("/api/algorithms/<key>/random", methods=["POST"])
def api_algorithm_random(key):
    info = get_algorithm(key)
    if info is None:
        return error(f"Unknown algorithm '{key}'", 404)
    seed, problem = optional_seed(body())
    if problem:
        return error(problem)
    return jsonify({"algo_key": key, "params": random_params(info, seed)})


# ---------------------------------------------------------------------------
# API: Graphs
# ---------------------------------------------------------------------------
@app.route("/api/graph/templates")
def api_graph_templates():
    return jsonify({"templates": list(TEMPLATES)})


@app.route("/api/graph/template", methods=["POST"])
def api_graph_template():
    data = body()
    name = data.get("name", "default")
    if not isinstance(name, str):
        return error("name must be a string")
    if name not in TEMPLATES:
        return error(f"Unknown template '{name}'", 404)
    seed, problem = optional_seed(data)
    if problem:
        return error(problem)
    return jsonify({"name": name, "graph": build_template(name, seed=seed).to_dict()})


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    text = body().get("text", "")
    if not isinstance(text, str):
        return error("text must be a string")
    try:
        graph = Graph.from_adjacency_list(text)
    except ValueError as e:
        return error(str(e))
    if graph.node_count() == 0:
        return error("No nodes found in adjacency list")
    if graph.node_count() > config.GRAPH_MAX_NODES:
        return error(f"Graph may have at most {config.GRAPH_MAX_NODES} nodes")
    return jsonify({"graph": graph.to_dict()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data     = body()
    algo_key = data.get("algo_key", "")
    params   = data.get("params") or {}

    if not isinstance(algo_key, str):
        return error("algo_key must be a string")
    if get_algorithm(algo_key) is None:
        return error(f"Unknown algorithm '{algo_key}'", 404)
    if not isinstance(params, dict):
        return error("params must be an object")

    rec = Recorder()
    try:
        rec.start(algo_key, params)
    except ValueError as e:
        return error(str(e))

    # sorting demos animate fast unless the user picked a speed
    interval = session.get("interval_ms")
    if interval is None and rec.algo_info.category == "sorting":
        interval = config.MINI_SORT_INTERVAL_MS

    stepper = Stepper(interval_ms=interval)
    rec.run_to_completion(stepper)
    if not rec.steps:
        log.warning("%s produced no steps for %s", algo_key, params)
        return error(NO_STEPS_MESSAGE)

    store_run(rec)
    export = rec.export()
    return jsonify({
        "algo_key":   algo_key,
        "params":     export["params"],
        "metrics":    export["metrics"],
        "steps":      export["steps"],
        "pseudocode": rec.algo_info.pseudocode,
        "playback":   playback_payload(stepper),
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = current_stepper()
    if stepper is None:
        return error("No active run")
    if not stepper.next_step():
        return error("Already at last step")
    return jsonify(playback_payload(stepper))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = current_stepper()
    if stepper is None:
        return error("No active run")
    if not stepper.prev_step():
        return error("Already at first step")
    return jsonify(playback_payload(stepper))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    stepper = current_stepper()
    if stepper is None:
        return error("No active run")
    try:
        idx = parse_int(body().get("index", 0))
    except ValueError:
        return error("Invalid step index")
    if not stepper.goto_step(idx):
        return error("Invalid step index")
    return jsonify(playback_payload(stepper))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    stepper = current_stepper()
    if stepper is None:
        return error("No active run")
    stepper.toggle_play()
    return jsonify(playback_payload(stepper))


@app.route("/api/step/reset", methods=["POST"])
def api_step_reset():
    stepper = current_stepper()
    if stepper is None:
        return error("No active run")
    stepper.reset()
    return jsonify(playback_payload(stepper))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    data    = body()
    probe   = Stepper()
    try:
        if "interval_ms" in data:
            probe.set_interval_ms(parse_int(data["interval_ms"]))
        else:
            probe.set_speed(data.get("speed", "medium"))
    except ValueError as e:
        return error(str(e))

    session["interval_ms"] = probe.interval_ms
    stepper = current_stepper()
    if stepper is not None:
        stepper.set_interval_ms(probe.interval_ms)
    return jsonify({"interval_ms": probe.interval_ms})


@app.route("/api/state")
def api_state():
    stepper = current_stepper()
    if stepper is None:
        return jsonify(playback_payload(Stepper(interval_ms=session.get("interval_ms"))))
    stepper.tick()
    return jsonify(playback_payload(stepper))


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    log.info("Algorithm Visualizer listening on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)

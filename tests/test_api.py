"""Tests for the Flask JSON API, through app.test_client()."""

import pytest

import config
import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    main.RUNS.clear()
    with main.app.test_client() as c:
        yield c


def run(client, algo_key="gcd", params=None):
    return client.post("/api/run", json={"algo_key": algo_key, "params": params or {}})


class TestCatalogue:
    """Algorithm listing and metadata."""

    def test_index_lists_categories(self, client):
        data = client.get("/").get_json()
        assert "gcd" in data["categories"]["mathematical"]
        assert "bfs" in data["categories"]["graph"]

    def test_list_and_filter(self, client):
        everything = client.get("/api/algorithms").get_json()["algorithms"]
        graph_only = client.get("/api/algorithms?category=graph").get_json()["algorithms"]
        assert len(graph_only) == 5
        assert len(everything) > len(graph_only)
        assert {a["category"] for a in graph_only} == {"graph"}

    def test_unknown_category(self, client):
        assert client.get("/api/algorithms?category=magic").status_code == 404

    def test_detail(self, client):
        data = client.get("/api/algorithms/knapsack").get_json()
        assert data["label"] == "Knapsack (0/1)"
        assert data["pseudocode"]
        assert [p["name"] for p in data["params"]] == ["capacity", "weights", "values"]

    def test_unknown_algorithm(self, client):
        assert client.get("/api/algorithms/nope").status_code == 404

    def test_random_params_with_seed(self, client):
        a = client.post("/api/algorithms/gcd/random", json={"seed": 3}).get_json()
        b = client.post("/api/algorithms/gcd/random", json={"seed": 3}).get_json()
        assert a == b
        assert set(a["params"]) == {"a", "b"}

    def test_random_bad_seed(self, client):
        assert client.post("/api/algorithms/gcd/random", json={"seed": "x"}).status_code == 400


class TestGraphs:
    """Template and import routes."""

    def test_template_names(self, client):
        names = client.get("/api/graph/templates").get_json()["templates"]
        assert "default" in names and "random" in names

    def test_build_template(self, client):
        data = client.post("/api/graph/template", json={"name": "grid", "seed": 1}).get_json()
        assert len(data["graph"]["nodes"]) == 9

    def test_unknown_template(self, client):
        assert client.post("/api/graph/template", json={"name": "moebius"}).status_code == 404

    def test_non_string_template_name(self, client):
        assert client.post("/api/graph/template", json={"name": ["cycle"]}).status_code == 400

    def test_import(self, client):
        data = client.post("/api/graph/import", json={"text": "A: B(2) C"}).get_json()
        assert len(data["graph"]["edges"]) == 2

    def test_import_empty(self, client):
        assert client.post("/api/graph/import", json={"text": ""}).status_code == 400


class TestRun:
    """Running algorithms."""

    def test_run_returns_trace_and_playback(self, client):
        resp = run(client, "gcd", {"a": 48, "b": 18})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["metrics"]["total_steps"] == len(data["steps"]) == 7
        assert data["playback"]["current_index"] == 0
        assert data["playback"]["state"] == "paused"
        assert data["pseudocode"]

    def test_unknown_algorithm(self, client):
        assert run(client, "warp").status_code == 404

    def test_non_string_algo_key(self, client):
        resp = client.post("/api/run", json={"algo_key": ["gcd"]})
        assert resp.status_code == 400
        assert "algo_key" in resp.get_json()["error"]

    def test_bad_params(self, client):
        resp = run(client, "sieve", {"n": 1000})
        assert resp.status_code == 400
        assert "at most" in resp.get_json()["error"]

    def test_empty_trace(self, client):
        resp = run(client, "array_remove", {"array": [1, 2], "index": 5})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == main.NO_STEPS_MESSAGE

    def test_graph_run_serialises_infinity(self, client):
        graph = {
            "nodes": [{"id": "1"}, {"id": "2"}, {"id": "3"}],
            "edges": [{"from": "1", "to": "2", "weight": 1}],
        }
        data = run(client, "dijkstra", {"graph": graph, "start": "1"}).get_json()
        assert data["steps"][-1]["distances"]["3"] is None

    def test_run_store_is_bounded(self, client, monkeypatch):
        monkeypatch.setattr(config, "MAX_STORED_RUNS", 2)
        for _ in range(4):
            run(client)
        assert len(main.RUNS) == 2


class TestStepping:
    """Cursor movement on the stored run."""

    def test_no_active_run(self, client):
        for path in ("/api/step/next", "/api/step/prev", "/api/step/play", "/api/step/reset"):
            assert client.post(path).status_code == 400
        assert client.post("/api/step/goto", json={"index": 0}).status_code == 400

    def test_next_prev(self, client):
        run(client)
        assert client.post("/api/step/prev").status_code == 400
        data = client.post("/api/step/next").get_json()
        assert data["current_index"] == 1
        assert data["step"]["step_number"] == 1
        assert client.post("/api/step/prev").get_json()["current_index"] == 0

    def test_next_past_end(self, client):
        run(client)
        client.post("/api/step/goto", json={"index": 6})
        resp = client.post("/api/step/next")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Already at last step"

    def test_goto_invalid(self, client):
        run(client)
        assert client.post("/api/step/goto", json={"index": 99}).status_code == 400
        assert client.post("/api/step/goto", json={"index": "x"}).status_code == 400

    def test_play_toggle_and_reset(self, client):
        run(client)
        assert client.post("/api/step/play").get_json()["state"] == "playing"
        assert client.post("/api/step/play").get_json()["state"] == "paused"
        client.post("/api/step/goto", json={"index": 4})
        data = client.post("/api/step/reset").get_json()
        assert data["current_index"] == 0
        assert data["state"] == "paused"

    def test_state_without_run(self, client):
        data = client.get("/api/state").get_json()
        assert data["state"] == "idle"
        assert data["step"] is None

    def test_state_with_run(self, client):
        run(client)
        data = client.get("/api/state").get_json()
        assert data["total_steps"] == 7
        assert data["run_id"] in main.RUNS


class TestSpeed:
    """Playback interval configuration."""

    def test_preset(self, client):
        assert client.post("/api/config/speed", json={"speed": "fast"}).get_json()["interval_ms"] == 300

    def test_interval_applies_to_active_and_future_runs(self, client):
        run(client)
        client.post("/api/config/speed", json={"interval_ms": 250})
        assert client.get("/api/state").get_json()["interval_ms"] == 250
        run(client)
        assert client.get("/api/state").get_json()["interval_ms"] == 250

    def test_default_intervals(self, client):
        assert run(client).get_json()["playback"]["interval_ms"] == config.PLAYBACK_INTERVAL_MS
        sort_run = run(client, "bubble_sort", {"array": "3,1,2"}).get_json()
        assert sort_run["playback"]["interval_ms"] == config.MINI_SORT_INTERVAL_MS

    def test_floor(self, client):
        assert client.post("/api/config/speed", json={"interval_ms": 5}).get_json()["interval_ms"] == 20

    def test_unknown_preset(self, client):
        assert client.post("/api/config/speed", json={"speed": "warp"}).status_code == 400

    def test_non_string_preset(self, client):
        assert client.post("/api/config/speed", json={"speed": ["fast"]}).status_code == 400
        assert client.post("/api/config/speed", json={"interval_ms": [300]}).status_code == 400

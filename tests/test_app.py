import pytest

from algorithms import produce
from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_algorithms_listing(client):
    data = client.get("/api/algorithms").get_json()
    assert len(data["algorithms"]) == 16
    assert data["default_speed"] == "1.5x"
    assert data["speeds"]["3x"] == 333


def test_empty_graph_by_default(client):
    data = client.get("/api/graph").get_json()
    assert data["graph"]["nodes"] == []
    assert data["editor"]["mode"] == "ADD"
    assert data["locked"] is False


def test_editing_through_clicks(client):
    a = client.post("/api/graph/canvas", json={"x": 10, "y": 20}).get_json()
    b = client.post("/api/graph/canvas", json={"x": 50, "y": 20}).get_json()
    ids = [n["id"] for n in b["graph"]["nodes"]]
    assert len(a["graph"]["nodes"]) == 1 and len(ids) == 2

    client.post("/api/graph/mode", json={"mode": "LINK"})
    pending = client.post("/api/graph/node", json={"node_id": ids[0]}).get_json()
    assert pending["editor"]["link_source"] == ids[0]

    linked = client.post("/api/graph/node", json={"node_id": ids[1]}).get_json()
    assert len(linked["graph"]["edges"]) == 1
    assert linked["editor"]["link_source"] is None

    client.post("/api/graph/mode", json={"mode": "START"})
    started = client.post("/api/graph/node", json={"node_id": ids[1]}).get_json()
    assert started["graph"]["start_node"] == ids[1]


def test_run_kruskal_on_sample_and_lock_until_finished(client):
    client.post("/api/graph/sample", json={"name": "mst"})
    resp = client.post("/api/run", json={"algorithm": "kruskal"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["steps"][-1]["is_terminal"] is True
    assert data["steps"][-1]["snapshot"]["total_weight"] == 12
    assert data["delay_ms"] == 666

    assert client.get("/api/graph").get_json()["locked"] is True
    assert client.post("/api/graph/clear").status_code == 400
    assert client.post("/api/run", json={"algorithm": "dfs"}).get_json() == {
        "ignored": True, "state": "running",
    }

    done = client.post("/api/run/finish", json={"outcome": "cancelled"}).get_json()
    assert done == {"state": "idle", "outcome": "cancelled"}
    assert client.post("/api/graph/clear").status_code == 200


def test_run_array_algorithm_with_speed(client):
    client.post("/api/speed", json={"speed": "2x"})
    data = client.post("/api/run", json={"algorithm": "bubble_sort", "array": [5, 3, 8, 1]}).get_json()
    assert data["steps"][-1]["snapshot"] == [1, 3, 5, 8]
    assert data["speed"] == "2x"
    assert data["delay_ms"] == 500


def test_run_search_with_target(client):
    data = client.post(
        "/api/run", json={"algorithm": "linear_search", "array": [4, 2, 9], "target": 9}
    ).get_json()
    assert data["steps"][-1]["tag"] == "found"


@pytest.mark.parametrize(
    "url, payload",
    [
        ("/api/run", {"algorithm": "nope"}),
        ("/api/run", {"algorithm": "bubble_sort", "array": [1, "x"]}),
        ("/api/run", {"algorithm": "binary_search", "array": [3, 1], "target": 1}),
        ("/api/speed", {"speed": "9x"}),
        ("/api/graph/mode", {"mode": "paint"}),
        ("/api/graph/sample", {"name": "nope"}),
        ("/api/graph/canvas", {"x": "left"}),
        ("/api/graph/canvas", {"x": "nan", "y": 1}),
        ("/api/graph/canvas", {"x": 5, "y": "inf"}),
        ("/api/graph/node", {"node_id": "ghost"}),
    ],
)
def test_bad_requests_map_to_400(client, url, payload):
    resp = client.post(url, json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()
    assert client.get("/api/graph").get_json()["locked"] is False


def test_kruskal_on_unweighted_sample_is_rejected(client):
    client.post("/api/graph/sample", json={"name": "traversal"})
    assert client.post("/api/run", json={"algorithm": "kruskal"}).status_code == 400
    data = client.post("/api/run", json={"algorithm": "bfs", "start": "4"}).get_json()
    assert data["steps"][-1]["metrics"]["components"] == 2


def test_run_returns_the_whole_buffered_run(client, sample_model):
    client.post("/api/graph/sample", json={"name": "mst"})
    data = client.post("/api/run", json={"algorithm": "dijkstra", "start": "0"}).get_json()

    expected = [s.to_dict() for s in produce("dijkstra", sample_model.snapshot(), start="0")]
    assert data["total_steps"] == len(expected)
    assert data["steps"] == expected
    assert data["steps"][-1]["snapshot"]["distances"]["4"] == 7


def test_non_finite_canvas_click_adds_nothing(client):
    client.post("/api/graph/canvas", json={"x": "-inf", "y": 3})
    assert client.get("/api/graph").get_json()["graph"]["nodes"] == []

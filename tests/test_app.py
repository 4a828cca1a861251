import pytest

import main


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


def test_index_renders_page(client):
    res = client.get("/")
    assert res.status_code == 200
    body = res.get_data(as_text=True)
    assert "<svg" in body
    assert 'id="btn-visualize"' in body
    assert '<option value="a" selected>a</option>' in body


def test_state_without_run_is_idle(client):
    data = client.get("/api/state").get_json()
    assert data["snapshot"]["run_state"] == "idle"
    assert data["snapshot"]["start"] is None
    assert data["terminal"] is False


def test_step_without_run_is_conflict(client):
    res = client.post("/api/step/next")
    assert res.status_code == 409
    assert "error" in res.get_json()

    assert client.post("/api/run/finish").status_code == 409


def test_full_run_cycle(client):
    res = client.post("/api/run", json={"start": "a", "end": "z"})
    assert res.status_code == 200
    data = res.get_json()
    assert data["snapshot"]["visited_nodes"] == ["a"]
    assert data["snapshot"]["run_state"] == "running"
    assert data["interval_ms"] == main.settings.step_interval_ms
    assert data["terminal"] is False

    for _ in range(10):
        data = client.post("/api/step/next").get_json()
        if data["terminal"]:
            break

    snap = data["snapshot"]
    assert snap["run_state"] == "completed"
    assert snap["final_path"] == ["a", "d", "f", "z"]
    assert snap["distances"]["z"] == 23
    assert snap["step"] == 7
    assert "a → d → f → z" in data["status"]

    # the cookie carries the run, so polling sees the same frame
    assert client.get("/api/state").get_json()["snapshot"] == snap

    data = client.post("/api/reset").get_json()
    snap = data["snapshot"]
    assert snap["run_state"] == "idle"
    assert snap["visited_nodes"] == []
    assert snap["visited_edges"] == []
    assert snap["final_path"] == []
    assert snap["distances"]["a"] == 0
    assert snap["distances"]["z"] is None


def test_finish_runs_to_completion(client):
    client.post("/api/run", json={"start": "z", "end": "a"})
    data = client.post("/api/run/finish").get_json()
    assert data["terminal"] is True
    assert data["snapshot"]["final_path"] == ["z", "f", "d", "a"]
    assert "Path Cost" in data["status"]


def test_run_defaults_to_configured_endpoints(client):
    data = client.post("/api/run", json={}).get_json()
    assert data["snapshot"]["start"] == main.settings.default_start
    assert data["snapshot"]["end"] == main.settings.default_end


def test_reload_mid_run_resumes_stepping(client):
    client.post("/api/run", json={"start": "a", "end": "z"})
    body = client.get("/").get_data(as_text=True)

    assert 'data-run-state="running"' in body
    assert f'data-interval-ms="{main.settings.step_interval_ms}"' in body
    assert "document.body.dataset.runState === 'running'" in body
    assert "setInterval(nextStep, Number(document.body.dataset.intervalMs))" in body


def test_reload_after_finish_offers_reset(client):
    client.post("/api/run", json={"start": "a", "end": "z"})
    client.post("/api/run/finish")
    body = client.get("/").get_data(as_text=True)

    assert 'data-run-state="completed"' in body
    assert 'id="btn-reset" >' in body


def test_fresh_page_is_idle(client):
    body = client.get("/").get_data(as_text=True)
    assert 'data-run-state="idle"' in body


def test_no_run_error_maps_to_conflict(client):
    with client.session_transaction() as sess:
        sess.clear()
    res = client.post("/api/run/finish")
    assert res.status_code == 409
    assert res.get_json()["error"].startswith("No active run")


def test_falsy_endpoint_is_not_replaced_by_default(client):
    res = client.post("/api/run", json={"start": "", "end": "z"})
    assert res.status_code == 400
    assert "''" in res.get_json()["error"]

    res = client.post("/api/run", json={"start": 0, "end": "z"})
    assert res.status_code == 400
    assert "0" in res.get_json()["error"]


def test_null_endpoint_uses_default(client):
    data = client.post("/api/run", json={"start": None, "end": "f"}).get_json()
    assert data["snapshot"]["start"] == main.settings.default_start
    assert data["snapshot"]["end"] == "f"


def test_unknown_node_is_bad_request(client):
    res = client.post("/api/run", json={"start": "a", "end": "q"})
    assert res.status_code == 400
    assert "'q'" in res.get_json()["error"]


def test_console_runner_finds_path(caplog):
    caplog.set_level("INFO", logger="dijkstra_viz")
    assert main.run_console("a", "z", interval=0.02) == 0
    assert "Shortest path: ['a', 'd', 'f', 'z']" in caplog.text


def test_console_runner_rejects_unknown_node():
    assert main.run_console("a", "q", interval=0.02) == 2


def test_console_command_line(monkeypatch):
    monkeypatch.setattr(main, "run_console", lambda start, end, interval: (start, end, interval))
    assert main.main(["console", "--start", "b", "--end", "e", "--interval-ms", "50"]) == ("b", "e", 0.05)

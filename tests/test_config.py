import pytest
from pydantic import ValidationError

from config import Settings, get_settings, reset_settings
from graph import MalformedGraphError
from main import build_graph


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch):
    for var in ("DIJKSTRA_VIZ_DEFAULT_START", "DIJKSTRA_VIZ_DEFAULT_END", "DIJKSTRA_VIZ_STEP_INTERVAL_MS"):
        monkeypatch.delenv(var, raising=False)
    settings = get_settings()
    assert settings.default_start == "a"
    assert settings.default_end == "z"
    assert settings.step_interval_ms == 1000
    assert settings.step_interval == 1.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DIJKSTRA_VIZ_STEP_INTERVAL_MS", "250")
    monkeypatch.setenv("DIJKSTRA_VIZ_DEFAULT_END", "f")
    settings = get_settings()
    assert settings.step_interval == 0.25
    assert settings.default_end == "f"


def test_settings_are_cached():
    assert get_settings() is get_settings()


def test_interval_has_a_floor():
    with pytest.raises(ValidationError):
        Settings(step_interval_ms=5)


def test_build_graph_from_text():
    graph = build_graph(Settings(graph_text="x: y(2) w(5)\ny: w(1)"))
    assert graph.nodes() == frozenset("wxy")
    assert graph.weight("w", "y") == 1


def test_build_graph_defaults_to_sample():
    graph = build_graph(Settings(graph_text=None))
    assert len(graph) == 7


def test_build_graph_rejects_bad_text():
    with pytest.raises(MalformedGraphError):
        build_graph(Settings(graph_text="x: y(-1)"))

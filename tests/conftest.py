import pytest

from graph import WeightedGraph, sample_graph


@pytest.fixture
def sample() -> WeightedGraph:
    return sample_graph()


@pytest.fixture
def split_graph() -> WeightedGraph:
    """Two components: a-b and c-d."""
    return WeightedGraph.from_edges([("a", "b", 1), ("c", "d", 2)])


@pytest.fixture
def tie_graph() -> WeightedGraph:
    """b and c are both 1 away from a."""
    return WeightedGraph.from_edges([("a", "c", 1), ("a", "b", 1), ("b", "d", 5), ("c", "d", 5)])

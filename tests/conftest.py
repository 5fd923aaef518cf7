import pytest

from config import DEFAULT_GRAPH
from graph import Graph


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def sample_graph() -> Graph:
    return Graph.from_dict(DEFAULT_GRAPH)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

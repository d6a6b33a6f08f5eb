import pytest

from blockfall.catalog import RandomSelector
from blockfall.simulation import SimulationContext


class ScriptedRng:
    """Stand-in random source returning pre-selected catalog entries."""

    def __init__(self, *picks) -> None:
        self.picks = list(picks)

    def choice(self, seq):
        return self.picks.pop(0)


@pytest.fixture
def scripted_selector():
    """Return a factory building selectors that hand out ``picks`` in order."""

    def make(*picks) -> RandomSelector:
        return RandomSelector(ScriptedRng(*picks))

    return make


@pytest.fixture
def scripted_ctx(scripted_selector):
    """Return a factory for contexts with one spawn queued and scripted picks."""

    def make(*picks) -> SimulationContext:
        ctx = SimulationContext(selector=scripted_selector(*picks))
        ctx.spawns.push()
        return ctx

    return make

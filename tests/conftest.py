import pytest


class ScriptedKinds:
    """Hands out kinds in a fixed order, then repeats the last one."""
    def __init__(self, *kinds):
        self.kinds = list(kinds)
        self.drawn = 0

    def next_piece(self):
        k = self.kinds[min(self.drawn, len(self.kinds) - 1)]
        self.drawn += 1
        return k


@pytest.fixture
def scripted():
    return ScriptedKinds

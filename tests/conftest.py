import numpy as np
import pytest


class FixedRng:
    """Random source that replays a fixed sequence of integers."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def integers(self, low, high):
        if not self.values:
            raise AssertionError(f"random source exhausted on integers({low}, {high})")
        v = self.values.pop(0)
        assert low <= v < high, f"{v} outside [{low}, {high})"
        self.calls.append((low, high))
        return v

    @property
    def exhausted(self) -> bool:
        return not self.values


@pytest.fixture
def fixed_rng():
    return FixedRng


@pytest.fixture
def rng():
    return np.random.default_rng(0)

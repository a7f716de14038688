"""Pytest configuration and fixtures."""

import pytest


def _write_fixture(directory, content):
    path = directory / "points-verify.txt"
    path.write_text(content, encoding="utf-8", newline="")
    return str(path)


@pytest.fixture
def fixture_file(tmp_path):
    """Fixture file matching the result [1.5, 2.5, 3]."""
    return _write_fixture(tmp_path, "1.5,2.5,3\n")


@pytest.fixture
def make_fixture_file(tmp_path):
    """Factory writing arbitrary fixture content."""

    def _make(content):
        return _write_fixture(tmp_path, content)

    return _make


@pytest.fixture
def matching_unit():
    """Async work unit returning [1.5, 2.5, 3]."""

    async def unit():
        return [1.5, 2.5, 3]

    return unit


@pytest.fixture
def fake_clock():
    """Clock advancing by a scripted list of durations per start/end pair."""

    class FakeClock:
        def __init__(self):
            self.now = 0.0
            self.durations = []
            self._started = False

        def __call__(self):
            if self._started:
                self.now += self.durations.pop(0) if self.durations else 0.5
            self._started = not self._started
            return self.now

    return FakeClock()


@pytest.fixture
def emitted():
    """Collect lines emitted by the benchmark loop."""
    return []

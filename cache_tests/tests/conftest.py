import pytest


class FakeClock:
    """Manually advanced nanosecond clock injected into caches under test."""

    def __init__(self, now: int = 1_000_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1_000_000_000)


@pytest.fixture
def clock():
    return FakeClock()

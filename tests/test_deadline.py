import pytest

from chromepdf.core.deadline import Deadline
from chromepdf.core.errors import ConversionTimeoutError


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_deadline_is_shared_not_reset():
    clock = FakeClock()
    deadline = Deadline(10, clock=clock)

    clock.now += 4
    deadline.check("step one")
    clock.now += 4
    deadline.check("step two")

    assert deadline.remaining() == pytest.approx(2)

    clock.now += 3
    with pytest.raises(ConversionTimeoutError, match="step three"):
        deadline.check("step three")


def test_remaining_never_negative():
    clock = FakeClock()
    deadline = Deadline(1, clock=clock)
    clock.now += 5

    assert deadline.expired
    assert deadline.remaining() == 0
    assert deadline.remaining_ms() == 0

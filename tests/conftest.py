import pytest

from namiska.config import Tuning
from namiska.engine import TickEngine
from namiska.keys import KeyBindings


class ScriptedSampler:
    """Returns one key set per call, then repeats the last one."""

    def __init__(self, *samples):
        self._samples = [frozenset(s) for s in samples]
        self.calls = 0

    def sample(self):
        index = min(self.calls, len(self._samples) - 1)
        self.calls += 1
        return self._samples[index]


class RecordingInjector:
    """Records every injector call as a tuple."""

    def __init__(self):
        self.calls = []

    def move_relative(self, dx, dy):
        self.calls.append(('move_relative', dx, dy))

    def press(self, button):
        self.calls.append(('press', button))

    def release(self, button):
        self.calls.append(('release', button))

    def clear(self):
        self.calls.clear()


class FailingInjector(RecordingInjector):
    """Records calls, then raises like a platform without permission."""

    def move_relative(self, dx, dy):
        super().move_relative(dx, dy)
        raise OSError("move denied")

    def press(self, button):
        super().press(button)
        raise OSError("press denied")

    def release(self, button):
        super().release(button)
        raise OSError("release denied")


@pytest.fixture
def tuning():
    return Tuning(base_distance=5, acceleration_factor=0.05, max_distance=150, sleep_duration=10)


@pytest.fixture
def bindings():
    return KeyBindings()


@pytest.fixture
def injector():
    return RecordingInjector()


@pytest.fixture
def engine(bindings, tuning, injector):
    return TickEngine(bindings, tuning, ScriptedSampler(()), injector, clock=lambda: 0)


@pytest.fixture
def failing_injector():
    return FailingInjector()


@pytest.fixture
def make_engine(bindings, tuning):
    """Build a TickEngine over scripted key samples."""
    def factory(*samples, injector=None, clock=lambda: 0, sleep=lambda seconds: None,
                tuning=tuning, bindings=bindings):
        sampler = ScriptedSampler(*(samples or [()]))
        injector = injector if injector is not None else RecordingInjector()
        return TickEngine(bindings, tuning, sampler, injector, clock=clock, sleep=sleep)
    return factory

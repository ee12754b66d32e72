"""
Per-tick input state.

- DirectionTracker: which directions are held, and since when
- ButtonEdgeTracker: turns a held/not-held level into press/release edges
"""

from enum import Enum, auto
from typing import FrozenSet, Iterable, Optional


class Direction(Enum):
    """Cursor direction; the value is the unit vector in screen coordinates."""
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()


class ButtonEvent(Enum):
    PRESS = auto()
    RELEASE = auto()


class GateState(Enum):
    UNGATED = auto()
    GATED = auto()


class DirectionTracker:
    """
    Tracks the set of held directions and when that set last changed.

    Every active direction shares the same elapsed time, so two held
    directions accelerate together. Adding or dropping a direction restarts
    the clock for all of them.
    """

    def __init__(self, now: int = 0):
        self._active: FrozenSet[Direction] = frozenset()
        self._changed_at = now

    @property
    def active_directions(self) -> FrozenSet[Direction]:
        """Directions currently held."""
        return self._active

    @property
    def changed_at(self) -> int:
        """Timestamp (ms) of the last change to the active set."""
        return self._changed_at

    @property
    def idle(self) -> bool:
        """True if no direction is held."""
        return not self._active

    def observe(self, directions: Iterable[Direction], now: int):
        """
        Record the directions sampled this tick.

        Comparison is by membership only; the clock restarts only when the
        set itself differs from the previous one.
        """
        sampled = frozenset(directions)
        if sampled != self._active:
            self._active = sampled
            self._changed_at = now

    def reset(self):
        """Drop all directions (gating key released)."""
        self._active = frozenset()

    def elapsed_since_change(self, now: int) -> int:
        """Milliseconds since the active set last changed."""
        return now - self._changed_at


class ButtonEdgeTracker:
    """
    Emits PRESS/RELEASE only when the held state of a button key flips.

    Events for one button always alternate: a sustained hold yields a
    single PRESS and nothing more until the key is let go.
    """

    def __init__(self, button: MouseButton):
        self.button = button
        self._pressed = False

    @property
    def pressed(self) -> bool:
        """True between an emitted PRESS and the following RELEASE."""
        return self._pressed

    def update(self, held: bool) -> Optional[ButtonEvent]:
        """Feed the sampled key state; returns the edge, if any."""
        if held and not self._pressed:
            self._pressed = True
            return ButtonEvent.PRESS
        if not held and self._pressed:
            self._pressed = False
            return ButtonEvent.RELEASE
        return None

    def reset(self) -> Optional[ButtonEvent]:
        """Release the button if it is down."""
        if self._pressed:
            self._pressed = False
            return ButtonEvent.RELEASE
        return None

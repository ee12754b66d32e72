"""
Tick loop: samples held keys and turns them into mouse motion and clicks.

States:
- ungated: gating key up; no motion, emulated buttons released
- gated: gating key held; direction keys move, button keys click
"""

import logging
import time
from typing import Callable, FrozenSet, Optional

from .acceleration import distance
from .config import Tuning
from .keys import KeyBindings
from .state import (
    ButtonEdgeTracker,
    ButtonEvent,
    Direction,
    DirectionTracker,
    GateState,
    MouseButton,
)

log = logging.getLogger(__name__)


def monotonic_ms() -> int:
    """Monotonic clock in whole milliseconds."""
    return time.monotonic_ns() // 1_000_000


class TickEngine:
    """
    Owns all input state and drives the injector once per tick.

    The sampler needs a sample() returning the set of held key identifiers;
    the injector needs move_relative(dx, dy), press(button) and
    release(button). Injector failures are logged and never stop the loop.
    """

    def __init__(
        self,
        bindings: KeyBindings,
        tuning: Tuning,
        sampler,
        injector,
        clock: Callable[[], int] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.bindings = bindings
        self.tuning = tuning
        self._sampler = sampler
        self._injector = injector
        self._clock = clock
        self._sleep = sleep

        self._state = GateState.UNGATED
        self._directions = DirectionTracker(now=clock())
        self._buttons = {
            MouseButton.LEFT: ButtonEdgeTracker(MouseButton.LEFT),
            MouseButton.RIGHT: ButtonEdgeTracker(MouseButton.RIGHT),
        }
        self._direction_keys = {
            Direction.LEFT: bindings.left,
            Direction.RIGHT: bindings.right,
            Direction.UP: bindings.up,
            Direction.DOWN: bindings.down,
        }
        self._button_keys = {
            MouseButton.LEFT: bindings.mouse_left,
            MouseButton.RIGHT: bindings.mouse_right,
        }
        self._stop_requested = False

    @property
    def state(self) -> GateState:
        """Current gate state."""
        return self._state

    @property
    def directions(self) -> DirectionTracker:
        return self._directions

    def button(self, button: MouseButton) -> ButtonEdgeTracker:
        return self._buttons[button]

    def _set_state(self, new_state: GateState):
        if new_state != self._state:
            log.debug(f"Gate: {self._state.name} -> {new_state.name}")
            self._state = new_state

    def _inject(self, action: str, *args):
        """Call the injector, logging instead of raising on failure."""
        try:
            getattr(self._injector, action)(*args)
        except Exception as e:
            log.error(f"Injector {action}{args} failed: {e}")

    def _emit(self, button: MouseButton, event: Optional[ButtonEvent]):
        if event is ButtonEvent.PRESS:
            self._inject('press', button)
        elif event is ButtonEvent.RELEASE:
            self._inject('release', button)

    def release_all(self):
        """Release emulated buttons and stop all motion."""
        self._directions.reset()
        for button, tracker in self._buttons.items():
            self._emit(button, tracker.reset())

    def tick(self, keys: FrozenSet[str], now: int):
        """Process one keyboard sample taken at now (ms)."""
        if self.bindings.meta not in keys:
            self._set_state(GateState.UNGATED)
            self.release_all()
            return

        self._set_state(GateState.GATED)

        for button, tracker in self._buttons.items():
            self._emit(button, tracker.update(self._button_keys[button] in keys))

        held = [d for d, key in self._direction_keys.items() if key in keys]
        self._directions.observe(held, now)
        if self._directions.idle:
            return

        step = distance(self._directions.elapsed_since_change(now), self.tuning)
        active = self._directions.active_directions
        # Fixed order keeps the call sequence stable; opposite keys both move
        for direction in Direction:
            if direction in active:
                self._inject('move_relative', direction.dx * step, direction.dy * step)

    def run(self):
        """Sample, act and sleep until stop() is called."""
        interval = max(self.tuning.sleep_duration, 0) / 1000.0
        log.info(f"Tick loop running every {self.tuning.sleep_duration}ms")
        try:
            while not self._stop_requested:
                self.tick(self._sampler.sample(), self._clock())
                self._sleep(interval)
        finally:
            self.release_all()
            log.info("Tick loop stopped")

    def stop(self):
        """Ask the loop to exit after the current tick, or never start it."""
        self._stop_requested = True

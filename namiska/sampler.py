"""
Keyboard state sampling.

Uses a pynput listener to keep the set of currently held keys, which the
tick loop reads once per tick.
"""

import logging
import threading
from typing import FrozenSet, Optional, Set

from pynput import keyboard

from .keys import key_to_string

log = logging.getLogger(__name__)


class KeySampler:
    """
    Tracks held keys from keyboard events.

    Events are observed, never suppressed: the gating and button keys keep
    reaching other applications.
    """

    def __init__(self):
        self._held: Set[str] = set()
        self._lock = threading.Lock()
        self._listener: Optional[keyboard.Listener] = None

    def _on_key_press(self, key):
        """Handle key press events. Runs in the listener thread."""
        try:
            key_str = key_to_string(key)
            if key_str:
                with self._lock:
                    self._held.add(key_str)
        except Exception as e:
            log.error(f"Error in key press handler: {e}")

    def _on_key_release(self, key):
        """Handle key release events."""
        try:
            key_str = key_to_string(key)
            if key_str:
                with self._lock:
                    self._held.discard(key_str)
        except Exception as e:
            log.error(f"Error in key release handler: {e}")

    def sample(self) -> FrozenSet[str]:
        """Snapshot of the keys held right now."""
        with self._lock:
            return frozenset(self._held)

    def start(self):
        """Start the keyboard listener."""
        self._listener = keyboard.Listener(
            on_press=self._on_key_press,
            on_release=self._on_key_release,
        )
        self._listener.start()
        log.info("Keyboard listener started")

    def stop(self):
        """Stop the keyboard listener."""
        if self._listener:
            self._listener.stop()
            self._listener = None
        with self._lock:
            self._held.clear()
        log.info("Keyboard listener stopped")

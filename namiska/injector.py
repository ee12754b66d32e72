"""
Mouse event injection through pynput.
"""

import logging

from pynput import mouse
from pynput.mouse import Button

from .state import MouseButton

log = logging.getLogger(__name__)

# Mapping MouseButton to pynput mouse buttons
BUTTON_MAP = {
    MouseButton.LEFT: Button.left,
    MouseButton.RIGHT: Button.right,
}


class MouseInjector:
    """
    Moves the cursor and presses buttons.

    Errors from the platform are raised to the caller, which decides
    whether to carry on.
    """

    def __init__(self):
        self._controller = mouse.Controller()

    def move_relative(self, dx: int, dy: int):
        self._controller.move(dx, dy)

    def press(self, button: MouseButton):
        log.info(f"Mouse press: {button.name}")
        self._controller.press(BUTTON_MAP[button])

    def release(self, button: MouseButton):
        log.info(f"Mouse release: {button.name}")
        self._controller.release(BUTTON_MAP[button])

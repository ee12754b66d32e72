"""
Namiska - Keyboard-driven mouse emulation

Holding a gating key turns the arrow keys into accelerating cursor motion
and two more keys into the left and right mouse buttons.
"""

__version__ = "0.1.0"

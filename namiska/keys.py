"""
Key names and bindings.

Keys are identified by lower-case strings: the pynput Key name for special
keys ('cmd', 'ctrl_r', 'up', ...) or the character for printable keys.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .config import KeyConfig

# Config aliases -> key identifier
KEY_ALIASES: Dict[str, str] = {
    'META': 'cmd',
    'SUPER': 'cmd',
    'WIN': 'cmd',
    'CTRL': 'ctrl',
    'CONTROL': 'ctrl',
    'LCTRL': 'ctrl',
    'RCTRL': 'ctrl_r',
    'RCONTROL': 'ctrl_r',
    'ALT': 'alt',
    'LALT': 'alt',
    'RALT': 'alt_r',
    'SHIFT': 'shift',
    'LSHIFT': 'shift',
    'RSHIFT': 'shift_r',
    'UP': 'up',
    'DOWN': 'down',
    'LEFT': 'left',
    'RIGHT': 'right',
}

# Platform-specific variants reported by pynput -> key identifier
KEY_NORMALIZATION: Dict[str, str] = {
    'cmd_l': 'cmd',
    'ctrl_l': 'ctrl',
    'alt_l': 'alt',
    'alt_gr': 'alt_r',
    'shift_l': 'shift',
}


def normalize_key(name: str) -> str:
    """Fold left/right variants that pynput reports differently per platform."""
    return KEY_NORMALIZATION.get(name, name)


def key_to_string(key) -> Optional[str]:
    """
    Convert a pynput key to its string representation.

    KeyCode objects carry a char (None for numpad, media and similar keys,
    which are not bindable); Key members carry a name.
    """
    if hasattr(key, 'char'):
        return key.char.lower() if key.char else None
    name = getattr(key, 'name', None)
    if isinstance(name, str):
        return normalize_key(name)
    return None


def resolve_key(name: Optional[str], default: str) -> str:
    """Resolve a configured key name, falling back to default if unknown."""
    if not isinstance(name, str):
        return default
    return KEY_ALIASES.get(name.strip().upper(), default)


@dataclass(frozen=True)
class KeyBindings:
    """Resolved keys for every role."""
    meta: str = 'cmd'
    left: str = 'left'
    right: str = 'right'
    up: str = 'up'
    down: str = 'down'
    mouse_left: str = 'ctrl_r'
    mouse_right: str = 'shift_r'

    @classmethod
    def from_config(cls, keys: KeyConfig) -> 'KeyBindings':
        defaults = cls()
        return cls(
            meta=resolve_key(keys.meta, defaults.meta),
            left=resolve_key(keys.left, defaults.left),
            right=resolve_key(keys.right, defaults.right),
            up=resolve_key(keys.up, defaults.up),
            down=resolve_key(keys.down, defaults.down),
            mouse_left=resolve_key(keys.mouse_left, defaults.mouse_left),
            mouse_right=resolve_key(keys.mouse_right, defaults.mouse_right),
        )

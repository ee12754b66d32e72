"""
Configuration loading and management.
"""

import logging
import math
import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Any, Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tuning:
    """Cursor motion tuning."""
    base_distance: int = 5            # Pixels per tick with no hold time
    acceleration_factor: float = 0.05  # Extra pixels per tick per ms held
    max_distance: int = 150           # Cap on pixels per tick
    sleep_duration: int = 10          # Tick period in ms


@dataclass
class KeyConfig:
    """Raw key names from the config file; resolved later."""
    meta: Optional[str] = None
    left: Optional[str] = None
    right: Optional[str] = None
    up: Optional[str] = None
    down: Optional[str] = None
    mouse_left: Optional[str] = None
    mouse_right: Optional[str] = None


@dataclass
class Config:
    """Main application configuration."""
    tuning: Tuning = field(default_factory=Tuning)
    keys: KeyConfig = field(default_factory=KeyConfig)


def get_config_path() -> Path:
    """Get the configuration file path."""
    if os.name == 'nt':  # Windows
        base = Path(os.environ.get('APPDATA', '~'))
    elif os.name == 'posix':
        if 'darwin' in os.uname().sysname.lower():  # macOS
            base = Path.home() / 'Library' / 'Application Support'
        else:  # Linux
            base = Path(os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config'))
    else:
        base = Path.home()

    return base / 'namiska' / 'config.yaml'


def _int_field(data: dict, name: str, default: int) -> int:
    value = data.get(name, default)
    # bool is an int subclass; 'true' is not a distance
    if isinstance(value, bool) or not isinstance(value, int):
        log.debug(f"Ignoring invalid {name}: {value!r}")
        return default
    return value


def _float_field(data: dict, name: str, default: float) -> float:
    value = data.get(name, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        log.debug(f"Ignoring invalid {name}: {value!r}")
        return default
    try:
        value = float(value)
    except OverflowError:  # int too large for a float
        value = math.inf
    # .inf and .nan are valid YAML floats but not usable factors
    if not math.isfinite(value):
        log.debug(f"Ignoring invalid {name}: {value!r}")
        return default
    return value


def _str_field(data: dict, name: str) -> Optional[str]:
    value = data.get(name)
    return value if isinstance(value, str) else None


def parse_config(data: Any) -> Config:
    """Build a Config from parsed YAML, substituting defaults for bad fields."""
    if not isinstance(data, dict):
        return Config()

    defaults = Tuning()
    tuning = Tuning(
        base_distance=_int_field(data, 'base_distance', defaults.base_distance),
        acceleration_factor=_float_field(data, 'acceleration_factor', defaults.acceleration_factor),
        max_distance=_int_field(data, 'max_distance', defaults.max_distance),
        sleep_duration=_int_field(data, 'sleep_duration', defaults.sleep_duration),
    )

    keys_data = data.get('keys')
    if not isinstance(keys_data, dict):
        keys_data = {}
    keys = KeyConfig(
        meta=_str_field(keys_data, 'meta'),
        left=_str_field(keys_data, 'left'),
        right=_str_field(keys_data, 'right'),
        up=_str_field(keys_data, 'up'),
        down=_str_field(keys_data, 'down'),
        mouse_left=_str_field(keys_data, 'mouse_left'),
        mouse_right=_str_field(keys_data, 'mouse_right'),
    )

    return Config(tuning=tuning, keys=keys)


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Never fails: a missing, unreadable or malformed file yields defaults.
    """
    if path is None:
        path = get_config_path()

    if not path.exists():
        return create_default_config(path)

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        log.debug(f"Could not read {path}, using defaults: {e}")
        return Config()

    return parse_config(data)


DEFAULT_CONFIG_YAML = """# Namiska Configuration

# Pixels moved per tick when a direction is first pressed
base_distance: 5

# Extra pixels per tick for every millisecond the directions stay unchanged
acceleration_factor: 0.05

# Upper limit on pixels per tick
max_distance: 150

# Milliseconds between keyboard samples
sleep_duration: 10

# Key names (case-insensitive): META/SUPER/WIN, CTRL/CONTROL/LCTRL,
# RCTRL/RCONTROL, ALT/LALT, RALT, SHIFT/LSHIFT, RSHIFT, UP, DOWN, LEFT, RIGHT
keys:
  meta: SUPER        # Hold to enable mouse keys
  left: LEFT
  right: RIGHT
  up: UP
  down: DOWN
  mouse_left: RCTRL  # Left mouse button
  mouse_right: RSHIFT  # Right mouse button
"""


def create_default_config(path: Path) -> Config:
    """Write a commented default configuration and return the defaults."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w') as f:
            f.write(DEFAULT_CONFIG_YAML)
    except OSError as e:
        log.debug(f"Could not write default config to {path}: {e}")

    return Config()

"""
Namiska - Main entry point.
"""

import sys
import logging
import signal
from typing import Optional

from .config import load_config, get_config_path, Config
from .engine import TickEngine
from .injector import MouseInjector
from .keys import KeyBindings
from .sampler import KeySampler

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s',
    datefmt='%H:%M:%S'
)
log = logging.getLogger(__name__)


class Namiska:
    """Main application controller."""

    def __init__(self):
        self.config: Optional[Config] = None
        self.sampler: Optional[KeySampler] = None
        self.engine: Optional[TickEngine] = None
        self._stop_requested = False

    def load_config(self):
        """Load configuration and build the tick engine."""
        log.info("Loading configuration...")
        self.config = load_config()
        bindings = KeyBindings.from_config(self.config.keys)
        tuning = self.config.tuning

        log.info(f"Key bindings: {bindings}")
        log.info(f"Tuning: base={tuning.base_distance}px, accel={tuning.acceleration_factor}px/ms, "
                 f"max={tuning.max_distance}px, tick={tuning.sleep_duration}ms")

        self.sampler = KeySampler()
        self.engine = TickEngine(bindings, tuning, self.sampler, MouseInjector())
        if self._stop_requested:
            self.engine.stop()

    def start(self):
        """Start sampling and run the tick loop until stopped."""
        log.info("Namiska starting...")
        log.info(f"Config file: {get_config_path()}")

        self.load_config()
        self.sampler.start()
        try:
            self.engine.run()
        finally:
            self.sampler.stop()

    def stop(self):
        """Stop the tick loop; held buttons are released on the way out."""
        log.info("Stopping Namiska...")
        self._stop_requested = True
        if self.engine:
            self.engine.stop()


def main():
    """Main entry point."""
    app = Namiska()

    def signal_handler(signum, frame):
        log.info(f"Received signal {signum}, shutting down...")
        app.stop()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.start()
    except KeyboardInterrupt:
        app.stop()
    except Exception as e:
        log.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()

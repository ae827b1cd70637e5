import enum
import logging
import signal
import threading
import time

from sleeper.errors import SignalSetupError, TerminalError

TICK_SECONDS = 1.0

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    FINISHED = "finished"
    TERMINATED = "terminated"


class CancelFlag:
    """Flag raised by SIGINT/SIGTERM and polled by the countdown loop."""

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self):
        self._event = threading.Event()
        self._previous = {}

    def install(self):
        """Route the interrupt signals to this flag."""
        try:
            for signum in self.SIGNALS:
                self._previous[signum] = signal.signal(signum, self._handle)
        except (ValueError, OSError) as e:
            self.restore()
            raise SignalSetupError(f"Cannot register interrupt handler: {e}") from e
        logger.debug(f"Installed cancel handler for {[s.name for s in self.SIGNALS]}")

    def restore(self):
        """Put back whatever handlers were active before install()."""
        while self._previous:
            signum, handler = self._previous.popitem()
            signal.signal(signum, handler)

    def _handle(self, signum, frame):
        # signal context: only flip the flag
        self._event.set()

    def set(self):
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()


class Countdown:
    """Blocks for ``total_seconds`` while rendering the remaining time.

    Each tick checks cancellation first, then completion, then renders and
    sleeps. Elapsed time is always taken from the clock against the start
    timestamp, so slow renders do not make the countdown drift.
    """

    def __init__(self, total_seconds, cancel_flag, renderer, clock=None, sleep=None,
                 tick=TICK_SECONDS):
        self.total_seconds = total_seconds
        self.cancel_flag = cancel_flag
        self.renderer = renderer
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep
        self._tick = tick

    def run(self) -> Outcome:
        logger.info(f"Countdown started for {self.total_seconds} seconds")
        start = self._clock()
        self.renderer.begin()
        try:
            outcome = self._loop(start)
        except BaseException:
            # the original failure wins over a cleanup failure
            try:
                self.renderer.end()
            except TerminalError as e:
                logger.warning(f"Could not restore the terminal: {e}")
            raise
        self.renderer.end()
        logger.info(f"Countdown ended: {outcome.value}")
        return outcome

    def _loop(self, start) -> Outcome:
        while True:
            if self.cancel_flag.is_set():
                return Outcome.TERMINATED

            elapsed = self._clock() - start
            if elapsed >= self.total_seconds:
                return Outcome.FINISHED

            self.renderer.update(int(self.total_seconds - elapsed))
            self._sleep(self._tick)

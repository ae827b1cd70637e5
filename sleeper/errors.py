class SleeperError(Exception):
    """Base class for every failure the sleep timer reports."""


class DurationError(SleeperError):
    """Requested delay cannot be represented."""


class TerminalError(SleeperError):
    """Writing the countdown to the terminal failed."""


class SignalSetupError(SleeperError):
    """Interrupt handlers could not be installed."""


class SuspendError(SleeperError):
    """The suspend command could not be launched or reported failure."""


class UnsupportedPlatformError(SuspendError):
    """No suspend command is known for this platform."""

import logging
import platform
import subprocess
from typing import List

from sleeper.errors import SuspendError, UnsupportedPlatformError

logger = logging.getLogger(__name__)


class Suspender:
    """Puts the host to sleep by running the platform's suspend command."""

    name = "generic"

    def command(self) -> List[str]:
        raise NotImplementedError

    def suspend(self):
        command = self.command()
        logger.info(f"Executing suspend command: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except OSError as e:
            raise SuspendError(f"failed to execute sleep command '{command[0]}': {e}") from e

        if result.returncode != 0:
            raise SuspendError(
                f"sleep command '{' '.join(command)}' exited with status "
                f"{result.returncode}: {result.stderr.strip()}"
            )
        logger.debug(f"Suspend command output: {result.stdout}")


class WindowsSuspender(Suspender):
    name = "Windows"

    def command(self):
        # SetSuspendState(Hibernate=0, ForceCritical=1, DisableWakeEvent=0)
        return ["rundll32.exe", "powrprof.dll,SetSuspendState", "0,1,0"]


class LinuxSuspender(Suspender):
    name = "Linux"

    def command(self):
        return ["systemctl", "suspend"]


class MacSuspender(Suspender):
    name = "Darwin"

    def command(self):
        return ["pmset", "sleepnow"]


class UnsupportedSuspender(Suspender):
    def __init__(self, system: str):
        self.name = system or "unknown"

    def command(self):
        raise UnsupportedPlatformError(f"Suspend is not supported on platform '{self.name}'")


SUSPENDERS = {cls.name: cls for cls in (WindowsSuspender, LinuxSuspender, MacSuspender)}


def get_suspender(system=None) -> Suspender:
    """Pick the suspend strategy for ``system`` (defaults to this host)."""
    system = system if system is not None else platform.system()
    suspender_cls = SUSPENDERS.get(system)
    if suspender_cls is None:
        logger.warning(f"No suspend command known for platform '{system}'")
        return UnsupportedSuspender(system)
    return suspender_cls()

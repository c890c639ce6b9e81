import logging
import shutil
import signal
import time
from typing import Callable, Optional

from ..config_loader import ConfigLoader
from ...utils.status import Status
from .constants import NOT_FOUND_MESSAGE
from .exceptions import DriverNotFoundError
from .launcher import LaunchHandle, ProcessLauncher, ThreadedProcessLauncher
from .models import SupervisorSettings
from .probe import PortProbe, SocketPortProbe
from .processes import ProcessInspector, PsProcessInspector, ancestor_pids, find_process

logger = logging.getLogger(__name__)


class ChromeDriverSupervisor:
    """
    Idempotent lifecycle control for a local chromedriver.

    `start` launches the driver unless its port already accepts connections,
    `stop` finds it in the process table and sends SIGKILL, and `is_running`
    is a point-in-time TCP probe. The OS (process table and listening port)
    is the only state; nothing is cached between calls.
    """

    def __init__(
        self,
        settings: Optional[SupervisorSettings] = None,
        config_loader: Optional[ConfigLoader] = None,
        *,
        status: Optional[Status] = None,
        probe: Optional[PortProbe] = None,
        inspector: Optional[ProcessInspector] = None,
        launcher: Optional[ProcessLauncher] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings if settings else SupervisorSettings.from_config(config_loader)
        self.status = status if status else Status()
        self.probe = probe if probe else SocketPortProbe()
        self.inspector = inspector if inspector else PsProcessInspector()
        self.launcher = launcher if launcher else ThreadedProcessLauncher()
        self.which = which
        self.sleep = sleep
        self.launch_handle: Optional[LaunchHandle] = None

    def is_running(self) -> bool:
        return self.probe.probe(self.settings.host, self.settings.port)

    def start(self) -> None:
        if self.is_running():
            self.status.info("ChromeDriver is already running.")
            return

        self.status.ok("Starting ChromeDriver...")
        self._start_process()

    def stop(self) -> None:
        entry = find_process(
            self.inspector.process_table(),
            self.settings.process_name,
            exclude_pids=ancestor_pids(self.inspector),
        )
        if entry is None:
            self.status.error(f"{self.settings.process_name} not found")
            return

        self.status.ok("Stopping ChromeDriver...")
        logger.debug(f"Sending SIGKILL to PID {entry.pid} ({entry.command})")
        self.inspector.signal(entry.pid, signal.SIGKILL)

    def _start_process(self) -> None:
        executable = self.which(self.settings.executable)
        if not executable:
            raise DriverNotFoundError(NOT_FOUND_MESSAGE)

        logger.info(f"Using local chromedriver at: {executable}")
        self.launch_handle = self.launcher.launch(executable, self.settings.args)

        # No readiness check after this; the delay stands in for one.
        self.sleep(self.settings.settle_delay_seconds)

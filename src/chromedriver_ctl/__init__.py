"""
chromedriver_ctl: start, stop and check a local chromedriver process.

Public API:
- ChromeDriverSupervisor: lifecycle controller (start / stop / is_running).
- SupervisorSettings: host, port, executable and launch arguments.
- ConfigLoader: JSON settings loader backing both of the above.
"""

from .core.config_loader import ConfigLoader
from .core.driver_supervisor import ChromeDriverSupervisor, DriverNotFoundError, ProcessTableError
from .core.driver_supervisor.models import SupervisorSettings

__version__ = "0.1.0"

__all__ = [
    "ChromeDriverSupervisor",
    "ConfigLoader",
    "DriverNotFoundError",
    "ProcessTableError",
    "SupervisorSettings",
]

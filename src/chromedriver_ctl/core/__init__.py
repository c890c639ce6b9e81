# This file makes chromedriver_ctl.core a package and exposes key classes.

from .config_loader import ConfigLoader
from .driver_supervisor import ChromeDriverSupervisor

__all__ = [
    "ConfigLoader",
    "ChromeDriverSupervisor",
]

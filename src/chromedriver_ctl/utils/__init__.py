# This file makes chromedriver_ctl.utils a package and exposes key utilities.

from .logger import setup_logger
from .status import Status

__all__ = [
    "setup_logger",
    "Status",
]

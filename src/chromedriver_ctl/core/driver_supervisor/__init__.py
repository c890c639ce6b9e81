"""
Driver supervisor package.

Public API:
- ChromeDriverSupervisor: start, stop and liveness check for a local chromedriver.
- DriverNotFoundError / ProcessTableError: the failures callers may see.
"""

from .exceptions import DriverNotFoundError, ProcessTableError
from .service import ChromeDriverSupervisor

__all__ = ["ChromeDriverSupervisor", "DriverNotFoundError", "ProcessTableError"]

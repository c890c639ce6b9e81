from selenium.common.exceptions import WebDriverException


class DriverNotFoundError(WebDriverException):
    """The chromedriver executable could not be resolved on PATH."""


class ProcessTableError(ValueError):
    """A process table row did not start with an integer PID."""

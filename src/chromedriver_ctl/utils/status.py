import logging
from typing import Optional

OK = 25
logging.addLevelName(OK, "OK")

STATUS_LOGGER_NAME = "chromedriver_ctl.status"


class Status:
    """
    Human-readable status reporting with three severities: info, ok and error.

    Messages go through a named logger, so they end up wherever `setup_logger`
    routed output. `ok` uses the custom OK level, between INFO and WARNING.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger if logger else logging.getLogger(STATUS_LOGGER_NAME)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def ok(self, message: str) -> None:
        self.logger.log(OK, message)

    def error(self, message: str) -> None:
        self.logger.error(message)

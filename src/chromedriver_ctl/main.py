import argparse
import logging
from typing import List, Optional

from .core.config_loader import ConfigLoader, DEFAULT_SETTINGS_FILE
from .core.driver_supervisor import ChromeDriverSupervisor, DriverNotFoundError
from .core.driver_supervisor.models import SupervisorSettings
from .utils.logger import setup_logger
from .utils.status import Status

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromedriver-ctl",
        description="Start, stop or check a local chromedriver.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the settings JSON file (default: ./{DEFAULT_SETTINGS_FILE} if present).",
    )
    parser.add_argument("command", choices=["start", "stop", "status"])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config_loader = ConfigLoader(args.config)
    setup_logger(config_loader)

    settings = SupervisorSettings.from_config(config_loader)
    status = Status()
    supervisor = ChromeDriverSupervisor(settings, status=status)

    if args.command == "start":
        try:
            supervisor.start()
        except DriverNotFoundError as e:
            status.error(e.msg)
            return 1
        return 0

    if args.command == "stop":
        supervisor.stop()
        return 0

    if supervisor.is_running():
        status.ok(f"ChromeDriver is running on {settings.host}:{settings.port}.")
        return 0
    status.info(f"ChromeDriver is not running on {settings.host}:{settings.port}.")
    return 1

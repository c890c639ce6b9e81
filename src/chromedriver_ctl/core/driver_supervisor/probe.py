import logging
from typing import Protocol

from selenium.webdriver.common.utils import is_connectable

logger = logging.getLogger(__name__)


class PortProbe(Protocol):
    def probe(self, host: str, port: int) -> bool: ...


class SocketPortProbe:
    """Liveness by TCP connect: no payload, the connection is closed right away."""

    def probe(self, host: str, port: int) -> bool:
        reachable = is_connectable(port, host)
        logger.debug(f"Probe {host}:{port} -> {'reachable' if reachable else 'unreachable'}")
        return reachable

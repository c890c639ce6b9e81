import socket
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from chromedriver_ctl.core.driver_supervisor.launcher import LaunchHandle


class RecordingStatus:
    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def ok(self, message: str) -> None:
        self.messages.append(("ok", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))


class FakeProbe:
    def __init__(self, reachable: bool):
        self.reachable = reachable
        self.calls: List[Tuple[str, int]] = []

    def probe(self, host: str, port: int) -> bool:
        self.calls.append((host, port))
        return self.reachable


class FakeInspector:
    def __init__(self, listing: str, parents: Optional[Dict[int, int]] = None):
        self.listing = listing
        self.parents = parents or {}
        self.signals: List[Tuple[int, int]] = []

    def process_table(self) -> str:
        return self.listing

    def signal(self, pid: int, signum: int) -> None:
        self.signals.append((pid, signum))

    def parent_pid(self, pid: int) -> Optional[int]:
        return self.parents.get(pid)


class FakeLauncher:
    def __init__(self):
        self.calls: List[Tuple[str, List[str]]] = []

    def launch(self, executable: str, args: Sequence[str]) -> LaunchHandle:
        self.calls.append((executable, list(args)))
        return LaunchHandle([executable, *args])


class FakeSleeper:
    def __init__(self):
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def status() -> RecordingStatus:
    return RecordingStatus()


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture
def listener():
    """A TCP listener on a free loopback port; yields (socket, port)."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(5)
    try:
        yield sock, sock.getsockname()[1]
    finally:
        sock.close()


@pytest.fixture
def make_probe():
    return FakeProbe


@pytest.fixture
def make_inspector():
    return FakeInspector

import logging
import os
import subprocess
from typing import Iterable, Optional, Protocol, Set

from .constants import PARENT_PID_COMMAND, PROCESS_TABLE_COMMAND
from .exceptions import ProcessTableError
from .models import ProcessEntry

logger = logging.getLogger(__name__)


class ProcessInspector(Protocol):
    def process_table(self) -> str: ...

    def signal(self, pid: int, signum: int) -> None: ...

    def parent_pid(self, pid: int) -> Optional[int]: ...


class PsProcessInspector:
    """Reads the OS process table with `ps` and signals processes with `os.kill`."""

    def process_table(self) -> str:
        result = subprocess.run(PROCESS_TABLE_COMMAND, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            logger.debug(f"`{' '.join(PROCESS_TABLE_COMMAND)}` exited with {result.returncode}: {result.stderr.strip()}")
        return result.stdout

    def signal(self, pid: int, signum: int) -> None:
        # Fire and forget: the outcome of the kill is not inspected.
        try:
            os.kill(pid, signum)
        except OSError as e:
            logger.debug(f"Signal {signum} to PID {pid} failed: {e}")

    def parent_pid(self, pid: int) -> Optional[int]:
        if pid == os.getpid():
            return os.getppid()
        result = subprocess.run(PARENT_PID_COMMAND + [str(pid)], capture_output=True, text=True, check=False)
        try:
            return int(result.stdout.strip())
        except ValueError:
            return None


def parse_process_line(line: str) -> ProcessEntry:
    """Parse one `ps` row into a ProcessEntry.

    Raises ProcessTableError when the leading token is not an integer PID.
    """
    fields = line.strip().split(None, 1)
    if not fields:
        raise ProcessTableError("Empty process table row")
    try:
        pid = int(fields[0])
    except ValueError:
        raise ProcessTableError(f"Invalid PID {fields[0]!r} in process table row: {line!r}") from None
    if pid <= 0:
        raise ProcessTableError(f"Invalid PID {pid} in process table row: {line!r}")
    return ProcessEntry(pid=pid, command=fields[1] if len(fields) > 1 else "")


def find_process(listing: str, needle: str, exclude_pids: Iterable[int] = ()) -> Optional[ProcessEntry]:
    """
    Return the first process table row (header skipped) whose text contains
    `needle`, or None. Only the matching row is parsed.
    """
    excluded = set(exclude_pids)
    for line in listing.split("\n")[1:]:
        if needle not in line:
            continue
        entry = parse_process_line(line)
        if entry.pid in excluded:
            continue
        return entry
    return None


def ancestor_pids(inspector: ProcessInspector, pid: Optional[int] = None) -> Set[int]:
    """
    `pid` (this process by default) plus every parent up to and including init. Wrappers
    like `sh -c`, `sudo` or `timeout` repeat our command line.
    """
    current = os.getpid() if pid is None else pid
    chain: Set[int] = set()
    while current and current > 0 and current not in chain:
        chain.add(current)
        current = inspector.parent_pid(current)
    return chain

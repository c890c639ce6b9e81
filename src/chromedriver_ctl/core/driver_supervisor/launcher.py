import logging
import subprocess
import sys
import threading
from typing import List, Optional, Protocol, Sequence, TextIO

logger = logging.getLogger(__name__)


class LaunchHandle:
    """Owned handle for a child launched in the background. Nobody has to join it."""

    def __init__(self, command: Sequence[str]):
        self.command: List[str] = list(command)
        self.thread: Optional[threading.Thread] = None
        self.process: Optional[subprocess.Popen] = None

    @property
    def pid(self) -> Optional[int]:
        return self.process.pid if self.process else None

    def join(self, timeout: Optional[float] = None) -> None:
        if self.thread:
            self.thread.join(timeout)


class ProcessLauncher(Protocol):
    def launch(self, executable: str, args: Sequence[str]) -> LaunchHandle: ...


class ThreadedProcessLauncher:
    """
    Runs the child on a daemon thread and forwards its merged stdout/stderr,
    line by line, to `output` (the controlling process's stdout by default).
    The child's exit status is logged at debug level and otherwise ignored.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self.output = output

    def launch(self, executable: str, args: Sequence[str]) -> LaunchHandle:
        handle = LaunchHandle([executable, *args])
        handle.thread = threading.Thread(
            target=self._run, args=(handle,), name=f"launch-{executable}", daemon=True
        )
        handle.thread.start()
        return handle

    def _run(self, handle: LaunchHandle) -> None:
        try:
            process = subprocess.Popen(
                handle.command,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.error(f"Failed to launch {handle.command[0]}: {e}")
            return
        handle.process = process
        logger.debug(f"Launched {handle.command[0]} with PID {process.pid}")
        self._forward(process)
        returncode = process.wait()
        logger.debug(f"{handle.command[0]} (PID {process.pid}) exited with {returncode}")

    def _forward(self, process: subprocess.Popen) -> None:
        stream = self.output if self.output is not None else sys.stdout
        pipe = process.stdout
        if pipe is None:
            return
        try:
            for line_bytes in iter(pipe.readline, b""):
                stream.write(line_bytes.decode("utf-8", errors="replace").rstrip("\r\n") + "\n")
                stream.flush()
        finally:
            pipe.close()

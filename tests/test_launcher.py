"""Tests for the background launcher that forwards child output."""

import io
import sys

from chromedriver_ctl.core.driver_supervisor.launcher import LaunchHandle, ThreadedProcessLauncher


def test_launcher_forwards_stdout_and_stderr_lines():
    output = io.StringIO()
    launcher = ThreadedProcessLauncher(output=output)

    handle = launcher.launch(
        sys.executable,
        ["-c", "import sys; print('first'); print('second'); print('problem', file=sys.stderr)"],
    )
    handle.join(timeout=30)

    assert not handle.thread.is_alive()
    assert handle.thread.daemon is True
    lines = output.getvalue().splitlines()
    assert sorted(lines) == ["first", "problem", "second"]
    assert lines.index("first") < lines.index("second")
    assert handle.pid is not None
    assert handle.process.returncode == 0


def test_launcher_passes_arguments_verbatim():
    output = io.StringIO()
    launcher = ThreadedProcessLauncher(output=output)
    args = ["-c", "import sys; print(sys.argv[1:])", "--whitelisted-ips", "", "--allowed-origins", "*"]

    handle = launcher.launch(sys.executable, args)
    handle.join(timeout=30)

    assert handle.command == [sys.executable, *args]
    assert output.getvalue().strip() == "['--whitelisted-ips', '', '--allowed-origins', '*']"


def test_launcher_ignores_exit_status():
    output = io.StringIO()
    handle = ThreadedProcessLauncher(output=output).launch(sys.executable, ["-c", "raise SystemExit(3)"])
    handle.join(timeout=30)

    assert handle.process.returncode == 3
    assert output.getvalue() == ""


def test_launcher_with_missing_executable_spawns_nothing(tmp_path):
    output = io.StringIO()
    handle = ThreadedProcessLauncher(output=output).launch(str(tmp_path / "no-such-binary"), [])
    handle.join(timeout=30)

    assert handle.process is None
    assert handle.pid is None
    assert output.getvalue() == ""


def test_unjoined_handle_join_is_noop():
    handle = LaunchHandle(["chromedriver"])
    handle.join(timeout=0)
    assert handle.pid is None

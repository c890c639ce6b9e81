from typing import List

DEFAULT_DRIVER_HOST = "localhost"
DEFAULT_DRIVER_PORT = 9515
DEFAULT_DRIVER_EXECUTABLE = "chromedriver"

# Accept connections from any origin/IP so remote Selenium clients can attach
DEFAULT_DRIVER_ARGS: List[str] = ["--whitelisted-ips", "", "--allowed-origins", "*"]

DEFAULT_SETTLE_DELAY_SECONDS = 2.0

# Equivalent of `ps -e -o pid,command`: header line, then "<pid> <command...>"
PROCESS_TABLE_COMMAND: List[str] = ["ps", "-e", "-o", "pid,command"]

NOT_FOUND_MESSAGE = (
    "ChromeDriver executable not found. Please ensure ChromeDriver is installed and in your PATH."
)

# Equivalent of `ps -o ppid= -p <pid>`: the bare parent PID, no header
PARENT_PID_COMMAND: List[str] = ["ps", "-o", "ppid=", "-p"]

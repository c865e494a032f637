"""kill-port: free a local TCP port by killing whatever listens on it.

Usage:
    kill-port [port]   (default 3000)

Best effort: lookup or kill failures are reported, never raised. Relies on
lsof and kill being on PATH.
"""

import argparse
import subprocess
import sys

DEFAULT_PORT = 3000
_TIMEOUT_SECONDS = 5


def _port(value: str) -> int:
    port = int(value)
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"invalid port: {value}")
    return port


def find_pids(port: int) -> list[str]:
    """PIDs with the port open. lsof exits 1 when there are none."""
    result = subprocess.run(
        ["lsof", "-ti", f":{port}"],
        capture_output=True, text=True, timeout=_TIMEOUT_SECONDS,
    )
    return [line.strip() for line in result.stdout.splitlines() if line.strip()]


def kill_port(port: int) -> int:
    """Kill every process on the port. Returns how many were signalled."""
    try:
        pids = find_pids(port)
    except (OSError, subprocess.SubprocessError) as e:
        print(f"Error checking port: {e}", file=sys.stderr)
        return 0

    if not pids:
        print(f"Port {port} is free.")
        return 0

    killed = 0
    for pid in pids:
        print(f"Killing process {pid} on port {port}...")
        try:
            subprocess.run(["kill", "-9", pid], timeout=_TIMEOUT_SECONDS, check=True)
            killed += 1
        except (OSError, subprocess.SubprocessError) as e:
            print(f"Failed to kill process {pid}: {e}", file=sys.stderr)
    if killed:
        print("Process killed successfully.")
    return killed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kill-port", description="Kill the process listening on a local port.",
    )
    parser.add_argument("port", nargs="?", type=_port, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    kill_port(args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Launch the Bubble Compare Explorer with ``panel serve``.

    python code/run_capsule.py            # port 5006
    python code/run_capsule.py 8080 --dev # custom port, autoreload
"""

import subprocess
import sys
from pathlib import Path

APP_PATH = Path(__file__).parent / "app.py"
DEFAULT_PORT = 5006


def build_command(port: int = DEFAULT_PORT, dev: bool = False) -> list[str]:
    """Command line for serving the app on ``port``."""
    cmd = [
        sys.executable, "-m", "panel", "serve",
        str(APP_PATH),
        "--address", "0.0.0.0",
        "--port", str(port),
        "--allow-websocket-origin=*",
    ]
    if dev:
        cmd.append("--dev")
    return cmd


def run(argv: list[str] | None = None):
    """Start the Panel server."""
    args = sys.argv[1:] if argv is None else argv
    dev = "--dev" in args
    ports = [a for a in args if a.isdigit()]
    port = int(ports[0]) if ports else DEFAULT_PORT
    subprocess.run(build_command(port, dev))


if __name__ == "__main__":
    run()

"""Convenience launcher for the wakegate development server.

Usage:
    python3 start_dev.py [--send]

Runs Uvicorn with --reload from the repository root. By default the server
starts in dev mode: WoL packets are logged, not sent. Pass --send to put
real packets on the wire (WAKEGATE_WOL_MAC / WAKEGATE_WOL_HOST must be set).
"""

from __future__ import annotations

import argparse
import os
import signal
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
BACKEND_DIR = ROOT_DIR / "backend"

# ANSI colors (disabled on Windows without VT support)
if os.name == "nt":
    os.system("")  # enable VT100 on Windows 10+

CYAN = "\033[36m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def log(level: str, msg: str) -> None:
    colors = {"info": CYAN, "start": GREEN, "stop": YELLOW, "error": RED}
    print(f"{colors.get(level, '')}[{level}]{RESET} {msg}")


def resolve_python() -> str:
    """Prefer a project venv (root or backend/), else the current interpreter."""
    rel = Path(".venv/Scripts/python.exe") if os.name == "nt" else Path(".venv/bin/python")
    for base in (ROOT_DIR, BACKEND_DIR):
        candidate = base / rel
        if candidate.exists():
            return str(candidate)
    log("info", "No venv found — using current Python")
    return sys.executable


def check_dependencies(python: str) -> bool:
    """Verify critical packages are importable."""
    result = subprocess.run(
        [python, "-c", "import fastapi; import uvicorn; import pydantic_settings"],
        capture_output=True,
        text=True,
    )
    if result.returncode != 0:
        log("error", "Missing dependencies. Run:")
        log("error", f"  cd {ROOT_DIR} && pip install -e '.[dev]'")
        return False
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="wakegate dev server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--send", action="store_true", help="send real WoL packets")
    args = parser.parse_args(argv)

    python = resolve_python()
    log("info", f"Python: {python}")
    if not check_dependencies(python):
        return 1

    env = dict(os.environ)
    env.setdefault("WAKEGATE_DEBUG", "true")
    env.setdefault("WAKEGATE_LOG_LEVEL", "DEBUG")
    env.setdefault("WAKEGATE_ENVIRONMENT", "development")
    if not args.send:
        env["WAKEGATE_MODE"] = "dev"
        env.setdefault("WAKEGATE_WOL_PREFLIGHT", "false")

    cmd = [
        python, "-m", "uvicorn", "wakegate.main:app",
        "--reload",
        "--app-dir", str(BACKEND_DIR),
        "--host", args.host,
        "--port", str(args.port),
    ]
    log("start", " ".join(cmd))
    log("info", f"  Health:  http://localhost:{args.port}/api/health")
    log("info", f"  Wake:    POST http://localhost:{args.port}/api/wol")
    log("info", "Press Ctrl+C to stop")

    proc = subprocess.Popen(cmd, cwd=ROOT_DIR, env=env)
    try:
        return proc.wait()
    except KeyboardInterrupt:
        print()
        log("stop", "Ctrl+C received, shutting down...")
        proc.send_signal(signal.SIGINT)
        try:
            proc.wait(timeout=10)
        except subprocess.TimeoutExpired:
            proc.kill()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())

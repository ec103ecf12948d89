# utils.py

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional


# ─────────────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────────────

def log(msg: str, log_path: Optional[Path]) -> None:
    """Append a single line to the run log (no-op without a log file)."""
    if log_path is None:
        return
    with open(log_path, "a", buffering=1) as f:
        f.write(str(msg).rstrip() + "\n")


# ─────────────────────────────────────────────────────────────────────────────
# Subprocess helpers
# ─────────────────────────────────────────────────────────────────────────────

def run_cmd(cmd: list[str], cwd: Path | None, log_path: Path | None) -> None:
    """
    Run a command, teeing stdout/stderr to the log file when there is one.
    Without a log the child inherits our stdout/stderr.
    Raises CalledProcessError on non-zero exit.
    """
    if log_path is None:
        subprocess.run(cmd, cwd=cwd, check=True)
        return

    with open(log_path, "a", buffering=1) as f:
        f.write(f"## cwd: {cwd}\n")
        f.write(">> " + " ".join(map(str, cmd)) + "\n")
        f.flush()
        subprocess.run(cmd, cwd=cwd, stdout=f, stderr=f, check=True)

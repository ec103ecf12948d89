from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Mapping, Optional

import click

from .entities import InvocationRequest, OutputPaths
from .errors import ExternalToolFailure, LogFileError
from .paths import build_output_paths
from .trim import FASTP_BIN, build_fastp_cmd
from .utils import log, run_cmd
from .validate import ensure_outdir


@dataclass(frozen=True)
class RunnerSettings:
    """Process-level settings taken from the environment."""

    BIN_ENV = "RUN_FASTP_BIN"
    LOG_ENV = "RUN_FASTP_LOG"

    fastp: str = FASTP_BIN
    log_path: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RunnerSettings":
        env = os.environ if environ is None else environ
        log_path = env.get(cls.LOG_ENV)
        return cls(
            fastp=env.get(cls.BIN_ENV) or FASTP_BIN,
            log_path=Path(log_path).expanduser().resolve() if log_path else None,
        )


def _prepare_log(log_path: Optional[Path]) -> None:
    """Make sure the run log can be appended to before anything is started."""
    if log_path is None:
        return
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a"):
            pass
    except OSError as e:
        raise LogFileError(f"Cannot write log file {log_path}: {e}") from e


def run(req: InvocationRequest, settings: Optional[RunnerSettings] = None) -> OutputPaths:
    """
    Create the output directory, build the fastp command for the request's
    mode and run it to completion.
    """
    settings = settings or RunnerSettings()
    log_path = settings.log_path

    ensure_outdir(req.outdir)
    _prepare_log(log_path)

    paths = build_output_paths(req.outdir, req.base_name, req.mode)

    exe = shutil.which(settings.fastp)
    if exe is None:
        raise ExternalToolFailure(f"fastp executable not found: {settings.fastp}")

    cmd = build_fastp_cmd(req, paths, fastp=exe)

    log(f"===== run_fastp start {datetime.now().isoformat()} =====", log_path)
    log(f"Sample: {req.base_name} | mode: {req.mode}", log_path)
    click.secho(f"[fastp] {req.base_name}: {req.mode}", fg="cyan", err=True)

    try:
        run_cmd(cmd, None, log_path)
    except subprocess.CalledProcessError as e:
        log(f"[fastp] FAILED for {req.base_name} (exit {e.returncode})", log_path)
        raise ExternalToolFailure(f"fastp preprocessing failed for {req.base_name}",
                                  returncode=e.returncode) from e
    except OSError as e:
        log(f"[fastp] FAILED for {req.base_name} ({e})", log_path)
        raise ExternalToolFailure(f"fastp preprocessing failed for {req.base_name}: {e}") from e

    log(f"[fastp] Done: {req.base_name}", log_path)
    return paths

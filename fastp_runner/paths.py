from __future__ import annotations

import os
from pathlib import Path

from .entities import Mode, OutputPaths

R1_SUFFIX = "_fastp_R1.fastq.gz"
R2_SUFFIX = "_fastp_R2.fastq.gz"
JSON_SUFFIX = "_fastp.json"
HTML_SUFFIX = "_fastp.html"


def sample_stem(base_name: str) -> str:
    """Last component of `base_name`, like basename(1) (trailing slashes ignored)."""
    stripped = base_name.rstrip("/")
    if not stripped:
        return "/" if base_name else ""
    return os.path.basename(stripped)


def build_output_paths(outdir: str, base_name: str, mode: Mode = Mode.PAIRED_END) -> OutputPaths:
    """
    Derive the fastp output locations for one sample.
    Pure: no filesystem access. `r2_out` is only set for paired-end runs.
    """
    out = Path(outdir)
    stem = sample_stem(base_name)
    return OutputPaths(
        r1_out=out / f"{stem}{R1_SUFFIX}",
        r2_out=out / f"{stem}{R2_SUFFIX}" if mode is Mode.PAIRED_END else None,
        json_report=out / f"{stem}{JSON_SUFFIX}",
        html_report=out / f"{stem}{HTML_SUFFIX}",
    )

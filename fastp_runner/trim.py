# trim.py

from __future__ import annotations

from .entities import (
    SINGLE_END_SENTINEL,
    InvocationRequest,
    Mode,
    OutputPaths,
    PairedEndConfig,
    SingleEndConfig,
)

FASTP_BIN = "fastp"

# ─────────────────────────────────────────────────────────────────────────────
# Mode
# ─────────────────────────────────────────────────────────────────────────────

def select_mode(r2_path: str) -> Mode:
    """Paired-end unless R2 is the single-end sentinel."""
    return Mode.SINGLE_END if r2_path == SINGLE_END_SENTINEL else Mode.PAIRED_END


# ─────────────────────────────────────────────────────────────────────────────
# Fastp commands
# ─────────────────────────────────────────────────────────────────────────────

def fastp_single_cmd(req: InvocationRequest, paths: OutputPaths,
                     config: SingleEndConfig = SingleEndConfig(), fastp: str = FASTP_BIN) -> list[str]:
    """fastp command (SINGLE-END)."""
    return [
        fastp,
        "-i", req.r1_path,
        "-o", str(paths.r1_out),
        "-j", str(paths.json_report),
        "-h", str(paths.html_report),
        *config.to_flags(),
    ]

def fastp_paired_cmd(req: InvocationRequest, paths: OutputPaths,
                     config: PairedEndConfig = PairedEndConfig(), fastp: str = FASTP_BIN) -> list[str]:
    """fastp command (PAIRED-END)."""
    if paths.r2_out is None:
        raise ValueError("paired-end command needs an R2 output path")
    return [
        fastp,
        "-i", req.r1_path, "-I", req.r2_path,
        "-o", str(paths.r1_out), "-O", str(paths.r2_out),
        "-j", str(paths.json_report),
        "-h", str(paths.html_report),
        *config.to_flags(),
    ]

def build_fastp_cmd(req: InvocationRequest, paths: OutputPaths, fastp: str = FASTP_BIN) -> list[str]:
    if req.mode is Mode.PAIRED_END:
        return fastp_paired_cmd(req, paths, fastp=fastp)
    return fastp_single_cmd(req, paths, fastp=fastp)

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Sequence

import click

from .entities import SINGLE_END_SENTINEL, InvocationRequest
from .errors import DirectoryCreateError, MissingInputFile, UsageError
from .trim import select_mode

N_ARGS = 4


def parse_args(args: Sequence[str], ctx: Optional[click.Context] = None) -> InvocationRequest:
    """
    Turn the four positional arguments into an InvocationRequest.

    R1 must exist; R2 must exist unless it is the "NA" sentinel. The output
    directory is not touched here (see `ensure_outdir`).
    """
    if len(args) != N_ARGS:
        raise UsageError("Incorrect number of arguments.", ctx=ctx)

    r1_file, r2_file, outdir, base_name = (str(a) for a in args)

    if not os.path.isfile(r1_file):
        raise MissingInputFile(f"R1 file does not exist: {r1_file}")

    if r2_file != SINGLE_END_SENTINEL and not os.path.isfile(r2_file):
        raise MissingInputFile(f"R2 file does not exist: {r2_file}")

    return InvocationRequest(
        r1_path=r1_file,
        r2_path=r2_file,
        outdir=outdir,
        base_name=base_name,
        mode=select_mode(r2_file),
    )


def ensure_outdir(outdir: str | Path) -> bool:
    """
    Create `outdir` (with parents) if it is not already a directory.
    Warns once on stderr when creating. Returns True if it was created.
    """
    p = Path(outdir)
    if p.is_dir():
        return False
    if p.exists():
        raise DirectoryCreateError(f"Output directory {outdir} exists and is not a directory")

    click.secho(f"Warning: Output directory, {outdir} does not exist. Creating.", fg="yellow", err=True)
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateError(f"Could not create output directory {outdir}: {e}") from e
    return True

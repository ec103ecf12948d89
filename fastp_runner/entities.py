from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

# Literal passed as the R2 argument for single-end data.
SINGLE_END_SENTINEL = "NA"


class Mode(Enum):
    PAIRED_END = "paired-end"
    SINGLE_END = "single-end"

    def __str__(self) -> str:
        return self.value


# ------------------------------- Request -------------------------------

@dataclass(frozen=True)
class InvocationRequest:
    """
    One validated invocation of fastp.

    `r2_path` is either an existing file or the literal "NA". The mode is
    decided once at construction time and every later step reads it from here.
    """

    r1_path: str
    r2_path: str
    outdir: str
    base_name: str
    mode: Mode

    @property
    def r2(self) -> Optional[str]:
        return self.r2_path if self.mode is Mode.PAIRED_END else None


# ------------------------------- Outputs -------------------------------

@dataclass(frozen=True)
class OutputPaths:
    r1_out: Path
    json_report: Path
    html_report: Path
    r2_out: Optional[Path] = None

    def as_list(self) -> List[Path]:
        """All paths fastp is expected to write, R1 first."""
        out = [self.r1_out]
        if self.r2_out is not None:
            out.append(self.r2_out)
        out += [self.json_report, self.html_report]
        return out


# ------------------------------- Flag sets -------------------------------

@dataclass(frozen=True)
class SingleEndConfig:
    """Fixed fastp options for single-end reads."""

    threads: int = 8
    cut_right: bool = True
    length_required: int = 50
    qualified_quality_phred: int = 20
    unqualified_percent_limit: int = 40
    cut_window_size: int = 4

    def _threshold_flags(self) -> List[str]:
        return [
            "--length_required", str(self.length_required),
            "--qualified_quality_phred", str(self.qualified_quality_phred),
            "--unqualified_percent_limit", str(self.unqualified_percent_limit),
            "--cut_window_size", str(self.cut_window_size),
        ]

    def to_flags(self) -> List[str]:
        flags: List[str] = []
        if self.cut_right:
            flags.append("--cut_right")
        flags += ["--thread", str(self.threads)]
        return flags + self._threshold_flags()


@dataclass(frozen=True)
class PairedEndConfig(SingleEndConfig):
    """Fixed fastp options for paired-end reads."""

    threads: int = 16
    detect_adapter_for_pe: bool = True
    correction: bool = True

    def to_flags(self) -> List[str]:
        flags: List[str] = []
        if self.detect_adapter_for_pe:
            flags.append("--detect_adapter_for_pe")
        if self.correction:
            flags.append("--correction")
        return flags + super().to_flags()

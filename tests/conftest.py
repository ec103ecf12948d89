import stat

import pytest

# Stand-in for fastp: records its argv, touches every output it was given
# and exits with $FAKE_FASTP_EXIT (default 0).
FAKE_FASTP = """#!/bin/sh
printf '%s\\n' "$@" > "$FAKE_FASTP_ARGS"
while [ $# -gt 0 ]; do
  case "$1" in
    -o|-O|-j|-h) : > "$2"; shift 2 ;;
    *) shift ;;
  esac
done
exit "${FAKE_FASTP_EXIT:-0}"
"""


@pytest.fixture
def reads(tmp_path):
    """An existing R1/R2 pair."""
    r1 = tmp_path / "sample_R1.fastq.gz"
    r2 = tmp_path / "sample_R2.fastq.gz"
    r1.write_bytes(b"")
    r2.write_bytes(b"")
    return r1, r2


@pytest.fixture
def fake_fastp(tmp_path, monkeypatch):
    """Install the fake fastp and point RUN_FASTP_BIN at it. Returns a reader for its argv."""
    exe = tmp_path / "bin" / "fastp"
    exe.parent.mkdir()
    exe.write_text(FAKE_FASTP)
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    args_file = tmp_path / "fastp_args.txt"
    monkeypatch.setenv("RUN_FASTP_BIN", str(exe))
    monkeypatch.setenv("FAKE_FASTP_ARGS", str(args_file))
    monkeypatch.delenv("RUN_FASTP_LOG", raising=False)
    monkeypatch.delenv("FAKE_FASTP_EXIT", raising=False)

    def argv():
        return args_file.read_text().splitlines() if args_file.exists() else None

    argv.exe = str(exe)
    return argv

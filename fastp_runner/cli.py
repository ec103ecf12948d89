#!/usr/bin/env python3
from __future__ import annotations

import os

import click

from .runner import RunnerSettings, run
from .validate import parse_args
from . import __version__

# ---------------------------- Constants ----------------------------
PROG = "run_fastp"
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-V", "--version")
WIDE_HELP = 120
RIGHT_COL = 14

HELP_BODY = "This script runs fastp preprocessing on FASTQ files."

ARGUMENT_ROWS = [
    ("r1_file", "Path to the R1 FASTQ file (required)"),
    ("r2_file", 'Path to the R2 FASTQ file (use "NA" for single-end data)'),
    ("outdir", "Path to the output directory (created if missing)"),
    ("base_name", "Base name for output files"),
]

OPTION_ROWS = [
    ("-h, --help", "Show this help message and exit"),
    ("-V, --version", "Show the version and exit"),
]

ENV_ROWS = [
    (RunnerSettings.BIN_ENV, "fastp executable to run (default: fastp)"),
    (RunnerSettings.LOG_ENV, "Append the fastp command and its output to this log file"),
]


# ---------------------------- Help formatting ----------------------------

class SpacedFormatterMixin:
    def _fmt_rows_with_spacing(
            self,
            formatter: click.HelpFormatter,
            title: str,
            rows: list[tuple[str, str | None]],
    ) -> None:
        rows = [r for r in rows if r]
        if not rows:
            return

        formatter.write(f"{title}:\n")
        for left, right in rows:
            left = left or ""
            right = right or ""
            gap = max(2, RIGHT_COL - len(left))

            right_lines = right.splitlines() or [""]
            formatter.write(f"  {left}{' ' * gap}{right_lines[0]}\n")

            indent = "  " + " " * RIGHT_COL
            for extra in right_lines[1:]:
                formatter.write(f"{indent}{extra}\n")
        formatter.write("\n")


class FastpCommand(SpacedFormatterMixin, click.Command):
    """
    Positional-only command. `-h/--help` and `-V/--version` are honoured only
    as the first argument and short-circuit everything else, including the
    argument count check.
    """

    def parse_args(self, ctx, args):
        if args and args[0] in HELP_FLAGS:
            click.echo(ctx.get_help(), color=ctx.color)
            ctx.exit(0)
        if args and args[0] in VERSION_FLAGS:
            click.echo(f"{PROG}, version {__version__}", color=ctx.color)
            ctx.exit(0)
        return super().parse_args(ctx, args)

    def format_usage(self, ctx, formatter):
        formatter.write_usage(ctx.command_path, "<r1_file> <r2_file> <outdir> <base_name>")

    def format_help(self, ctx, formatter):
        self.format_usage(ctx, formatter)
        formatter.write("\n")
        if self.help:
            formatter.write(self.help.strip() + "\n\n")
        self._fmt_rows_with_spacing(formatter, "Arguments", ARGUMENT_ROWS)
        self._fmt_rows_with_spacing(formatter, "Options", OPTION_ROWS)
        self._fmt_rows_with_spacing(formatter, "Environment", ENV_ROWS)
        self.format_epilog(ctx, formatter)

    def format_epilog(self, ctx, formatter):
        name = ctx.command_path
        formatter.write("Example:\n")
        formatter.write(f"  {name} sample_R1.fastq.gz sample_R2.fastq.gz /path/to/tmp sample_name\n")
        formatter.write(f"  {name} single_end.fastq.gz NA /path/to/tmp sample_name\n\n")
        formatter.write("Note:\n")
        formatter.write('  For single-end data, use "NA" as the r2_file argument.\n')


# ---------------------------- Command ----------------------------

@click.command(
    PROG,
    cls=FastpCommand,
    help=HELP_BODY,
    context_settings={
        "help_option_names": [],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
        "max_content_width": WIDE_HELP,
    },
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, args: tuple[str, ...]) -> None:
    req = parse_args(args, ctx=ctx)
    paths = run(req, RunnerSettings.from_env())
    for p in paths.as_list():
        click.echo(str(p))


def main():
    os.environ.setdefault("COLUMNS", str(WIDE_HELP))
    cli(prog_name=PROG, standalone_mode=True)


if __name__ == "__main__":
    main()

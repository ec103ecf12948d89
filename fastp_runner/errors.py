from __future__ import annotations

from typing import IO, Optional

import click


class RunnerError(click.ClickException):
    """Base for every terminal failure of a run. Always exits with status 1."""

    exit_code = 1
    kind = "RunnerError"


class UsageError(RunnerError):
    """Wrong number of arguments. Shows the full help text on stderr."""

    kind = "UsageError"

    def __init__(self, message: str, ctx: Optional[click.Context] = None) -> None:
        super().__init__(message)
        self.ctx = ctx

    def show(self, file: Optional[IO] = None) -> None:
        super().show(file)
        if self.ctx is not None:
            click.echo(self.ctx.get_help(), file=file, err=True, color=self.ctx.color)


class MissingInputFile(RunnerError):
    kind = "MissingInputFile"


class DirectoryCreateError(RunnerError):
    kind = "DirectoryCreateError"


class ExternalToolFailure(RunnerError):
    kind = "ExternalToolFailure"

    def __init__(self, message: str, returncode: Optional[int] = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class LogFileError(RunnerError):
    kind = "LogFileError"

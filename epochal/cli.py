"""The ``et`` command: print and manipulate Unix epoch timestamps."""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

import typer

from .codec import format_iso, parse_epoch, parse_iso
from .core import Clock, apply_duration, now, system_clock
from .duration import Duration, is_duration, parse_duration
from .errors import EpochError

logger = logging.getLogger(__name__)

# Replaced in tests to pin "now"
clock: Clock = system_clock

HELP = """A CLI tool to print and manipulate Unix epoch timestamps.

\b
DURATION UNITS
  s    seconds
  m    minutes (60s)
  h    hours (3600s)
  d    days (86400s)
  w    weeks (604800s)
  M    months (calendar)
  Y    years (calendar)

Calendar units handle variable-length months and leap years. When adding
months, days are clamped to the valid range (e.g., Jan 31 + 1M = Feb 28/29).

\b
EXAMPLES
  et                  Print current epoch
  et -7d              Subtract 7 days
  et +3h              Add 3 hours
  et +1M              Add 1 month
  et -1Y              Subtract 1 year
  et 1704912345 +1h   Add 1 hour to given epoch
  et parse 2026-01-05T12:00:00Z
  et format 1704912345
  echo 1704912345 | et -1d
"""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool, log_level: Optional[str]) -> None:
    level = "DEBUG" if verbose else (log_level or "WARNING").upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"unknown level {log_level!r}, expected one of: {', '.join(LOG_LEVELS)}",
            param_hint="'--log-level'",
        )
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _piped_stdin() -> Optional[TextIO]:
    stream = sys.stdin
    if stream is None or stream.isatty():
        return None
    return stream


def process_lines(
    lines: TextIO, duration: Optional[Duration], out: TextIO
) -> int:
    """Echo (or offset) each non-blank line as an epoch.

    Returns:
        Number of lines processed; blank lines are not counted
    """
    count = 0
    for line in lines:
        token = line.strip()
        if not token:
            continue
        count += 1
        epoch = parse_epoch(token)
        if duration is not None:
            epoch = apply_duration(epoch, duration)
        out.write(f"{epoch}\n")
    logger.debug("processed %d line(s) from stdin", count)
    return count


def _try_stdin(duration: Optional[Duration]) -> int:
    stream = _piped_stdin()
    if stream is None:
        logger.debug("stdin is a terminal, skipping")
        return 0
    return process_lines(stream, duration, sys.stdout)


def run(args: List[str]) -> None:
    """Dispatch positional arguments the way the ``et`` command does."""
    command, rest = (args[0], args[1:]) if args else (None, [])

    if command == "now" and len(rest) <= 1:
        epoch = now(clock)
        if rest:
            epoch = apply_duration(epoch, parse_duration(rest[0]))
        typer.echo(epoch)
        return

    if command == "parse":
        if len(rest) != 1:
            raise typer.BadParameter("usage: et parse TIMESTAMP")
        typer.echo(parse_iso(rest[0]))
        return

    if command == "format":
        if len(rest) != 1:
            raise typer.BadParameter("usage: et format EPOCH")
        typer.echo(format_iso(parse_epoch(rest[0])))
        return

    if not args:
        logger.debug("no arguments, reading stdin")
        if _try_stdin(None) == 0:
            typer.echo(now(clock))
        return

    if len(args) == 1:
        token = args[0]
        if is_duration(token):
            duration = parse_duration(token)
            logger.debug("applying %r to stdin or now", duration)
            if _try_stdin(duration) == 0:
                typer.echo(apply_duration(now(clock), duration))
        else:
            typer.echo(parse_epoch(token))
        return

    if len(args) == 2:
        epoch = parse_epoch(args[0])
        typer.echo(apply_duration(epoch, parse_duration(args[1])))
        return

    raise typer.BadParameter(f"expected at most 2 arguments, got {len(args)}")


@app.command(
    help=HELP,
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
def main(
    args: Optional[List[str]] = typer.Argument(
        None, metavar="[ARG]...", help="Epoch, duration, 'now', or a subcommand"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", envvar="EPOCHAL_LOG_LEVEL", help="Logging level"
    ),
) -> None:
    _configure_logging(verbose, log_level)
    try:
        run(args or [])
    except EpochError as err:
        typer.echo(f"error: {err}", err=True)
        raise typer.Exit(code=1) from err

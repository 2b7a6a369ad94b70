"""
Command-line interface for simplefind.

The command line is a thin host around the search core: it reads the named
files into memory, hands them to the SimpleFind engine and prints the matches.

Main Commands:
    find: Search files for a regular expression
    --version: Print the package version

Exit Status:
    0 if at least one match was found, 1 if none, 2 on an invalid pattern,
    an unreadable file or a usage error.

Example Usage:
    $ simplefind find "def \\w+" src/app.py src/util.py
    $ simplefind find -i todo notes.txt --format json --stats
    $ cat log.txt | simplefind find "ERROR" -
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .. import __version__
from ..core.api import SimpleFind
from ..core.config import SearchConfig
from ..core.types import FileInput, OutputFormat, Query
from ..utils.error_handling import ConfigurationError, PatternCompileError
from ..utils.formatter import format_result, format_stats
from ..utils.logging_config import LogFormat, LogLevel, configure_logging

EXIT_MATCH = 0
EXIT_NO_MATCH = 1
EXIT_ERROR = 2

STDIN_NAME = "-"


def read_inputs(names: tuple[str, ...]) -> tuple[list[FileInput], list[tuple[str, str]]]:
    """Load each named file as UTF-8 text. ``-`` reads standard input.

    Returns the loaded files in argument order and ``(name, reason)`` pairs for
    the ones that could not be read.
    """
    files: list[FileInput] = []
    failures: list[tuple[str, str]] = []
    for name in names:
        if name == STDIN_NAME:
            content = sys.stdin.buffer.read().decode("utf-8", errors="replace")
            files.append(FileInput(path=name, content=content))
            continue
        try:
            content = Path(name).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            failures.append((name, e.strerror or str(e)))
            continue
        files.append(FileInput(path=name, content=content))
    return files, failures


@click.group()
@click.version_option(__version__, prog_name="simplefind")
def cli() -> None:
    """simplefind - in-memory multi-file regular expression search"""
    pass


@cli.command("find")
@click.argument("pattern")
@click.argument("files", nargs=-1, required=True)
@click.option(
    "-i", "--ignore-case", is_flag=True, default=False, help="Match without regard to letter case"
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--stats", is_flag=True, default=False, help="Print search statistics to stderr")
@click.option("--parallel", is_flag=True, default=False, help="Scan files on a thread pool")
@click.option("--workers", type=int, default=0, help="Thread pool size (0 = auto)")
# Logging and debugging options
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice([lvl.value for lvl in LogLevel]),
    default=LogLevel.WARNING.value,
    help="Log level",
)
@click.option("--log-file", help="Also write logs to this file")
@click.option(
    "--log-format",
    type=click.Choice([f.value for f in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
def find_cmd(
    pattern: str,
    files: tuple[str, ...],
    ignore_case: bool,
    fmt: str,
    stats: bool,
    parallel: bool,
    workers: int,
    debug: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
) -> None:
    """Search FILES for PATTERN. Use - to read standard input."""
    if debug:
        log_level = LogLevel.DEBUG.value

    logger = configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        enable_file=bool(log_file),
        enable_console=True,
    )

    cfg = SearchConfig(
        case_sensitive=not ignore_case,
        output_format=OutputFormat(fmt),
        parallel=parallel,
        workers=workers,
    )
    try:
        engine = SimpleFind(cfg)
    except ConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_ERROR)

    inputs, failures = read_inputs(files)
    for name, reason in failures:
        logger.log_file_error(name, reason)

    query = Query(pattern=pattern, output=cfg.output_format)
    try:
        result = engine.run(query, inputs)
    except PatternCompileError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(EXIT_ERROR)

    output = format_result(result, query.output)
    if output:
        click.echo(output)

    if stats:
        click.echo(format_stats(result.stats), err=True)

    if failures:
        sys.exit(EXIT_ERROR)
    sys.exit(EXIT_MATCH if result.items else EXIT_NO_MATCH)


def main() -> None:
    cli(prog_name="simplefind")


if __name__ == "__main__":
    main()

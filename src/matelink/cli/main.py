"""Click application entrypoint for matelink."""

from __future__ import annotations

import logging
import signal
import sys
from pathlib import Path
from types import FrameType
from typing import Optional

import click

from matelink import __version__
from matelink.cli.exit_codes import (
    EXIT_SUCCESS,
    EXIT_ERROR,
    EXIT_SIGINT,
    EXIT_SIGTERM,
)
from matelink.exceptions import MateLinkError
from matelink.utils.logging import get_logger, setup_logging

from .commands.config import init_config
from .commands.validate import validate
from .common_options import (
    bam_option,
    index_option,
    references_option,
    output_option,
    config_option,
    lower_option,
    upper_option,
    window_length_option,
    threads_option,
    verbose_option,
    log_file_option,
)
from .run import LinkOptions, execute_linkage


class SignalInterrupt(KeyboardInterrupt):
    """Interrupt raised from a signal handler, remembering the signal."""

    def __init__(self, signum: int):
        self.signum = signum
        super().__init__(f"{signal.Signals(signum).name} received")


def _handle_signal(signum: int, frame: Optional[FrameType]) -> None:
    """Handle interrupt signals for graceful shutdown."""
    sig_name = "SIGINT" if signum == signal.SIGINT else "SIGTERM"
    click.echo(f"\n{sig_name} received, aborting...", err=True)
    raise SignalInterrupt(signum)


def _interrupt_exit_code(exc: KeyboardInterrupt) -> int:
    if getattr(exc, "signum", None) == signal.SIGTERM:
        return EXIT_SIGTERM
    return EXIT_SIGINT


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if value and not ctx.resilient_parsing:
        click.echo(f"matelink {__version__}")
        ctx.exit()


@click.group(
    context_settings=dict(help_option_names=["-h", "--help"]),
    invoke_without_command=True,
)
# Version option (use -V to avoid conflict with -v/--verbose)
@click.option(
    "-V",
    "--version",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_print_version,
    help="Show the version and exit.",
)
@bam_option
@index_option
@references_option
@output_option
@config_option
@lower_option
@upper_option
@window_length_option
@threads_option
@click.option(
    "--skip-missing",
    is_flag=True,
    help="Warn and skip listed contigs absent from the BAM header instead of failing",
)
@click.option("--no-progress", is_flag=True, help="Disable the progress bar")
@verbose_option
@log_file_option
@click.pass_context
def cli(
    ctx: click.Context,
    bam: Optional[Path],
    index: Optional[Path],
    references: Optional[Path],
    output: Optional[Path],
    config: Optional[Path],
    lower: Optional[int],
    upper: Optional[int],
    window_length: Optional[int],
    threads: Optional[int],
    skip_missing: bool,
    no_progress: bool,
    verbose: int,
    log_file: Optional[Path],
) -> None:
    """matelink: contig-end linkage graph from paired-end alignments.

    Scans the terminal windows of every listed contig, follows mates that land
    near an end of another contig and prints one line per supported pair of
    contig ends:

    contigA<TAB>contigB<TAB>count<TAB>endA endB

    Run directly as: matelink -b <aln.bam> -x <aln.bam.bai> -r <contigs.txt>
    """
    # If a subcommand was invoked, do not run the linkage here
    if ctx.invoked_subcommand:
        return

    if verbose >= 2:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING

    setup_logging(level=log_level, log_file=log_file)
    logger = get_logger("cli")

    try:
        opts = LinkOptions(
            bam=bam,
            index=index,
            references=references,
            output=output,
            config_path=config,
            lower=lower,
            upper=upper,
            window_length=window_length,
            threads=threads,
            skip_missing=skip_missing,
            no_progress=no_progress,
            log_file=log_file,
            verbose=verbose,
        )
        execute_linkage(opts, logger)

    except KeyboardInterrupt as exc:
        logger.info("Run interrupted by user")
        sys.exit(_interrupt_exit_code(exc))
    except MateLinkError as exc:
        logger.error(f"{exc}")
        sys.exit(EXIT_ERROR)
    except Exception as exc:
        logger.exception(f"Unexpected error: {exc}")
        sys.exit(EXIT_ERROR)


cli.add_command(init_config)
cli.add_command(validate)


def main(argv: list[str] | None = None) -> int:
    """Main entry point with signal handling."""
    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)

    try:
        cli(argv)
        return EXIT_SUCCESS
    except KeyboardInterrupt as exc:
        return _interrupt_exit_code(exc)
    except SystemExit as exc:
        # Preserve explicit exit codes from cli()
        if exc.code is None:
            return EXIT_SUCCESS
        return exc.code if isinstance(exc.code, int) else EXIT_ERROR
    except Exception as exc:
        click.echo(f"Error: {exc}", err=True)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())

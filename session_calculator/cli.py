"""CLI entry point for Session Calculator.

Starts the interactive calculator on standard input/output:
- Seed a session, apply + - * / % to the running result
- n: start a new session, m: browse stored sessions, q: quit
"""

import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import CalculatorConfig, MAX_PRECISION, MIN_PRECISION
from .output_helper import DEFAULT_PRECISION
from .repl import CalculatorRepl


console = Console()


def _configure_logging(verbose: bool):
    """Send debug records to stderr when verbose, stay silent otherwise."""
    root = logging.getLogger("session_calculator")
    root.handlers.clear()
    if verbose:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
    else:
        root.addHandler(logging.NullHandler())
        root.setLevel(logging.WARNING)


@click.command()
@click.version_option(version=__version__, prog_name="session-calc")
@click.option(
    "--precision",
    "-p",
    type=click.IntRange(MIN_PRECISION, MAX_PRECISION),
    default=DEFAULT_PRECISION,
    show_default=True,
    help="Significant digits shown for results",
)
@click.option(
    "--no-banner",
    is_flag=True,
    help="Skip the startup banner",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log state transitions and steps to stderr",
)
def main(precision: int, no_banner: bool, verbose: bool):
    """Session Calculator - console arithmetic with session history.

    Enter a starting number, then apply +, -, *, / or % to the running
    result. Use n to start a new calculation, m to browse stored
    calculations and q to quit.
    """
    _configure_logging(verbose)
    config = CalculatorConfig(precision=precision, show_banner=not no_banner)

    try:
        CalculatorRepl(config=config, console=console).run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(1)

#!/usr/bin/env python3
"""Nonogram puzzle game.

Usage::

    python main.py                  # Rich terminal
    python main.py -f vanilla       # plain ANSI terminal
    python main.py --seed 7         # reproducible boards
    python main.py --log-file nonogram.log -v
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

logger = logging.getLogger("nonogram")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def configure_logging(log_file: Optional[Path] = None, verbose: bool = False) -> None:
    """Configure application-wide logging.

    The game owns the terminal, so only warnings reach stderr unless a
    log file is given.
    """
    level = logging.DEBUG if verbose else logging.INFO
    if log_file is None:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, force=True)
        return
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        filename=str(log_file),
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the board generator for reproducible puzzles.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        dir_okay=False,
        help="Write logs to this file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug messages (board generation, screen changes).",
    ),
) -> None:
    """Nonogram puzzle game."""
    configure_logging(log_file, verbose)

    if seed is not None:
        random.seed(seed)

    logger.info("Starting %s frontend (seed=%s)", frontend.value, seed)
    mod = importlib.import_module(_RUNNERS[frontend])
    try:
        mod.run()
    except OSError as exc:
        logger.exception("Terminal I/O failed")
        typer.echo(f"Terminal error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()

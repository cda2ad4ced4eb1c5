"""
CLI interface for png-dataurl.

Reads ``user.png`` from the working directory and writes its data URL to
``user_base64.txt``. There are no arguments beyond help and version.

Usage:
    png-dataurl
    python -m pngdataurl
"""

from __future__ import annotations

import logging
import sys

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from pngdataurl import __version__
from pngdataurl.config import get_config
from pngdataurl.encoder import EncoderError, encode_file

# ---------------------------------------------------------------------------
# Load .env early so all config reads pick up the values
# ---------------------------------------------------------------------------
load_dotenv()

logger = logging.getLogger("pngdataurl.cli")

EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _configure_logging(level: int) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [png-dataurl] %(levelname)s %(message)s",
        stream=sys.stderr,  # stdout is reserved for the report lines
    )


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="png-dataurl")
def cli() -> None:
    """Encode user.png as a data URL and write it to user_base64.txt."""
    try:
        config = get_config()
    except ValidationError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        raise SystemExit(EXIT_CONFIG_ERROR)

    _configure_logging(config.log_level_value)
    logger.debug("Working directory: %s", config.work_dir)

    try:
        encode_file(config.source_path, config.output_path, report=click.echo)
    except EncoderError as exc:
        logger.debug("Encoding aborted", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(EXIT_IO_ERROR)


def main() -> None:
    """Package entry point (``png-dataurl`` console script and ``__main__``)."""
    cli()

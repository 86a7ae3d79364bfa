"""json-log-pretty — colorize JSON log lines read from stdin."""

import logging
import sys
from argparse import ArgumentParser

from src.config import load_config
from src.formatter import format_line
from src.reader import InputReadError, read_stdin

__version__ = "0.1.0"

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser. Only --help and --version exist."""
    parser = ArgumentParser(
        prog="json-log-pretty",
        description="PNC JSON log parser",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def run_pipeline(lines, color: bool, out=None):
    """Format each line and write the result before reading the next one."""
    if out is None:
        out = sys.stdout
    for line in lines:
        for rendered in format_line(line, color=color):
            out.write(rendered + "\n")
        out.flush()


def main():
    build_parser().parse_args()

    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logger.debug("Config: color=%s, log_level=%s", config.color, config.log_level)

    sys.stdout.reconfigure(encoding="utf-8")

    try:
        run_pipeline(read_stdin(), color=config.color)
    except InputReadError as e:
        logger.error("Input stream failed at line %d: %s", e.line_number, e.cause)
        sys.exit(1)


def cli():
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)


if __name__ == "__main__":
    cli()

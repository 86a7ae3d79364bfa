"""Configuration — frozen dataclass resolved from the environment and terminal."""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, TextIO

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    color: bool = True
    log_level: str = "WARNING"


def _is_tty(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def should_colorize(environ: Mapping[str, str], is_tty: bool) -> bool:
    """Decide on ANSI color the way terminal color libraries do.

    CLICOLOR_FORCE (anything but "0") wins, then NO_COLOR disables, then
    color follows CLICOLOR (unless "0") and whether stdout is a terminal.
    """
    force = environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in environ:
        return False
    return environ.get("CLICOLOR") != "0" and is_tty


def load_config(environ: Mapping[str, str] | None = None, stdout: TextIO | None = None) -> Config:
    """Build Config from environment variables with sensible defaults."""
    if environ is None:
        environ = os.environ
    if stdout is None:
        stdout = sys.stdout
    log_level = environ.get("LOG_LEVEL", Config.log_level).upper()
    if log_level not in LOG_LEVELS:
        log_level = Config.log_level
    return Config(
        color=should_colorize(environ, _is_tty(stdout)),
        log_level=log_level,
    )

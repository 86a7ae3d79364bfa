"""Generator-based line reading from standard input."""

import sys
from typing import BinaryIO, Generator, TextIO

from src.parser import strip_terminator


class InputReadError(Exception):
    """The input stream could not produce the next line."""

    def __init__(self, line_number: int, cause: Exception):
        self.line_number = line_number
        self.cause = cause
        super().__init__(f"failed to read input line {line_number}: {cause}")


def read_lines(stream: BinaryIO | TextIO) -> Generator[str, None, None]:
    """Yield each line of stream in order, without its terminator.

    Binary streams are decoded one line at a time as strict UTF-8, so lines
    before a bad byte sequence are still delivered. Raises InputReadError if
    the stream fails mid-read.
    """
    line_number = 0
    while True:
        line_number += 1
        try:
            line = stream.readline()
            if isinstance(line, bytes):
                line = line.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(line_number, e) from e
        if not line:
            return
        yield strip_terminator(line)


def read_stdin() -> Generator[str, None, None]:
    yield from read_lines(sys.stdin.buffer)

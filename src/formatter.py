"""Output formatter — colorized header plus optional exception lines."""

from src.parser import LogRecord, decode_line, is_record
from src.styles import (
    BLUE,
    BRIGHT_WHITE,
    BRIGHT_YELLOW,
    GREEN,
    RED,
    YELLOW,
    Style,
    paint,
)

# level -> (level token style, message token style)
LEVEL_STYLES = {
    "INFO": (Style(fg=BLUE, bold=True), Style(fg=BLUE)),
    "ERROR": (Style(fg=RED, bold=True), Style(fg=RED)),
    "SEVERE": (Style(fg=RED, bold=True), Style(fg=RED)),
    "DEBUG": (Style(fg=GREEN, bold=True), Style(fg=GREEN)),
    "WARN": (Style(fg=BRIGHT_YELLOW, bold=True), Style(fg=BRIGHT_YELLOW)),
    "WARNING": (Style(fg=BRIGHT_YELLOW, bold=True), Style(fg=BRIGHT_YELLOW)),
}
# Unrecognized levels: bold level token, but the message still falls back to blue
DEFAULT_LEVEL_STYLES = (Style(bold=True), Style(fg=BLUE))

TIMESTAMP_STYLE = Style(fg=BRIGHT_WHITE)
LOGGER_STYLE = Style(dimmed=True, italic=True)
STACK_TRACE_STYLE = Style(fg=RED, bold=True)
EXC_INFO_STYLE = Style(fg=YELLOW, bold=True)
LABEL_STYLE = Style(fg=BRIGHT_YELLOW, bold=True)
EXCEPTION_TYPE_STYLE = Style(fg=RED, bold=True)
EXCEPTION_MESSAGE_STYLE = Style(fg=RED, bold=True, italic=True)


def level_styles(level: str) -> tuple[Style, Style]:
    """Return (level token style, message token style) for a level value."""
    return LEVEL_STYLES.get(level, DEFAULT_LEVEL_STYLES)


def format_header(record: LogRecord, color: bool = True) -> str:
    level_style, message_style = level_styles(record.level)
    return "[{}] {} [{}] {}".format(
        paint(record.timestamp, TIMESTAMP_STYLE, color),
        paint(record.level, level_style, color),
        paint(record.logger_name, LOGGER_STYLE, color),
        paint(record.message, message_style, color),
    )


def _labelled(label: str, value: str, style: Style, color: bool) -> str:
    return f"{paint(label, LABEL_STYLE, color)}: {paint(value, style, color)}"


def format_record(record: LogRecord, color: bool = True) -> list[str]:
    """Render a decoded record as output lines.

    The header always comes first, then whichever of stack trace, exc_info,
    exception type and exception message are present, in that order.
    """
    lines = [format_header(record, color)]

    if record.stack_trace is not None:
        lines.append(paint(record.stack_trace, STACK_TRACE_STYLE, color))

    if record.exc_info is not None:
        lines.append(paint(record.exc_info, EXC_INFO_STYLE, color))

    exception = record.exception
    if exception is not None:
        if exception.exception_type is not None:
            lines.append(_labelled("Exception type", exception.exception_type, EXCEPTION_TYPE_STYLE, color))
        if exception.message is not None:
            lines.append(_labelled("Message", exception.message, EXCEPTION_MESSAGE_STYLE, color))

    return lines


def format_line(line: str, color: bool = True) -> list[str]:
    """Decode and render one input line; pass it through untouched on a miss."""
    decoded = decode_line(line)
    if not is_record(decoded):
        return [decoded.line]
    return format_record(decoded, color)

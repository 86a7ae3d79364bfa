"""JSON log line decoder — frozen dataclasses + JSON Schema validation."""

import json
from dataclasses import dataclass

import jsonschema

OPTIONAL_STRING = {"type": ["string", "null"]}

LOG_RECORD_SCHEMA = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["timestamp", "loggerName", "level", "message"],
    "properties": {
        "timestamp": {"type": "string"},
        "loggerName": {"type": "string"},
        "level": {"type": "string"},
        "message": {"type": "string"},
        "stackTrace": OPTIONAL_STRING,
        "exc_info": OPTIONAL_STRING,
        "exception": {
            "type": ["object", "null"],
            "properties": {
                "exceptionType": OPTIONAL_STRING,
                "message": OPTIONAL_STRING,
            },
        },
    },
}

_validator = jsonschema.Draft202012Validator(LOG_RECORD_SCHEMA)


@dataclass(frozen=True)
class ExceptionInfo:
    exception_type: str | None = None
    message: str | None = None


@dataclass(frozen=True)
class LogRecord:
    timestamp: str
    logger_name: str
    level: str
    message: str
    stack_trace: str | None = None
    exc_info: str | None = None
    exception: ExceptionInfo | None = None


@dataclass(frozen=True)
class RawLine:
    """A line that could not be decoded into a LogRecord."""

    line: str


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


def _reject_duplicates(pairs: list) -> dict:
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f"duplicate key: {key}")
        obj[key] = value
    return obj


def strip_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _build_record(data: dict) -> LogRecord:
    exception = data.get("exception")
    if exception is not None:
        exception = ExceptionInfo(
            exception_type=exception.get("exceptionType"),
            message=exception.get("message"),
        )

    return LogRecord(
        timestamp=data["timestamp"],
        logger_name=data["loggerName"],
        level=data["level"],
        message=data["message"],
        stack_trace=data.get("stackTrace"),
        exc_info=data.get("exc_info"),
        exception=exception,
    )


def decode_line(line: str) -> LogRecord | RawLine:
    """Decode one input line into a LogRecord, or RawLine on any mismatch.

    Decoding is all-or-nothing: malformed JSON, a non-object value, a missing
    required field or a field of the wrong type all yield RawLine holding the
    line (minus its terminator). So do duplicate keys and lone surrogate
    escapes, which have no UTF-8 encoding. Never raises.
    """
    stripped = strip_terminator(line)
    try:
        data = json.loads(
            stripped,
            parse_constant=_reject_constant,
            object_pairs_hook=_reject_duplicates,
        )
        # UnicodeEncodeError is a ValueError
        json.dumps(data, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError):
        return RawLine(stripped)

    if not _validator.is_valid(data):
        return RawLine(stripped)

    return _build_record(data)


def is_record(decoded: LogRecord | RawLine) -> bool:
    return isinstance(decoded, LogRecord)

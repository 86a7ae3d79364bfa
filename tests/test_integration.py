"""Integration tests — E2E via subprocess with log lines piped on stdin."""

import json
import os
import subprocess
import sys
import unittest

MAIN_PY = os.path.join(os.path.dirname(__file__), "..", "main.py")

INFO_LINE = json.dumps({
    "timestamp": "2024-01-01T00:00:00Z",
    "loggerName": "com.example.Foo",
    "level": "INFO",
    "message": "started",
})


def _run(stdin, *args: str, color: bool = False) -> subprocess.CompletedProcess:
    """Run main.py with stdin piped in, return CompletedProcess."""
    env = {k: v for k, v in os.environ.items() if k not in ("NO_COLOR", "CLICOLOR", "CLICOLOR_FORCE")}
    if color:
        env["CLICOLOR_FORCE"] = "1"
    else:
        env["NO_COLOR"] = "1"
    if isinstance(stdin, str):
        stdin = stdin.encode("utf-8")
    return subprocess.run(
        [sys.executable, MAIN_PY, *args],
        input=stdin,
        capture_output=True,
        env=env,
    )


class TestPlainOutput(unittest.TestCase):
    def test_info_line(self):
        result = _run(INFO_LINE + "\n")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.decode(), "[2024-01-01T00:00:00Z] INFO [com.example.Foo] started\n")

    def test_passthrough(self):
        result = _run("not json at all\n")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.decode(), "not json at all\n")

    def test_mixed_stream_keeps_order(self):
        error_line = json.dumps({
            "timestamp": "t",
            "loggerName": "L",
            "level": "ERROR",
            "message": "boom",
            "stackTrace": "at Foo.bar(Foo.java:1)",
        })
        result = _run("\n".join(["plain", error_line, "{}"]) + "\n")
        self.assertEqual(
            result.stdout.decode().split("\n"),
            ["plain", "[t] ERROR [L] boom", "at Foo.bar(Foo.java:1)", "{}", ""],
        )

    def test_lone_surrogate_passed_through(self):
        bad = '{"timestamp":"t","loggerName":"L","level":"INFO","message":"\\ud800"}'
        result = _run(bad + "\nafter\n")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout.decode(), bad + "\nafter\n")
        self.assertEqual(result.stderr, b"")

    def test_utf8_passthrough(self):
        result = _run("héllo wörld ✓\n")
        self.assertEqual(result.stdout.decode("utf-8"), "héllo wörld ✓\n")


class TestColorOutput(unittest.TestCase):
    def test_forced_color(self):
        result = _run(INFO_LINE + "\n", color=True)
        self.assertEqual(result.returncode, 0)
        self.assertIn("\033[1;34mINFO\033[0m", result.stdout.decode())

    def test_passthrough_never_colored(self):
        result = _run("plain text\n", color=True)
        self.assertEqual(result.stdout.decode(), "plain text\n")


class TestEndOfInput(unittest.TestCase):
    def test_empty_stream(self):
        result = _run("")
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.stdout, b"")


class TestReadFailure(unittest.TestCase):
    def test_invalid_utf8_is_fatal(self):
        result = _run(INFO_LINE.encode() + b"\n\xff\xfe\n")
        self.assertNotEqual(result.returncode, 0)
        self.assertIn(b"INFO", result.stdout)
        self.assertIn(b"Input stream failed", result.stderr)
        self.assertIn(b"[ERROR] __main__ - Input stream failed", result.stderr)


class TestCliMetadata(unittest.TestCase):
    def test_version(self):
        result = _run("", "--version")
        self.assertEqual(result.returncode, 0)
        self.assertIn("json-log-pretty", result.stdout.decode())

    def test_help(self):
        result = _run("", "--help")
        self.assertEqual(result.returncode, 0)
        self.assertIn("PNC JSON log parser", result.stdout.decode())

    def test_unknown_flag_rejected(self):
        result = _run("", "--level", "ERROR")
        self.assertEqual(result.returncode, 2)


if __name__ == "__main__":
    unittest.main()

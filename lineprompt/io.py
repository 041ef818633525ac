from __future__ import annotations

import io
import sys
from typing import List, Literal, TextIO, Tuple

Target = Literal["stdout", "stderr"]


class LineIO:
    """Abstraction over the standard streams to simplify testing."""

    def write(self, target: Target, text: str) -> None:  # pragma: no cover - interface contract
        raise NotImplementedError

    def flush(self, target: Target) -> None:  # pragma: no cover - interface contract
        raise NotImplementedError

    def read_line(self) -> str:  # pragma: no cover - interface contract
        raise NotImplementedError


class StreamIO(LineIO):
    """Line IO over explicit text streams."""

    def __init__(self, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    def write(self, target: Target, text: str) -> None:
        _select(target, self.stdout, self.stderr).write(text)

    def flush(self, target: Target) -> None:
        _select(target, self.stdout, self.stderr).flush()

    def read_line(self) -> str:
        return self.stdin.readline()


class StdIO(LineIO):
    """Standard stdin/stdout/stderr implementation.

    The ``sys`` attributes are looked up on every call, so redirection
    (``contextlib.redirect_stdout``, pytest capture) takes effect immediately.
    """

    def write(self, target: Target, text: str) -> None:
        _select(target, sys.stdout, sys.stderr).write(text)

    def flush(self, target: Target) -> None:
        _select(target, sys.stdout, sys.stderr).flush()

    def read_line(self) -> str:
        return sys.stdin.readline()


class BufferedIO(StreamIO):
    """Test-double IO that consumes scripted input and captures output."""

    def __init__(self, scripted_input: str = ""):
        self._stdout_buffer = io.StringIO()
        self._stderr_buffer = io.StringIO()
        # StringIO only splits on "\n" and leaves "\r\n" untranslated
        super().__init__(io.StringIO(scripted_input), self._stdout_buffer, self._stderr_buffer)
        self.outputs: List[Tuple[Target, str]] = []
        self.flushes: List[Target] = []

    def write(self, target: Target, text: str) -> None:
        super().write(target, text)
        self.outputs.append((target, text))

    def flush(self, target: Target) -> None:
        super().flush(target)
        self.flushes.append(target)

    @property
    def stdout_text(self) -> str:
        return self._stdout_buffer.getvalue()

    @property
    def stderr_text(self) -> str:
        return self._stderr_buffer.getvalue()


def _select(target: Target, stdout: TextIO, stderr: TextIO) -> TextIO:
    if target == "stdout":
        return stdout
    if target == "stderr":
        return stderr
    raise ValueError(f"Unknown output stream: {target!r}")

from __future__ import annotations

import logging
from typing import Any, NoReturn, Optional

from .errors import PromptError, PromptReadError, PromptWriteError
from .io import LineIO, StdIO, Target
from .policy import FailurePolicy, raise_error

logger = logging.getLogger(__name__)

# ValueError covers I/O on a closed stream and undecodable input
_IO_ERRORS = (OSError, ValueError)


def strip_terminator(line: str) -> str:
    """Remove one trailing "\\n" and, only then, one "\\r" right before it."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class LinePrompter:
    """Writes a prompt, flushes it, and reads back one line of input.

    ``read_line`` returns the raw line and lets I/O errors propagate. The
    prompting methods strip the terminator and hand any I/O failure to
    ``on_error``, which must not return.
    """

    def __init__(
        self,
        io: Optional[LineIO] = None,
        on_error: FailurePolicy = raise_error,
    ) -> None:
        self._io = io if io is not None else StdIO()
        self._on_error = on_error

    def read_line(self) -> str:
        """Read one line from stdin, terminator included ("" at end of stream)."""
        line = self._io.read_line()
        logger.debug("Read %d characters from stdin", len(line))
        return line

    def prompt(self, format: str, *args: Any, **kwargs: Any) -> str:
        """Print to stdout without a newline, then read a line of input."""
        return self._ask("stdout", _render(format, args, kwargs))

    def prompt_line(self, format: str, *args: Any, **kwargs: Any) -> str:
        """Print to stdout followed by a newline, then read a line of input."""
        return self._ask("stdout", _render(format, args, kwargs) + "\n")

    def eprompt(self, format: str, *args: Any, **kwargs: Any) -> str:
        """Print to stderr without a newline, then read a line from stdin."""
        return self._ask("stderr", _render(format, args, kwargs))

    def eprompt_line(self, format: str, *args: Any, **kwargs: Any) -> str:
        """Print to stderr followed by a newline, then read a line from stdin."""
        return self._ask("stderr", _render(format, args, kwargs) + "\n")

    def write(self, target: Target, text: str) -> None:
        """Write and flush ``text``; failures go to the failure policy."""
        try:
            self._io.write(target, text)
            self._io.flush(target)
        except _IO_ERRORS as exc:
            self._fail(PromptWriteError(f"failed writing to {target}", stream=target), exc)

    def ask(self, target: Target, text: str) -> str:
        """Write and flush ``text``, then return the raw line read from stdin.

        Unlike the prompt methods the terminator is kept, so ``""`` still
        means end of stream.
        """
        logger.debug("Prompting on %s", target)
        self.write(target, text)
        try:
            return self.read_line()
        except _IO_ERRORS as exc:
            self._fail(PromptReadError("failed reading from stdin", stream="stdin"), exc)

    def _ask(self, target: Target, text: str) -> str:
        return strip_terminator(self.ask(target, text))

    def _fail(self, error: PromptError, cause: BaseException) -> NoReturn:
        logger.debug("Prompt aborted: %s (%r)", error, cause)
        self._on_error(error, cause)
        # the policy is expected to abort; never fall through to a value
        raise error from cause


def _render(format: str, args: tuple, kwargs: dict) -> str:
    if args or kwargs:
        return format.format(*args, **kwargs)
    return format


_default = LinePrompter()


def read_line() -> str:
    return _default.read_line()


def prompt(format: str, *args: Any, **kwargs: Any) -> str:
    return _default.prompt(format, *args, **kwargs)


def prompt_line(format: str, *args: Any, **kwargs: Any) -> str:
    return _default.prompt_line(format, *args, **kwargs)


def eprompt(format: str, *args: Any, **kwargs: Any) -> str:
    return _default.eprompt(format, *args, **kwargs)


def eprompt_line(format: str, *args: Any, **kwargs: Any) -> str:
    return _default.eprompt_line(format, *args, **kwargs)

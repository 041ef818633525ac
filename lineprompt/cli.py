from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from .io import StdIO
from .policy import exit_process
from .prompter import LinePrompter, strip_terminator

DEFAULT_QUESTION = "What's your favorite number? >"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ask a question on the terminal and echo the answer.")
    parser.add_argument("--question", default=os.getenv("LINEPROMPT_QUESTION", DEFAULT_QUESTION))
    parser.add_argument(
        "--stream",
        choices=("stdout", "stderr"),
        default=_env_choice("LINEPROMPT_STREAM", ("stdout", "stderr"), "stdout"),
        help="Stream the question is written to. Answers are always read from stdin.",
    )
    parser.add_argument("--newline", action="store_true", help="End the question with a newline.")
    parser.add_argument("--repeat", type=int, default=_env_int("LINEPROMPT_REPEAT", 1))
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=_env_choice("LINEPROMPT_LOG_LEVEL", LOG_LEVELS, "WARNING"),
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    prompter = LinePrompter(io=StdIO(), on_error=exit_process)
    question = args.question + ("\n" if args.newline else "")

    try:
        for _ in range(args.repeat):
            line = prompter.ask(args.stream, question)
            if not line:
                break
            prompter.write("stdout", f"Oh, cool: {strip_terminator(line)}!\n")
    except KeyboardInterrupt:
        prompter.write("stdout", "\nInterrupted.\n")
        return 130
    return 0


def _configure_logging(level: str) -> None:
    # No-op when the host already configured the root logger
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    value = os.getenv(name, "").strip()
    for choice in choices:
        if value.lower() == choice.lower():
            return choice
    return default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default

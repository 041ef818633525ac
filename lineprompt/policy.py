from __future__ import annotations

import logging
from typing import NoReturn, Protocol

from .errors import PromptError

logger = logging.getLogger(__name__)


class FailurePolicy(Protocol):
    def __call__(self, error: PromptError, cause: BaseException) -> NoReturn: ...


def raise_error(error: PromptError, cause: BaseException) -> NoReturn:
    """Raise ``error`` chained from the I/O failure that caused it."""
    raise error from cause


def exit_process(error: PromptError, cause: BaseException) -> NoReturn:
    """Abort the process with the failure message, like an uncaught panic."""
    logger.critical("Aborting after %r", cause)
    raise SystemExit(str(error)) from cause

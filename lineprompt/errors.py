"""
Exceptions raised when a prompting operation aborts.
All of them inherit from PromptError.
"""


class PromptError(RuntimeError):
    """A prompt could not complete because a standard stream failed."""

    def __init__(self, message: str, stream: str) -> None:
        super().__init__(message)
        self.stream = stream


class PromptWriteError(PromptError):
    """Writing or flushing the prompt text failed."""


class PromptReadError(PromptError):
    """Reading the answer line failed."""

"""
Errors raised while loading redirect rules.
"""
from typing import Optional


class DecodeError(ValueError):
    """Raised when a structured-data payload cannot be decoded into a RuleSet.

    Decoding happens once at startup, so this error is never raised while
    serving requests. The caller is expected to abort startup.
    """

    def __init__(self, format: str, message: str, cause: Optional[BaseException] = None):
        self.format = format
        self.cause = cause
        super().__init__(f"invalid {format} rules: {message}")

"""
Error types raised by textops.

Not-found conditions are never errors: every search, split and extraction
operation returns a documented fallback value instead. The exceptions below
cover programmer mistakes, bad configuration and failed prompt I/O.
"""

from typing import Optional


class TextOpsError(Exception):
    """Base exception for all textops errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class ContractViolation(TextOpsError, ValueError):
    """
    Raised when an operation is called with arguments it cannot accept.

    Examples:
    - search and replacement sequences of different lengths
    - a chunk size of zero
    - an empty delimiter
    - a character argument that is not exactly one character
    """

    pass


class PromptIOError(TextOpsError, OSError):
    """Raised when a prompt cannot read its answer (closed stream, end of input)."""

    pass


class ConfigError(TextOpsError):
    """Raised when a configuration value cannot be parsed or is inconsistent."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        self.key = key
        super().__init__(message, operation=key)

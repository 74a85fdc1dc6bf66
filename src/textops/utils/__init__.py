"""
textops Utilities Package.

Common error types shared by the string and terminal modules.
"""

from textops.utils.errors import (
    ConfigError,
    ContractViolation,
    PromptIOError,
    TextOpsError,
)

__all__ = [
    "TextOpsError",
    "ContractViolation",
    "PromptIOError",
    "ConfigError",
]

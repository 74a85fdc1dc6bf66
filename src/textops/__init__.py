"""
textops - String manipulation and terminal prompt helpers.

Case-insensitive search, splitting, multi-needle replacement, positional
extraction (``substr_inverse``, ``substr_clip``) and blocking yes/no, line
and password prompts that work on any text stream.
"""

from textops.buffer import TextBuffer
from textops.strings import (
    NPOS,
    after_last_occurrence,
    before_first_occurrence,
    compare,
    glue,
    has_char,
    has_substring,
    has_substring_icase,
    split,
    split_by_len,
    split_pair,
    substr_clip,
    substr_inverse,
    substr_replace_all_ret,
    substr_replace_ret,
)
from textops.term import confirm, prompt, prompt_password
from textops.utils.errors import ContractViolation, PromptIOError, TextOpsError

__version__ = "0.1.0"
__all__ = [
    "NPOS",
    "compare",
    "has_substring",
    "has_substring_icase",
    "has_char",
    "split",
    "split_by_len",
    "split_pair",
    "glue",
    "substr_replace_ret",
    "substr_replace_all_ret",
    "before_first_occurrence",
    "after_last_occurrence",
    "substr_inverse",
    "substr_clip",
    "TextBuffer",
    "confirm",
    "prompt",
    "prompt_password",
    "TextOpsError",
    "ContractViolation",
    "PromptIOError",
]

"""
textops - Case Folding Strategies.

Case-insensitive operations compare characters after passing each one
through a folding function. The function is always supplied explicitly
(or defaults to ``upper_fold``), so results never depend on the process
locale.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from textops.utils.errors import ContractViolation

CaseFolder = Callable[[str], str]


def upper_fold(ch: str) -> str:
    """Fold by upper-casing (the default)."""
    return ch.upper()


def casefold_fold(ch: str) -> str:
    """Fold with Unicode case folding."""
    return ch.casefold()


def ascii_fold(ch: str) -> str:
    """Fold only ASCII letters; every other character is compared as-is."""
    if "a" <= ch <= "z":
        return chr(ord(ch) - 32)
    return ch


FOLDINGS: dict[str, CaseFolder] = {
    "upper": upper_fold,
    "casefold": casefold_fold,
    "ascii": ascii_fold,
}


def resolve_folding(folding: Optional[Union[str, CaseFolder]] = None) -> CaseFolder:
    """
    Return a folding function.

    Args:
        folding: None for the default, a registered name, or a callable

    Raises:
        ContractViolation: if a name is not registered
    """
    if folding is None:
        return upper_fold
    if callable(folding):
        return folding
    try:
        return FOLDINGS[folding]
    except KeyError:
        known = ", ".join(sorted(FOLDINGS))
        raise ContractViolation(
            f"unknown folding '{folding}' (expected one of: {known})",
            operation="resolve_folding",
        ) from None

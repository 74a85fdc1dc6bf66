"""
textops - String Module.

Stateless string helpers: case-insensitive search, splitting, joining,
replacement, positional extraction, case conversion, trimming and
printf-style formatting.

Every function takes its input by value and returns a new string (or list
of strings). The in-place variants live in ``textops.buffer``.

Not-found conditions are never errors. Each operation returns a fixed
fallback instead:

- ``compare``                   -> ``NPOS``
- ``split``                     -> ``[source]``
- ``split_pair``                -> ``(source, "")``
- ``substr_replace_*``          -> ``source`` unchanged
- ``before_first_occurrence``   -> ``source``
- ``after_last_occurrence``     -> ``source``
- ``substr_inverse`` (between)  -> ``""``
- ``substr_clip``               -> ``""`` (also for an empty search)

An empty search needle is treated as "nothing to replace" by every replace
and remove function.
"""

from __future__ import annotations

import sys
from typing import IO, Iterable, List, Optional, Sequence, Tuple, Union

from textops.folding import CaseFolder, resolve_folding
from textops.utils.errors import ContractViolation

# Not-found sentinel returned by compare(); never negative.
NPOS = sys.maxsize

Folding = Optional[Union[str, CaseFolder]]
Needles = Union[str, Sequence[str]]


# =============================================================================
# Search
# =============================================================================


def compare(haystack: str, needle: str, folding: Folding = None) -> int:
    """
    Find the first case-insensitive match of needle in haystack.

    Characters are compared after folding each one with ``folding``. The
    search is a plain sliding window with no preprocessing, so the worst
    case is O(len(haystack) * len(needle)).

    Args:
        haystack: Text to search in
        needle: Text to search for; an empty needle matches at offset 0
        folding: Folding strategy name or callable (default: upper-casing)

    Returns:
        Offset of the first match, or ``NPOS`` when there is none
    """
    fold = resolve_folding(folding)
    size, width = len(haystack), len(needle)
    if width > size:
        return NPOS

    folded_needle = [fold(ch) for ch in needle]
    for start in range(size - width + 1):
        for offset, expected in enumerate(folded_needle):
            if fold(haystack[start + offset]) != expected:
                break
        else:
            return start
    return NPOS


def has_substring_icase(needle: str, haystack: str, folding: Folding = None) -> bool:
    """Check if haystack contains needle, ignoring case."""
    return compare(haystack, needle, folding) != NPOS


def has_substring(needle: str, haystack: str) -> bool:
    """Check if haystack contains needle (case-sensitive)."""
    return needle in haystack


def has_char(ch: str, haystack: str, icase: bool = True, folding: Folding = None) -> bool:
    """
    Check if haystack contains a single character.

    Raises:
        ContractViolation: if ``ch`` is not exactly one character
    """
    if len(ch) != 1:
        raise ContractViolation(
            f"expected a single character, got {ch!r}", operation="has_char"
        )
    if not icase:
        return ch in haystack
    return has_substring_icase(ch, haystack, folding)


def equals_icase(first: str, second: str, folding: Folding = None) -> bool:
    """Compare two strings for equality, ignoring case."""
    if len(first) != len(second):
        return False
    fold = resolve_folding(folding)
    return all(fold(a) == fold(b) for a, b in zip(first, second))


# =============================================================================
# Split / Join
# =============================================================================


def split(source: str, delimiter: str) -> List[str]:
    """
    Split source on every occurrence of delimiter.

    Empty fragments between adjacent delimiters are kept, so
    ``glue(delimiter, split(source, delimiter)) == source`` always holds.
    A source without the delimiter yields ``[source]``.

    Raises:
        ContractViolation: if delimiter is empty
    """
    if not delimiter:
        raise ContractViolation("delimiter must not be empty", operation="split")
    return source.split(delimiter)


def split_by_len(source: str, max_len: int) -> List[str]:
    """
    Split source into consecutive chunks of at most max_len characters.

    Example: ``split_by_len("abc", 2) == ["ab", "c"]``. A source no longer
    than ``max_len`` (including the empty string) yields ``[source]``.

    Raises:
        ContractViolation: if max_len is not positive
    """
    if max_len <= 0:
        raise ContractViolation(
            f"chunk length must be positive, got {max_len}", operation="split_by_len"
        )
    chunks = [source[i : i + max_len] for i in range(0, len(source), max_len)]
    return chunks or [source]


def split_pair(source: str, delimiter: str) -> Tuple[str, str]:
    """
    Split source at the first occurrence of delimiter.

    Returns:
        ``(before, after)``; ``(source, "")`` when delimiter is absent

    Raises:
        ContractViolation: if delimiter is empty
    """
    if not delimiter:
        raise ContractViolation("delimiter must not be empty", operation="split_pair")
    before, found, after = source.partition(delimiter)
    if not found:
        return source, ""
    return before, after


def glue(separator: str, strings: Iterable[str]) -> str:
    """Join strings with separator."""
    return separator.join(strings)


# =============================================================================
# Replace / Remove
# =============================================================================


def substr_replace_ret(search: str, replace: str, source: str) -> str:
    """
    Replace the first occurrence of search with replace.

    Returns:
        The new string; source unchanged if search is absent or empty
    """
    if not search:
        return source
    return source.replace(search, replace, 1)


def _replace_all(search: str, replace: str, source: str) -> str:
    # str.replace resumes after each inserted replacement, so replacement
    # text is never matched again.
    if not search:
        return source
    return source.replace(search, replace)


def _pair_needles(
    search: Needles, replace: Needles, operation: str
) -> List[Tuple[str, str]]:
    if isinstance(search, str) and isinstance(replace, str):
        return [(search, replace)]
    if isinstance(search, str) or isinstance(replace, str):
        raise ContractViolation(
            "search and replace must both be strings or both be sequences",
            operation=operation,
        )
    searches, replacements = list(search), list(replace)
    if len(searches) != len(replacements):
        raise ContractViolation(
            f"got {len(searches)} search strings but {len(replacements)} replacements",
            operation=operation,
        )
    return list(zip(searches, replacements))


def substr_replace_all_ret(search: Needles, replace: Needles, source: str) -> str:
    """
    Replace every non-overlapping occurrence of search with replace.

    With two strings, occurrences are replaced left to right and scanning
    resumes after each replacement. With two sequences, the pairs are
    applied in order and each search string is fully replaced before the
    next pair runs:

        substr_replace_all_ret(["before1", "before2"], ["after1", "after2"], text)

    Raises:
        ContractViolation: if the sequences differ in length, or a string
            is paired with a sequence
    """
    result = source
    for needle, replacement in _pair_needles(search, replace, "substr_replace_all_ret"):
        result = _replace_all(needle, replacement, result)
    return result


def substr_remove_ret(source: str, removable: str) -> str:
    """Remove the first occurrence of removable."""
    return substr_replace_ret(removable, "", source)


def substr_remove_all_ret(source: str, removables: Needles) -> str:
    """Remove every occurrence of each removable, in order."""
    if isinstance(removables, str):
        removables = [removables]
    result = source
    for removable in removables:
        result = _replace_all(removable, "", result)
    return result


# =============================================================================
# Positional Extraction
# =============================================================================


def before_first_occurrence(source: str, whence: str) -> str:
    """
    Return everything before the first occurrence of whence.

    Example: ``before_first_occurrence("abcdef", "c") == "ab"``.
    Returns source when whence is absent or empty.
    """
    index = source.find(whence) if whence else -1
    if index < 0:
        return source
    return source[:index]


def after_last_occurrence(source: str, whence: str) -> str:
    """
    Return everything after the last occurrence of whence.

    Example: ``after_last_occurrence("abcdef", "c") == "def"``.
    Returns source when whence is absent or empty.
    """
    index = source.rfind(whence) if whence else -1
    if index < 0:
        return source
    return source[index + len(whence) :]


def substr_inverse(
    source: str, begin: str, end: Optional[str] = None, offset: int = 0
) -> str:
    """
    Extract part of source relative to marker strings.

    With only ``begin``, behaves as ``before_first_occurrence``.

    With ``begin`` and ``end``, returns the text strictly between the first
    ``begin`` and the first ``end`` that follows it. ``offset`` then shifts
    both bounds of that slice: positive moves them right, negative moves
    them left. Bounds are clamped to the source.

        substr_inverse("k=[value];", "[", "]")     == "value"
        substr_inverse("k=[value];", "[", "]", 1)  == "alue]"
        substr_inverse("k=[value];", "[", "]", -1) == "[valu"

    Returns ``""`` when either marker is absent.

    Raises:
        ContractViolation: if offset is given without end
    """
    if end is None:
        if offset:
            raise ContractViolation(
                "offset requires an end marker", operation="substr_inverse"
            )
        return before_first_occurrence(source, begin)

    begin_index = source.find(begin)
    if begin_index < 0:
        return ""
    start = begin_index + len(begin)
    stop = source.find(end, start)
    if stop < 0:
        return ""

    size = len(source)
    start = min(max(start + offset, 0), size)
    stop = min(max(stop + offset, 0), size)
    return source[start:stop]


def substr_clip(
    source: str,
    search: str,
    width: int,
    icase: bool = False,
    folding: Folding = None,
) -> str:
    """
    Return a window of ``width`` characters centred on search.

    How it works for ``substr_clip("aaa bbb ccc", "bbb", 7)``:

    1. position of "bbb" in source: 4
    2. centre of the match: 4 + len("bbb") // 2 = 5
    3. start of the window: 5 - 7 // 2 = 2
    4. start is clamped to [0, len(source) - width] = [0, 4]
    5. result: source[2:9] == "a bbb c"

    A width larger than the source returns the whole source. Returns ``""``
    when search is not found or empty.

    Raises:
        ContractViolation: if width is negative
    """
    if width < 0:
        raise ContractViolation(
            f"width must not be negative, got {width}", operation="substr_clip"
        )
    if not search:
        return ""

    if icase:
        index = compare(source, search, folding)
        if index == NPOS:
            return ""
    else:
        index = source.find(search)
        if index < 0:
            return ""

    center = index + len(search) // 2
    start = center - width // 2
    start = max(0, min(start, max(0, len(source) - width)))
    return source[start : start + width]


# =============================================================================
# Case / Whitespace / Misc
# =============================================================================


def to_lower_case(s: str) -> str:
    """Convert to lowercase."""
    return s.lower()


def to_upper_case(s: str) -> str:
    """Convert to uppercase."""
    return s.upper()


def trim(s: str, chars: Optional[str] = None) -> str:
    """Remove leading and trailing whitespace (or the given characters)."""
    return s.strip(chars)


def trim_left(s: str, chars: Optional[str] = None) -> str:
    """Remove leading whitespace (or the given characters)."""
    return s.lstrip(chars)


def trim_right(s: str, chars: Optional[str] = None) -> str:
    """Remove trailing whitespace (or the given characters)."""
    return s.rstrip(chars)


def repeat(text: str, n: int = 1) -> str:
    """Repeat text n times."""
    if n < 0:
        raise ContractViolation(f"count must not be negative, got {n}", operation="repeat")
    return text * n


def format(template: str, *args) -> str:
    """
    Format a printf-style template.

    Example: ``format("%s has %d items", "cart", 3) == "cart has 3 items"``.

    Raises:
        ContractViolation: if the arguments do not match the template
    """
    try:
        return template % args
    except (TypeError, ValueError, KeyError) as e:
        raise ContractViolation(str(e), operation="format") from e


def read_stream(stream: IO[str]) -> str:
    """Read a text stream to exhaustion."""
    return stream.read()

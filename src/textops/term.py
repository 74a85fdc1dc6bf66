"""
textops - Terminal Prompts.

Blocking prompt helpers that read from and write to caller-supplied text
streams (``sys.stdin`` / ``sys.stdout`` by default):

    confirm("Overwrite file?")                  # [y/N]
    prompt("Name", required=True)
    prompt("Port", default="8080")
    prompt_password("Password", mask="*")

Any stream with ``readline``/``read`` and ``write`` works, which is how the
tests drive these functions with ``io.StringIO``. A closed stream or end of
input raises ``PromptIOError``; the only retry is asking again after an
empty (required) or unrecognised (confirm) answer.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import IO, Iterator, List, Optional

try:
    import termios

    HAS_TERMIOS = True
except ImportError:
    # termios is POSIX only; echo cannot be suppressed elsewhere
    HAS_TERMIOS = False

from textops.config import PromptConfig
from textops.folding import resolve_folding
from textops.strings import equals_icase
from textops.utils.errors import ContractViolation, PromptIOError

logger = logging.getLogger(__name__)

_BACKSPACE = ("\x7f", "\b")
_NEWLINE = ("\n", "\r")


# =============================================================================
# Stream Helpers
# =============================================================================


def _is_tty(stream: IO[str]) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


def _write(stream: IO[str], text: str, operation: str) -> None:
    try:
        stream.write(text)
        stream.flush()
    except (OSError, ValueError) as e:
        raise PromptIOError(f"failed to write prompt: {e}", operation=operation) from e


def _readline(stream: IO[str], operation: str) -> str:
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise PromptIOError(f"failed to read answer: {e}", operation=operation) from e
    if not line:
        raise PromptIOError("end of input", operation=operation)
    return line.rstrip("\r\n")


def _read_char(stream: IO[str], operation: str) -> str:
    try:
        return stream.read(1)
    except (OSError, ValueError) as e:
        raise PromptIOError(f"failed to read answer: {e}", operation=operation) from e


def _label(message: str) -> str:
    return message.rstrip().rstrip(":")


# =============================================================================
# Echo Control
# =============================================================================


def _set_mode(fd: int, attrs: list) -> None:
    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, attrs)
    except termios.error as e:
        raise PromptIOError(
            f"cannot set terminal mode: {e}", operation="echo_suppressed"
        ) from e


@contextmanager
def echo_suppressed(stream: Optional[IO[str]] = None, canonical: bool = True) -> Iterator[bool]:
    """
    Disable terminal echo on ``stream`` for the duration of the block.

    The saved terminal attributes are restored on every exit path,
    including exceptions and ``KeyboardInterrupt``. With ``canonical=False``
    line buffering is switched off as well, so input arrives one character
    at a time.

    Yields:
        True if echo was suppressed, False when the stream is not a
        terminal (or termios is unavailable) and nothing was changed
    """
    if stream is None:
        stream = sys.stdin

    if not HAS_TERMIOS or not _is_tty(stream):
        yield False
        return

    fd = stream.fileno()
    try:
        saved = termios.tcgetattr(fd)
    except termios.error as e:
        raise PromptIOError(
            f"cannot read terminal mode: {e}", operation="echo_suppressed"
        ) from e
    attrs = list(saved)
    attrs[6] = list(saved[6])
    attrs[3] &= ~termios.ECHO
    if not canonical:
        attrs[3] &= ~termios.ICANON
        attrs[6][termios.VMIN] = 1
        attrs[6][termios.VTIME] = 0

    _set_mode(fd, attrs)
    logger.debug(f"Terminal echo disabled on fd {fd}")
    try:
        yield True
    finally:
        _set_mode(fd, saved)
        logger.debug(f"Terminal mode restored on fd {fd}")


# =============================================================================
# Prompts
# =============================================================================


def confirm(
    message: str,
    default: bool = False,
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    config: Optional[PromptConfig] = None,
) -> bool:
    """
    Ask a yes/no question.

    Writes ``"<message> [y/N]: "`` (``[Y/n]`` when default is True) and
    reads one line. An empty answer returns ``default``. The answer is
    matched case-insensitively against ``config.yes_tokens`` ({y, yes})
    and ``config.no_tokens`` ({n, no}); anything else asks again.

    Raises:
        PromptIOError: if the input stream is closed or exhausted
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    config = PromptConfig() if config is None else config
    fold = resolve_folding(config.folding)
    hint = "Y/n" if default else "y/N"

    while True:
        _write(stdout, f"{_label(message)} [{hint}]: ", "confirm")
        answer = _readline(stdin, "confirm").strip()
        if not answer:
            return default
        if any(equals_icase(answer, token, fold) for token in config.yes_tokens):
            return True
        if any(equals_icase(answer, token, fold) for token in config.no_tokens):
            return False
        logger.debug(f"Unrecognised answer {answer!r}, asking again")


def prompt(
    message: str,
    required: bool = False,
    default: str = "",
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
) -> str:
    """
    Ask for a line of text.

    Writes ``"<message>: "`` (or ``"<message> [<default>]: "``) and reads
    one line without its trailing newline. An empty answer returns
    ``default`` when one is set. Otherwise a required prompt asks again
    until it gets a non-empty answer, and an optional one returns ``""``.

    Raises:
        PromptIOError: if the input stream is closed or exhausted
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    text = f"{_label(message)} [{default}]: " if default else f"{_label(message)}: "

    while True:
        _write(stdout, text, "prompt")
        answer = _readline(stdin, "prompt")
        if answer:
            return answer
        if default:
            return default
        if not required:
            return ""
        logger.debug("Empty answer to a required prompt, asking again")


def _skip_linefeed(stream: IO[str]) -> None:
    # drop the "\n" of a "\r\n" pair; only non-terminal seekable streams rewind
    if _is_tty(stream) or not getattr(stream, "seekable", lambda: False)():
        return
    position = stream.tell()
    if _read_char(stream, "prompt_password") != "\n":
        stream.seek(position)


def _read_masked(stdin: IO[str], stdout: IO[str], mask: str, max_len: int) -> str:
    chars: List[str] = []
    while True:
        ch = _read_char(stdin, "prompt_password")
        if not ch:
            if not chars:
                raise PromptIOError("end of input", operation="prompt_password")
            break
        if ch in _NEWLINE:
            if ch == "\r":
                _skip_linefeed(stdin)
            break
        if ch in _BACKSPACE:
            if chars:
                chars.pop()
                _write(stdout, "\b \b", "prompt_password")
            continue
        if len(chars) < max_len:
            chars.append(ch)
            _write(stdout, mask, "prompt_password")
    _write(stdout, "\n", "prompt_password")
    return "".join(chars)


def prompt_password(
    message: str,
    max_len: Optional[int] = None,
    mask: Optional[str] = None,
    *,
    stdin: Optional[IO[str]] = None,
    stdout: Optional[IO[str]] = None,
    config: Optional[PromptConfig] = None,
) -> str:
    """
    Ask for a password without echoing it.

    Without a mask the line is read with echo disabled. With a mask the
    terminal is switched to character mode, each accepted character echoes
    ``mask`` and backspace erases the last one. At most ``max_len``
    characters are kept. Both default to the values in ``config``.

    Raises:
        PromptIOError: if the input stream is closed or exhausted, or the
            terminal mode cannot be changed
        ContractViolation: if max_len is not positive
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    config = PromptConfig() if config is None else config
    max_len = config.password_max_len if max_len is None else max_len
    mask = config.password_mask if mask is None else mask
    if max_len <= 0:
        raise ContractViolation(
            f"max_len must be positive, got {max_len}", operation="prompt_password"
        )

    _write(stdout, f"{_label(message)}: ", "prompt_password")

    if mask:
        with echo_suppressed(stdin, canonical=False):
            return _read_masked(stdin, stdout, mask, max_len)

    with echo_suppressed(stdin) as suppressed:
        answer = _readline(stdin, "prompt_password")
    if suppressed:
        # the user's newline was not echoed
        _write(stdout, "\n", "prompt_password")
    return answer[:max_len]

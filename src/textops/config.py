"""
textops - Prompt Configuration.

``PromptConfig`` holds the settings used by ``textops.term``. Defaults can
be overridden from the environment:

    TEXTOPS_YES_TOKENS        comma separated affirmative answers (y,yes)
    TEXTOPS_NO_TOKENS         comma separated negative answers (n,no)
    TEXTOPS_PASSWORD_MAX_LEN  maximum password length (32)
    TEXTOPS_PASSWORD_MASK     character echoed per password keystroke
    TEXTOPS_FOLDING           folding used to match answers (upper)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from textops.folding import FOLDINGS
from textops.utils.errors import ConfigError

ENV_PREFIX = "TEXTOPS_"


def _parse_tokens(raw: str, key: str) -> tuple[str, ...]:
    tokens = tuple(token.strip().lower() for token in raw.split(",") if token.strip())
    if not tokens:
        raise ConfigError("expected at least one token", key=key)
    return tokens


@dataclass(frozen=True)
class PromptConfig:
    """
    Settings for the terminal prompts.

    Attributes:
        yes_tokens: Answers accepted as "yes" by confirm()
        no_tokens: Answers accepted as "no" by confirm()
        password_max_len: Characters kept from a password answer
        password_mask: Character echoed per keystroke, or None for no echo
        folding: Name of the folding used to match confirm() answers
    """

    yes_tokens: tuple[str, ...] = ("y", "yes")
    no_tokens: tuple[str, ...] = ("n", "no")
    password_max_len: int = 32
    password_mask: Optional[str] = None
    folding: str = "upper"

    def __post_init__(self) -> None:
        if self.folding not in FOLDINGS:
            raise ConfigError(f"unknown folding '{self.folding}'", key="folding")
        # confirm() matches answers per folded character
        fold = FOLDINGS[self.folding]
        folded_no = {"".join(fold(ch) for ch in token) for token in self.no_tokens}
        overlap = {
            token
            for token in self.yes_tokens
            if "".join(fold(ch) for ch in token) in folded_no
        }
        if overlap:
            raise ConfigError(
                f"tokens cannot mean both yes and no: {', '.join(sorted(overlap))}",
                key="tokens",
            )
        if self.password_max_len <= 0:
            raise ConfigError("must be positive", key="password_max_len")
        if self.password_mask is not None and len(self.password_mask) != 1:
            raise ConfigError("must be a single character", key="password_mask")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> PromptConfig:
        """Build a configuration from ``TEXTOPS_*`` environment variables."""
        env = os.environ if environ is None else environ
        config = cls()
        changes: dict[str, object] = {}

        raw = env.get(ENV_PREFIX + "YES_TOKENS")
        if raw is not None:
            changes["yes_tokens"] = _parse_tokens(raw, "yes_tokens")

        raw = env.get(ENV_PREFIX + "NO_TOKENS")
        if raw is not None:
            changes["no_tokens"] = _parse_tokens(raw, "no_tokens")

        raw = env.get(ENV_PREFIX + "PASSWORD_MAX_LEN")
        if raw is not None:
            try:
                changes["password_max_len"] = int(raw)
            except ValueError:
                raise ConfigError(f"not an integer: {raw!r}", key="password_max_len") from None

        raw = env.get(ENV_PREFIX + "PASSWORD_MASK")
        if raw:
            changes["password_mask"] = raw

        raw = env.get(ENV_PREFIX + "FOLDING")
        if raw:
            changes["folding"] = raw.strip().lower()

        return replace(config, **changes) if changes else config

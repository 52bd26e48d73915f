"""Runtime configuration helpers for environment-driven flags."""
from __future__ import annotations

import os
from typing import Final


def env_flag(name: str, *, default: bool = False) -> bool:
    """Return a boolean flag from environment variables.

    The helper treats common truthy values (``1``, ``true``, ``yes``, ``on``)
    as ``True`` and common falsy ones (``0``, ``false``, ``no``, ``off``) as
    ``False``.  If the variable is unset or contains an unrecognised value, the
    provided ``default`` is used.
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off"}:
        return False
    return default


def env_int(name: str, *, default: int) -> int:
    """Return a positive integer from the environment, ``default`` otherwise."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


STRICT_PARSING: Final[bool] = env_flag("MINES_STRICT", default=True)
REJECT_UNKNOWN: Final[bool] = env_flag("MINES_REJECT_UNKNOWN", default=False)
MAX_BOARD_BYTES: Final[int] = env_int("MINES_MAX_BOARD_BYTES", default=1_000_000)

__all__ = [
    "MAX_BOARD_BYTES",
    "REJECT_UNKNOWN",
    "STRICT_PARSING",
    "env_flag",
    "env_int",
]

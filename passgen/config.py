"""Runtime configuration for passgen.

Constants below are the defaults of the generator form.  A couple of them can
be overridden from the environment.
"""

import logging
import os

# ── Length bounds ──────────────────────────────────────────────────────────

MIN_LENGTH = 8
MAX_LENGTH = 32


def clamp_length(length: int) -> int:
    """Clamp *length* into ``[MIN_LENGTH, MAX_LENGTH]``."""
    return min(MAX_LENGTH, max(MIN_LENGTH, length))


def _env_length(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return clamp_length(int(raw))
    except ValueError:
        return default


DEFAULT_LENGTH = _env_length("PASSGEN_DEFAULT_LENGTH", 16)

# ── UI ─────────────────────────────────────────────────────────────────────

# Seconds the "copied" indicator stays on after a copy.
COPIED_RESET_SECONDS = 2.0

# ── Logging ────────────────────────────────────────────────────────────────


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


LOG_LEVEL = _env_log_level("PASSGEN_LOG_LEVEL", "WARNING")

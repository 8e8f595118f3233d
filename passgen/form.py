"""State of the generator form and the transitions that change it.

The form holds one set of options, the password generated from them, its
strength label and a "copied" indicator.  Every function here takes a
:class:`FormState` and returns a new one; nothing is mutated in place.
Accepting a new configuration always regenerates the password and strength
in the same step, so the three values never drift apart.
"""

import dataclasses
import logging
import re
from dataclasses import dataclass

from passgen import (
    DEFAULT_OPTIONS,
    PasswordOptions,
    StrengthLabel,
    classify_strength,
    generate_password,
)
from passgen.config import COPIED_RESET_SECONDS, MIN_LENGTH, clamp_length

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormState:
    options: PasswordOptions
    password: str
    strength: StrengthLabel
    copied: bool = False
    copied_at: float | None = None


def _build(options: PasswordOptions, previous: FormState | None = None) -> FormState:
    # The copied indicator runs on its own clock and survives regeneration.
    password = generate_password(options)
    return FormState(
        options=options,
        password=password,
        strength=classify_strength(password, options),
        copied=previous.copied if previous else False,
        copied_at=previous.copied_at if previous else None,
    )


def initial_state(options: PasswordOptions = DEFAULT_OPTIONS) -> FormState:
    return _build(options)


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_length(raw) -> int:
    """Parse free-text length input, falling back to the minimum.

    Reads the leading integer and ignores anything after it, so ``"12.5"``
    gives 12 and ``"20abc"`` gives 20.  Input without a leading integer, or
    a zero, becomes the minimum length.  The result is clamped.
    """
    match = _LEADING_INT.match(str(raw))
    value = int(match.group(1)) if match else 0
    return clamp_length(value or MIN_LENGTH)


def change_option(state: FormState, key: str, value) -> FormState:
    """Apply one option change and regenerate.

    A change that would disable every character class is ignored and the
    given *state* is returned as is.
    """
    if key not in PasswordOptions.field_names():
        raise KeyError(f"Unknown option: {key!r}")

    if key == "length":
        value = clamp_length(int(value))
    else:
        value = bool(value)

    options = dataclasses.replace(state.options, **{key: value})
    if options.variety_count == 0:
        logger.info("Ignoring %s=%r: at least one character class is required", key, value)
        return state

    return _build(options, state)


def regenerate(state: FormState) -> FormState:
    """Draw a fresh password for the current options."""
    return _build(state.options, state)


def mark_copied(state: FormState, now: float) -> FormState:
    if not state.password:
        return state
    return dataclasses.replace(state, copied=True, copied_at=now)


def expire_copied(state: FormState, now: float) -> FormState:
    """Turn the copied indicator off once it has been shown long enough."""
    if not state.copied or state.copied_at is None:
        return state
    if now - state.copied_at < COPIED_RESET_SECONDS:
        return state
    return dataclasses.replace(state, copied=False, copied_at=None)

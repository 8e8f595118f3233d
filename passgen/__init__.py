"""passgen -- random password generator.

Core functions for building a password from selected character classes and
rating the result with a coarse strength label.
"""

import enum
import logging
import secrets
import string
from dataclasses import dataclass, fields

from passgen.config import DEFAULT_LENGTH

logger = logging.getLogger(__name__)


class PassgenError(Exception):
    """Base class for passgen errors."""


# ── Character classes ──────────────────────────────────────────────────────

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Fixed concatenation order of the alphabet.
CHARACTER_CLASSES = (
    ("uppercase", UPPERCASE),
    ("lowercase", LOWERCASE),
    ("numbers", NUMBERS),
    ("symbols", SYMBOLS),
)


@dataclass(frozen=True)
class PasswordOptions:
    length: int = DEFAULT_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    numbers: bool = True
    symbols: bool = False

    @property
    def variety_count(self) -> int:
        """Number of enabled character classes (0-4)."""
        return sum(getattr(self, name) for name, _ in CHARACTER_CLASSES)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


DEFAULT_OPTIONS = PasswordOptions()


# ── Password generation ────────────────────────────────────────────────────


def build_alphabet(options: PasswordOptions) -> str:
    """Concatenate the characters of every enabled class, in fixed order."""
    return "".join(chars for name, chars in CHARACTER_CLASSES if getattr(options, name))


def generate_password(options: PasswordOptions) -> str:
    """Generate a random password for *options*.

    Every character is drawn independently and uniformly from the alphabet
    of enabled classes, so repeats are allowed.  Uses :mod:`secrets` as the
    random source.  Returns ``""`` when no class is enabled.
    """
    alphabet = build_alphabet(options)
    if not alphabet:
        return ""

    logger.debug(
        "Generating %d characters from a %d-character alphabet",
        options.length, len(alphabet),
    )
    return "".join(secrets.choice(alphabet) for _ in range(options.length))


# ── Strength classification ────────────────────────────────────────────────


class StrengthLabel(str, enum.Enum):
    NONE = "None"
    WEAK = "Weak"
    MEDIUM = "Medium"
    STRONG = "Strong"

    @property
    def color(self) -> str:
        return _STRENGTH_COLORS[self]


_STRENGTH_COLORS = {
    StrengthLabel.NONE: "#e5e7eb",
    StrengthLabel.WEAK: "#ef4444",
    StrengthLabel.MEDIUM: "#eab308",
    StrengthLabel.STRONG: "#22c55e",
}


def classify_strength(password: str, options: PasswordOptions) -> StrengthLabel:
    """Rate *password* from its length and the number of enabled classes.

    The first matching rule wins:
        length >= 16 and 3+ classes  -- Strong
        length >= 12 and 2+ classes  -- Medium
        anything else                -- Weak
    An empty password has no strength.
    """
    if not password:
        return StrengthLabel.NONE

    length = len(password)
    variety = options.variety_count

    if length >= 16 and variety >= 3:
        return StrengthLabel.STRONG
    if length >= 12 and variety >= 2:
        return StrengthLabel.MEDIUM
    return StrengthLabel.WEAK


def options_from_password(password: str) -> PasswordOptions:
    """Infer the options an existing *password* could have been built with.

    A class counts as enabled when at least one character of the password
    belongs to it.  Characters outside every class are ignored.
    """
    used = {
        name: any(c in chars for c in password)
        for name, chars in CHARACTER_CLASSES
    }
    return PasswordOptions(length=len(password), **used)

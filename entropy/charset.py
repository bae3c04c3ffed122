"""Character set estimation.

Classifies the characters of a password into five categories and sums
the alphabet size contributed by each category that is present.
"""

import re
from enum import Enum

from entropy.config import (
    LOWERCASE_WEIGHT,
    UPPERCASE_WEIGHT,
    DIGIT_WEIGHT,
    COMMON_SPECIAL_WEIGHT,
    OTHER_SYMBOL_WEIGHT,
)


class CharacterClass(Enum):
    """Character categories with their alphabet size contribution."""
    LOWERCASE = ("lowercase", LOWERCASE_WEIGHT)
    UPPERCASE = ("uppercase", UPPERCASE_WEIGHT)
    DIGIT = ("digit", DIGIT_WEIGHT)
    COMMON_SPECIAL = ("common-special", COMMON_SPECIAL_WEIGHT)
    OTHER_SYMBOL = ("other-symbol", OTHER_SYMBOL_WEIGHT)

    def __init__(self, label: str, weight: int):
        self.label = label
        self.weight = weight


# Presence patterns, ASCII ranges only
_CLASS_PATTERNS = {
    CharacterClass.LOWERCASE: re.compile(r"[a-z]"),
    CharacterClass.UPPERCASE: re.compile(r"[A-Z]"),
    CharacterClass.DIGIT: re.compile(r"[0-9]"),
    CharacterClass.COMMON_SPECIAL: re.compile(r"[._!\- @*#/&]"),
    CharacterClass.OTHER_SYMBOL: re.compile(r"[^a-zA-Z0-9._!\- @*#/&]"),
}


def detect_classes(password: str) -> frozenset[CharacterClass]:
    """Return the character classes with at least one occurrence in password."""
    return frozenset(
        char_class
        for char_class, pattern in _CLASS_PATTERNS.items()
        if pattern.search(password)
    )


def alphabet_size(password: str) -> int:
    """Estimate the alphabet size a password was drawn from.

    Classes are additive: each class present contributes its fixed weight,
    regardless of how many of its characters the password actually uses.

    Args:
        password: Password to inspect (may be empty)

    Returns:
        Alphabet size between 0 and 94
    """
    return sum(char_class.weight for char_class in detect_classes(password))

"""Entropy penalty pipeline.

A penalty function takes the current entropy and the password and returns
an adjusted entropy. Functions are applied in order, each one receiving
the result of the previous one. The two built-ins always run first:

1. structural_penalty - penalizes common human-chosen structures
2. blacklist penalty - replaces entropy for known-weak passwords

Caller-supplied functions run after them in the order given. They must be
pure; anything they raise propagates to the caller unchanged.
"""

import re
from typing import Callable, Iterable, Optional

from entropy.blacklist import BlacklistStore
from entropy.config import STRUCTURE_PENALTY_BITS


PenaltyFunction = Callable[[float, str], float]

_LETTERS_THEN_DIGITS = re.compile(r"[a-zA-Z]+[0-9]{1,3}")
_CAPITALIZED_WORD = re.compile(r"[A-Z][a-z]+")
_LETTERS_THEN_SYMBOL = re.compile(r"[a-zA-Z]+[^a-zA-Z0-9]")


def is_letters_then_digits(password: str) -> bool:
    """Only letters followed by 1 to 3 digits, e.g. 'monkey12'."""
    return _LETTERS_THEN_DIGITS.fullmatch(password) is not None


def is_capitalized_word(password: str) -> bool:
    """A single uppercase letter followed by lowercase letters, e.g. 'Monkey'."""
    return _CAPITALIZED_WORD.fullmatch(password) is not None


def is_letters_then_symbol(password: str) -> bool:
    """Only letters followed by a single special character, e.g. 'monkey!'."""
    return _LETTERS_THEN_SYMBOL.fullmatch(password) is not None


def matches_weak_structure(password: str) -> bool:
    """Check password against all weak structure predicates."""
    return (
        is_letters_then_digits(password)
        or is_capitalized_word(password)
        or is_letters_then_symbol(password)
    )


def structural_penalty(entropy: float, password: str) -> float:
    """Subtract a flat penalty once if any weak structure matches."""
    if matches_weak_structure(password):
        return entropy - STRUCTURE_PENALTY_BITS
    return entropy


def make_blacklist_penalty(store: BlacklistStore) -> PenaltyFunction:
    """Create the blacklist penalty bound to a store.

    A blacklisted password is guessable in one of len(store) attempts, so
    its entropy is replaced with log2(len(store)), whatever it was before.
    That value can be higher than the incoming entropy.
    """
    def blacklist_penalty(entropy: float, password: str) -> float:
        if len(store) == 0 or not store.contains(password):
            return entropy
        return store.guess_entropy()

    return blacklist_penalty


def build_pipeline(
    store: BlacklistStore,
    extra: Optional[Iterable[PenaltyFunction]] = None
) -> tuple[PenaltyFunction, ...]:
    """Assemble built-in penalties followed by caller-supplied ones."""
    return (structural_penalty, make_blacklist_penalty(store)) + tuple(extra or ())


def apply_penalties(
    pipeline: Iterable[PenaltyFunction],
    entropy: float,
    password: str
) -> float:
    """Run entropy through each penalty function in order."""
    for penalty in pipeline:
        entropy = penalty(entropy, password)
    return entropy

"""Blacklist of known-weak passwords.

The store is the default corpus followed by caller-supplied entries, in
that order. Lookups are exact and case-insensitive; there is no substring
or fuzzy matching.
"""

import math
from typing import Iterable, Optional

from entropy.corpus import DEFAULT_BLACKLIST


class BlacklistStore:
    """Immutable, ordered collection of blacklisted passwords.

    Duplicates are kept and count towards the store size, since the size
    is what the blacklist penalty uses as the number of guesses.
    """

    __slots__ = ("_entries", "_lookup")

    def __init__(self, entries: Iterable[str] = ()):
        self._entries: tuple[str, ...] = tuple(entries)
        self._lookup: frozenset[str] = frozenset(entry.lower() for entry in self._entries)

    @classmethod
    def build(cls, extra: Optional[Iterable[str]] = None) -> "BlacklistStore":
        """Build a store from the default corpus plus extra entries."""
        return cls(DEFAULT_BLACKLIST + tuple(extra or ()))

    @property
    def entries(self) -> tuple[str, ...]:
        return self._entries

    def contains(self, password: str) -> bool:
        """Check whether the lowercased password is blacklisted."""
        return password.lower() in self._lookup

    def guess_entropy(self) -> float:
        """Entropy of a password known to be one of the entries."""
        return math.log2(len(self._entries))

    def __contains__(self, password: object) -> bool:
        return isinstance(password, str) and self.contains(password)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"BlacklistStore(size={len(self._entries)})"

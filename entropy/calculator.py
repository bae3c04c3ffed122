"""Base entropy calculation."""

import math

from entropy.charset import alphabet_size


def base_entropy(size: int, length: int) -> float:
    """Entropy in bits of a random string of given length over an alphabet.

    Computed as length * log2(size) rather than log2(size ** length) so very
    long passwords don't overflow. An empty password has exactly 0 bits.

    Args:
        size: Alphabet size
        length: Password length

    Returns:
        Entropy in bits before any penalties
    """
    if length == 0 or size <= 1:
        return 0.0
    return length * math.log2(size)


def password_base_entropy(password: str) -> float:
    """Base entropy of a password from its estimated alphabet size."""
    return base_entropy(alphabet_size(password), len(password))

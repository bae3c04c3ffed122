"""Strength tier classification.

Maps a final entropy value to one of six ordered tiers using fixed
thresholds. Tier 0 has no lower bound and catches everything below 40 bits,
including negative values produced by penalties.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from entropy.config import TIER_THRESHOLDS, TIER_COUNT, DEFAULT_STRINGS, DEFAULT_CLASSES


@dataclass(frozen=True)
class StrengthTier:
    index: int
    label: str
    style_class: str
    lower_bound: float

    def as_dict(self) -> dict:
        return {
            "index": self.index,
            "label": self.label,
            "style_class": self.style_class,
            "lower_bound": None if math.isinf(self.lower_bound) else self.lower_bound,
        }


def _lower_bound(index: int) -> float:
    return -math.inf if index == 0 else float(TIER_THRESHOLDS[index - 1])


def build_tiers(
    strings: Sequence[str] = DEFAULT_STRINGS,
    classes: Sequence[str] = DEFAULT_CLASSES
) -> tuple[StrengthTier, ...]:
    """Build the ordered tier table from parallel label and class lists.

    Raises:
        ValueError: If strings or classes don't have exactly one entry per tier
    """
    if len(strings) != TIER_COUNT:
        raise ValueError(f"Expected {TIER_COUNT} tier strings, got {len(strings)}")
    if len(classes) != TIER_COUNT:
        raise ValueError(f"Expected {TIER_COUNT} tier classes, got {len(classes)}")

    return tuple(
        StrengthTier(index, label, style_class, _lower_bound(index))
        for index, (label, style_class) in enumerate(zip(strings, classes))
    )


def classify(entropy: float) -> int:
    """Return the tier index for an entropy value in bits."""
    for index in range(TIER_COUNT - 1, 0, -1):
        if entropy >= TIER_THRESHOLDS[index - 1]:
            return index
    return 0


def select_tier(tiers: Sequence[StrengthTier], entropy: float) -> StrengthTier:
    """Return the tier from a tier table matching an entropy value."""
    return tiers[classify(entropy)]


DEFAULT_TIERS: tuple[StrengthTier, ...] = build_tiers()

"""Scoring engine.

Orchestrates character set estimation, base entropy, the penalty pipeline
and tier classification into a single call. Configuration is an immutable
value built once; evaluation is a pure function of (password, config) and
is safe to run from many threads at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from entropy.blacklist import BlacklistStore
from entropy.calculator import base_entropy
from entropy.charset import alphabet_size
from entropy.config import DEFAULT_STRINGS, DEFAULT_CLASSES, DEFAULT_DISPLAY
from entropy.penalties import PenaltyFunction, apply_penalties, build_pipeline
from entropy.tiers import StrengthTier, build_tiers, select_tier


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntropyConfig:
    """Immutable scoring configuration.

    Attributes:
        tiers: Six ordered tiers carrying labels and style classes
        functions: Caller-supplied penalty functions, run after the built-ins
        blacklist: Default corpus followed by caller entries
        display: Opaque render target for presentation layers
    """
    tiers: tuple[StrengthTier, ...] = field(default_factory=build_tiers)
    functions: tuple[PenaltyFunction, ...] = ()
    blacklist: BlacklistStore = field(default_factory=BlacklistStore.build)
    display: str = DEFAULT_DISPLAY

    @property
    def strings(self) -> tuple[str, ...]:
        return tuple(tier.label for tier in self.tiers)

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(tier.style_class for tier in self.tiers)


def build_config(
    strings: Optional[Sequence[str]] = None,
    classes: Optional[Sequence[str]] = None,
    functions: Optional[Iterable[PenaltyFunction]] = None,
    blacklist: Optional[Iterable[str]] = None,
    display: Optional[str] = None
) -> EntropyConfig:
    """Merge caller options with defaults into an immutable config.

    strings, classes and display replace the defaults. functions and
    blacklist are appended after the built-in penalties and the default
    corpus respectively.

    Raises:
        ValueError: If strings or classes don't have six entries
    """
    return EntropyConfig(
        tiers=build_tiers(
            DEFAULT_STRINGS if strings is None else tuple(strings),
            DEFAULT_CLASSES if classes is None else tuple(classes),
        ),
        functions=tuple(functions or ()),
        blacklist=BlacklistStore.build(blacklist),
        display=DEFAULT_DISPLAY if display is None else display,
    )


@dataclass(frozen=True)
class ScoreResult:
    entropy_bits: float
    tier: StrengthTier
    base_bits: float
    alphabet_size: int

    @property
    def tier_index(self) -> int:
        return self.tier.index

    def as_evaluation(self) -> "Evaluation":
        return Evaluation(
            entropy_bits=self.entropy_bits,
            tier_index=self.tier.index,
            label=self.tier.label,
            style_class=self.tier.style_class,
        )


@dataclass(frozen=True)
class Evaluation:
    """Result handed to presentation layers."""
    entropy_bits: float
    tier_index: int
    label: str
    style_class: str

    def as_dict(self) -> dict:
        return {
            "entropyBits": self.entropy_bits,
            "tierIndex": self.tier_index,
            "label": self.label,
            "styleClass": self.style_class,
        }


class ScoringEngine:
    """Scores passwords against a fixed configuration."""

    def __init__(self, config: Optional[EntropyConfig] = None):
        self.config = config or EntropyConfig()
        self.pipeline: tuple[PenaltyFunction, ...] = build_pipeline(
            self.config.blacklist, self.config.functions
        )
        logger.debug(
            "Scoring engine ready: %d penalty functions, %d blacklist entries",
            len(self.pipeline),
            len(self.config.blacklist),
        )

    def score(self, password: str) -> ScoreResult:
        size = alphabet_size(password)
        base = base_entropy(size, len(password))
        entropy = apply_penalties(self.pipeline, base, password)
        return ScoreResult(
            entropy_bits=entropy,
            tier=select_tier(self.config.tiers, entropy),
            base_bits=base,
            alphabet_size=size,
        )

    def evaluate(self, password: str) -> Evaluation:
        return self.score(password).as_evaluation()


_default_engine: Optional[ScoringEngine] = None


def get_default_engine() -> ScoringEngine:
    """Return a shared engine built from the default config."""
    global _default_engine
    if _default_engine is None:
        _default_engine = ScoringEngine()
    return _default_engine


def _engine_for(config: Optional[EntropyConfig]) -> ScoringEngine:
    if config is None:
        return get_default_engine()
    return ScoringEngine(config)


def score(password: str, config: Optional[EntropyConfig] = None) -> ScoreResult:
    """Score a password, returning entropy and the selected tier."""
    return _engine_for(config).score(password)


def evaluate(password: str, config: Optional[EntropyConfig] = None) -> Evaluation:
    """Evaluate a password into entropy, tier index, label and style class."""
    return _engine_for(config).evaluate(password)

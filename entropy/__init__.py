"""Password Entropy Core Package.

Provides modular components for password entropy estimation:
- config: Centralized configuration constants
- charset: Character set estimation
- calculator: Base entropy calculation
- penalties: Ordered penalty pipeline and built-in heuristics
- blacklist: Known-weak password store
- tiers: Strength tier classification
- engine: Scoring engine and immutable configuration
- loader: Environment-driven configuration
- audit: Evaluation event logging
- storage: File I/O operations
"""

# Configuration constants
from entropy.config import (
    TIER_THRESHOLDS,
    DEFAULT_STRINGS,
    DEFAULT_CLASSES,
    DEFAULT_DISPLAY,
    STRUCTURE_PENALTY_BITS,
)

# Scoring components
from entropy.charset import CharacterClass, detect_classes, alphabet_size
from entropy.calculator import base_entropy, password_base_entropy
from entropy.blacklist import BlacklistStore
from entropy.penalties import (
    PenaltyFunction,
    structural_penalty,
    make_blacklist_penalty,
    build_pipeline,
    apply_penalties,
    matches_weak_structure,
)
from entropy.tiers import StrengthTier, DEFAULT_TIERS, build_tiers, classify, select_tier

# Engine
from entropy.engine import (
    EntropyConfig,
    Evaluation,
    ScoreResult,
    ScoringEngine,
    build_config,
    get_default_engine,
    score,
    evaluate,
)

# Outer-layer helpers
from entropy.loader import config_from_environment
from entropy.audit import (
    configure_logging,
    log_evaluation_event,
    get_audit_events,
    count_events_by_tier,
)

__all__ = [
    # Config
    "TIER_THRESHOLDS",
    "DEFAULT_STRINGS",
    "DEFAULT_CLASSES",
    "DEFAULT_DISPLAY",
    "STRUCTURE_PENALTY_BITS",
    # Scoring components
    "CharacterClass",
    "detect_classes",
    "alphabet_size",
    "base_entropy",
    "password_base_entropy",
    "BlacklistStore",
    "PenaltyFunction",
    "structural_penalty",
    "make_blacklist_penalty",
    "build_pipeline",
    "apply_penalties",
    "matches_weak_structure",
    "StrengthTier",
    "DEFAULT_TIERS",
    "build_tiers",
    "classify",
    "select_tier",
    # Engine
    "EntropyConfig",
    "Evaluation",
    "ScoreResult",
    "ScoringEngine",
    "build_config",
    "get_default_engine",
    "score",
    "evaluate",
    # Outer layers
    "config_from_environment",
    "configure_logging",
    "log_evaluation_event",
    "get_audit_events",
    "count_events_by_tier",
]

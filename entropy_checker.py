"""Password strength check with human-readable feedback.

Wraps the entropy engine for the CLI: returns the tier label together
with suggestions explaining which heuristics fired.
"""

from typing import Optional

from entropy import (
    CharacterClass,
    EntropyConfig,
    ScoreResult,
    ScoringEngine,
    detect_classes,
    get_default_engine,
)
from entropy.penalties import matches_weak_structure

# Tier index from which no length suggestion is given
COMFORTABLE_TIER = 3


def explain_score(password: str, result: ScoreResult, config: EntropyConfig) -> list[str]:
    """Build suggestions for a password that has already been scored.

    Args:
        password: The scored password
        result: Score of that password under config
        config: Config the score was computed with

    Returns:
        Feedback messages, empty when nothing needs improving
    """
    feedback = []

    if config.blacklist.contains(password):
        feedback.append("This is a very common password!")

    if matches_weak_structure(password):
        feedback.append(
            "Avoid a single capitalized word or letters followed by a few digits or one symbol."
        )

    classes = detect_classes(password)
    if CharacterClass.UPPERCASE not in classes:
        feedback.append("Add uppercase letters.")
    if CharacterClass.LOWERCASE not in classes:
        feedback.append("Add lowercase letters.")
    if CharacterClass.DIGIT not in classes:
        feedback.append("Add numbers.")
    if not classes & {CharacterClass.COMMON_SPECIAL, CharacterClass.OTHER_SYMBOL}:
        feedback.append("Add special characters.")

    if result.tier.index < COMFORTABLE_TIER:
        feedback.append("Use a longer password.")

    return feedback


def check_password_strength(
    password: str,
    config: Optional[EntropyConfig] = None
) -> tuple[str, list[str]]:
    """Evaluate a password and explain the result.

    Args:
        password: Password to check
        config: Optional config, defaults to the shared default engine

    Returns:
        Tuple of (tier label, feedback list)
    """
    engine = ScoringEngine(config) if config is not None else get_default_engine()
    result = engine.score(password)
    return result.tier.label, explain_score(password, result, engine.config)

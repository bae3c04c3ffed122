"""Password testing CLI flows.

Evaluates passwords entered at the terminal and shows their strength.
Live mode re-evaluates every line entered, the terminal counterpart of
updating a strength meter on each key press.
"""

import logging
from typing import Optional

from entropy import ScoringEngine, get_default_engine, log_evaluation_event
from entropy.storage import StorageError
from entropy_checker import explain_score

from cli.prompts import prompt_password, confirm_action


logger = logging.getLogger(__name__)


def display_evaluation(password: str, engine: ScoringEngine, details: bool = True) -> int:
    """Evaluate a password, print the result and log the event.

    Args:
        password: Password to evaluate
        engine: Engine to score with
        details: If True, print base entropy, alphabet size and suggestions

    Returns:
        Tier index of the password
    """
    result = engine.score(password)
    print(f"Password Strength: {result.tier.label} ({result.entropy_bits:.2f} bits)")

    if details:
        print(f"  Base entropy: {result.base_bits:.2f} bits")
        print(f"  Alphabet size: {result.alphabet_size}")
        feedback = explain_score(password, result, engine.config)
        if feedback:
            print("Suggestions:")
            for tip in feedback:
                print(f"  - {tip}")

    try:
        log_evaluation_event(result.as_evaluation(), password_length=len(password))
    except StorageError as e:
        logger.warning("Could not write audit event: %s", e)

    return result.tier.index


def test_password_flow(engine: Optional[ScoringEngine] = None) -> None:
    """Evaluate a single password entered without echo."""
    engine = engine or get_default_engine()
    print("\n--- Test a Password ---")

    password = prompt_password("Enter the password you want to test: ")
    if password is None:
        print("Canceled.")
        return

    display_evaluation(password, engine)


def live_evaluate_flow(engine: Optional[ScoringEngine] = None) -> None:
    """Re-evaluate each entered line until a blank line is entered."""
    engine = engine or get_default_engine()
    print("\n--- Live Evaluation ---")

    if not confirm_action("Passwords will be visible as you type. Continue?"):
        print("Canceled.")
        return

    print("Type a password and press Enter. Submit a blank line to stop.")
    while True:
        password = prompt_password("> ", hidden=False)
        if not password:
            break
        display_evaluation(password, engine, details=False)


def show_tier_table(engine: Optional[ScoringEngine] = None) -> None:
    """Print the strength tiers and their entropy thresholds."""
    engine = engine or get_default_engine()
    print("\n--- Strength Tiers ---")
    tiers = engine.config.tiers
    for tier in tiers:
        if tier.index == 0:
            threshold = f"< {tiers[1].lower_bound:g} bits"
        else:
            threshold = f">= {tier.lower_bound:g} bits"
        print(f"{tier.index}. {tier.label:<14} {threshold}")

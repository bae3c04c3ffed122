"""CLI package for Password Entropy.

Provides modular CLI flows for password evaluation.
"""

from cli.tester import test_password_flow, live_evaluate_flow, show_tier_table

__all__ = [
    "test_password_flow",
    "live_evaluate_flow",
    "show_tier_table",
]

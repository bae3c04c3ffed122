"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment settings can be overridden via environment variables.
"""

import os

# Character class weights (alphabet size contribution per class)
LOWERCASE_WEIGHT = 26
UPPERCASE_WEIGHT = 26
DIGIT_WEIGHT = 10
COMMON_SPECIAL_WEIGHT = 10
OTHER_SYMBOL_WEIGHT = 22

# Most common special characters based on RockYou passwords
COMMON_SPECIAL_CHARS = frozenset("._!- @*#/&")

# Flat penalty for human-chosen weak structures
STRUCTURE_PENALTY_BITS = 8

# Tier lower bounds in bits, for tiers 1..5 (tier 0 has no lower bound)
TIER_THRESHOLDS = (40, 48, 56, 66, 78)
TIER_COUNT = len(TIER_THRESHOLDS) + 1

# Default tier presentation
DEFAULT_STRINGS = ("Very weak", "Weak", "Pass", "Strong", "Very strong", "Super strong")
DEFAULT_CLASSES = ("very-weak", "weak", "pass", "strong", "very-strong", "super-strong")
DEFAULT_DISPLAY = os.environ.get("ENTROPY_DISPLAY", ".strength")

# Extra blacklist entries, one per line
BLACKLIST_FILE = os.environ.get("ENTROPY_BLACKLIST_FILE", "")

# Directories and log files
LOG_DIR = os.environ.get("LOG_DIR", "logs")
APP_LOG_FILE = os.path.join(LOG_DIR, "entropy.log")
AUDIT_LOG_FILE = os.path.join(LOG_DIR, "evaluations.jsonl")

# Log rotation
AUDIT_LOG_MAX_BYTES = int(os.environ.get("AUDIT_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
AUDIT_LOG_BACKUP_COUNT = int(os.environ.get("AUDIT_LOG_BACKUP_COUNT", 5))
AUDIT_LOG_COMPRESS = os.environ.get("AUDIT_LOG_COMPRESS", "true").lower() == "true"

# API settings
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"
EVALUATE_RATE_LIMIT = os.environ.get("EVALUATE_RATE_LIMIT", "120/minute")
# Bounds request bodies only; the scoring core has no length cap
MAX_PASSWORD_LENGTH = int(os.environ.get("MAX_PASSWORD_LENGTH", "1024"))

# Trusted proxy configuration
# Only trust X-Forwarded-For headers from these IP addresses
# Example: TRUSTED_PROXIES=10.0.0.1,10.0.0.2,172.17.0.1
_trusted_proxies_env = os.environ.get("TRUSTED_PROXIES", "")
TRUSTED_PROXIES: set[str] = set(
    ip.strip() for ip in _trusted_proxies_env.split(",") if ip.strip()
)

# Browser origins allowed to call the API, comma separated
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

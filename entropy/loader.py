"""Environment-driven configuration loading.

Builds the EntropyConfig used by the API and CLI from settings in
entropy.config. This is the only place a config is sourced from disk.
"""

import logging
from typing import Optional

from entropy.config import BLACKLIST_FILE, DEFAULT_DISPLAY
from entropy.engine import EntropyConfig, build_config
from entropy.storage import StorageError, load_lines


logger = logging.getLogger(__name__)


def load_extra_blacklist(filepath: str) -> list[str]:
    """Load extra blacklist entries, one per line, lowercased.

    Raises:
        StorageError: If the file doesn't exist or can't be read
    """
    lines = load_lines(filepath)
    if lines is None:
        raise StorageError(f"Blacklist file not found: {filepath}")
    return [line.lower() for line in lines]


def config_from_environment(blacklist_file: Optional[str] = None) -> EntropyConfig:
    """Build a config from environment settings.

    Args:
        blacklist_file: Override for ENTROPY_BLACKLIST_FILE

    Returns:
        Immutable config with any extra blacklist entries appended
    """
    path = BLACKLIST_FILE if blacklist_file is None else blacklist_file
    extra = load_extra_blacklist(path) if path else []
    if extra:
        logger.info("Loaded %d extra blacklist entries from %s", len(extra), path)
    return build_config(blacklist=extra, display=DEFAULT_DISPLAY)

"""Evaluation audit logging.

Provides structured JSON-lines logging of evaluation events, suitable for
integration with log platforms like Splunk or ELK, plus the rotating
operational log used by the API and CLI.

Passwords are never written to any log; events carry only the outcome.
Includes log rotation to prevent disk exhaustion and manage retention.
"""

import gzip
import json
import logging
import os
import shutil
from collections import deque
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Iterator, Optional

from entropy.config import (
    APP_LOG_FILE,
    AUDIT_LOG_FILE,
    AUDIT_LOG_MAX_BYTES,
    AUDIT_LOG_BACKUP_COUNT,
    AUDIT_LOG_COMPRESS,
)
from entropy.engine import Evaluation
from entropy.storage import StorageError, append_line, ensure_directory, file_exists, file_size


# Module-level state
_logging_configured = False
_rotation_lock = Lock()


def _compress_log_file(filepath: str) -> None:
    """Compress a log file using gzip and remove the original."""
    try:
        with open(filepath, 'rb') as f_in:
            with gzip.open(f"{filepath}.gz", 'wb') as f_out:
                shutil.copyfileobj(f_in, f_out)
        os.remove(filepath)
    except OSError:
        # Keep the uncompressed backup
        logging.getLogger(__name__).warning("Could not compress %s", filepath)


def _rotate_audit_log(log_file: str) -> None:
    """Rotate the audit log if it exceeds the size limit.

    Backups are shifted (log.1 -> log.2, ...), the oldest one beyond
    AUDIT_LOG_BACKUP_COUNT is dropped, and the current log becomes log.1,
    compressed when AUDIT_LOG_COMPRESS is enabled.
    """
    with _rotation_lock:
        if not file_exists(log_file) or file_size(log_file) < AUDIT_LOG_MAX_BYTES:
            return

        for ext in ["", ".gz"]:
            oldest = f"{log_file}.{AUDIT_LOG_BACKUP_COUNT}{ext}"
            if os.path.exists(oldest):
                os.remove(oldest)

        for i in range(AUDIT_LOG_BACKUP_COUNT - 1, 0, -1):
            for ext in ["", ".gz"]:
                src = f"{log_file}.{i}{ext}"
                if os.path.exists(src):
                    shutil.move(src, f"{log_file}.{i + 1}{ext}")

        backup_path = f"{log_file}.1"
        shutil.move(log_file, backup_path)
        if AUDIT_LOG_COMPRESS:
            _compress_log_file(backup_path)


def configure_logging(log_file: Optional[str] = None, level: int = logging.INFO) -> None:
    """Configure standard logging with rotation on first use."""
    global _logging_configured
    if _logging_configured:
        return

    log_file = log_file or APP_LOG_FILE
    ensure_directory(os.path.dirname(log_file))

    handler = RotatingFileHandler(
        log_file,
        maxBytes=AUDIT_LOG_MAX_BYTES,
        backupCount=AUDIT_LOG_BACKUP_COUNT,
    )
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.addHandler(handler)

    _logging_configured = True


def log_evaluation_event(
    evaluation: Evaluation,
    password_length: int,
    source: str = "cli",
    source_ip: str = "127.0.0.1",
    log_file: Optional[str] = None
) -> dict:
    """Append an evaluation event in JSON format.

    Args:
        evaluation: Result of the evaluation
        password_length: Length of the evaluated password
        source: Which surface produced the event ('api' or 'cli')
        source_ip: Client address for API events
        log_file: Override for the audit log path

    Returns:
        The event that was written
    """
    log_file = log_file or AUDIT_LOG_FILE

    # Check if rotation is needed before writing
    try:
        _rotate_audit_log(log_file)
    except OSError as e:
        raise StorageError(f"Failed to rotate {log_file}: {e}")

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": "password_evaluation",
        "tier_index": evaluation.tier_index,
        "label": evaluation.label,
        "entropy_bits": round(evaluation.entropy_bits, 2),
        "password_length": password_length,
        "source": source,
        "ip_address": source_ip,
    }

    append_line(log_file, json.dumps(event))
    return event


def _iter_log_events(filepath: str) -> Iterator[dict]:
    """Yield parsed events from a plain or gzipped log file, skipping bad lines."""
    opener = gzip.open if filepath.endswith(".gz") else open
    with opener(filepath, "rt", encoding="utf-8") as f:
        for line in f:
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                continue


def _retained_log_files(log_file: str) -> list[str]:
    """Oldest backup first, live log last; only files that exist."""
    paths = []
    for i in range(AUDIT_LOG_BACKUP_COUNT, 0, -1):
        for ext in ["", ".gz"]:
            backup = f"{log_file}.{i}{ext}"
            if file_exists(backup):
                paths.append(backup)
    if file_exists(log_file):
        paths.append(log_file)
    return paths


def get_audit_events(limit: int = 100, log_file: Optional[str] = None) -> list[dict]:
    """Read and parse the most recent events of the live audit log.

    Args:
        limit: Maximum number of events to return
        log_file: Override for the audit log path

    Returns:
        List of the most recent event dictionaries
    """
    log_file = log_file or AUDIT_LOG_FILE
    if not file_exists(log_file):
        return []

    return list(deque(_iter_log_events(log_file), maxlen=limit))


def count_events_by_tier(log_file: Optional[str] = None) -> dict[str, int]:
    """Count evaluation events grouped by tier label.

    Covers the live log and every retained backup. Events in backups
    dropped by rotation beyond AUDIT_LOG_BACKUP_COUNT are gone.
    """
    log_file = log_file or AUDIT_LOG_FILE
    counts: dict[str, int] = {}
    for path in _retained_log_files(log_file):
        for event in _iter_log_events(path):
            label = event.get("label", "UNKNOWN")
            counts[label] = counts.get(label, 0) + 1
    return counts

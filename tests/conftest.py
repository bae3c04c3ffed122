"""Shared fixtures."""

import pytest

import entropy.audit


@pytest.fixture(autouse=True)
def audit_log(tmp_path, monkeypatch):
    """Redirect the audit log to a temporary file for every test."""
    log_file = str(tmp_path / "evaluations.jsonl")
    monkeypatch.setattr(entropy.audit, "AUDIT_LOG_FILE", log_file)
    return log_file

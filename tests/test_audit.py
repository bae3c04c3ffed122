"""Tests for evaluation audit logging and config loading."""

import json
import os

import pytest

import entropy.audit
from entropy import count_events_by_tier, evaluate, get_audit_events, log_evaluation_event
from entropy.loader import config_from_environment, load_extra_blacklist
from entropy.storage import StorageError


class TestAuditLog:
    """Test JSON-lines audit events."""

    def test_event_written(self, audit_log):
        """Events are appended as JSON lines."""
        event = log_evaluation_event(evaluate("K#9zQ!2vL"), password_length=9)
        with open(audit_log, encoding="utf-8") as f:
            lines = f.readlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == event
        assert event["tier_index"] == 2
        assert event["label"] == "Pass"
        assert event["password_length"] == 9

    def test_password_never_logged(self, audit_log):
        """The password itself doesn't appear in the log."""
        log_evaluation_event(evaluate("Sup3rS3cretValue"), password_length=16)
        with open(audit_log, encoding="utf-8") as f:
            assert "Sup3rS3cretValue" not in f.read()

    def test_read_back_with_limit(self):
        """Only the most recent events are returned."""
        for password in ["a", "b", "c"]:
            log_evaluation_event(evaluate(password), password_length=1, source="api")
        events = get_audit_events(limit=2)
        assert len(events) == 2
        assert all(e["source"] == "api" for e in events)

    def test_missing_log(self, tmp_path):
        """A missing log reads as no events."""
        assert get_audit_events(log_file=str(tmp_path / "nope.jsonl")) == []

    def test_corrupted_lines_skipped(self, audit_log):
        """Lines that aren't JSON are ignored."""
        log_evaluation_event(evaluate("abc"), password_length=3)
        with open(audit_log, "a", encoding="utf-8") as f:
            f.write("not json\n")
        assert len(get_audit_events()) == 1

    def test_count_by_tier(self):
        """Counts are grouped by tier label."""
        log_evaluation_event(evaluate("Password1"), password_length=9)
        log_evaluation_event(evaluate("password"), password_length=8)
        log_evaluation_event(evaluate("K#9zQ!2vL"), password_length=9)
        assert count_events_by_tier() == {"Very weak": 2, "Pass": 1}

    @pytest.mark.parametrize("compress", [False, True])
    def test_count_includes_rotated_backups(self, monkeypatch, compress):
        """Tier counts survive rotation, whether backups are gzipped or not."""
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_MAX_BYTES", 1)
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_COMPRESS", compress)
        for _ in range(3):
            log_evaluation_event(evaluate("abc"), password_length=3)
        assert count_events_by_tier() == {"Very weak": 3}

    def test_count_has_no_event_cap(self, audit_log):
        """Every line of the live log is counted."""
        line = json.dumps({"event_type": "password_evaluation", "label": "Weak"})
        with open(audit_log, "w", encoding="utf-8") as f:
            f.write((line + "\n") * 10005)
        assert count_events_by_tier() == {"Weak": 10005}

    def test_count_drops_backups_beyond_retention(self, monkeypatch):
        """Only retained backups are counted."""
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_MAX_BYTES", 1)
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_COMPRESS", False)
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_BACKUP_COUNT", 2)
        for _ in range(5):
            log_evaluation_event(evaluate("abc"), password_length=3)
        assert count_events_by_tier() == {"Very weak": 3}

    def test_rotation(self, audit_log, monkeypatch):
        """An oversized log is moved aside before the next write."""
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_MAX_BYTES", 1)
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_COMPRESS", False)
        log_evaluation_event(evaluate("abc"), password_length=3)
        log_evaluation_event(evaluate("abd"), password_length=3)
        assert os.path.exists(f"{audit_log}.1")
        assert len(get_audit_events()) == 1

    def test_rotation_compresses(self, audit_log, monkeypatch):
        """Rotated backups are gzipped when compression is on."""
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_MAX_BYTES", 1)
        monkeypatch.setattr(entropy.audit, "AUDIT_LOG_COMPRESS", True)
        log_evaluation_event(evaluate("abc"), password_length=3)
        log_evaluation_event(evaluate("abd"), password_length=3)
        assert os.path.exists(f"{audit_log}.1.gz")
        assert not os.path.exists(f"{audit_log}.1")


class TestConfigLoader:
    """Test environment-driven config loading."""

    def test_extra_blacklist_file(self, tmp_path):
        """Entries are read one per line, lowercased, blank lines skipped."""
        path = tmp_path / "extra.txt"
        path.write_text("QuietRivers\n\n   \nbluecanyon\n", encoding="utf-8")
        assert load_extra_blacklist(str(path)) == ["quietrivers", "bluecanyon"]

        config = config_from_environment(blacklist_file=str(path))
        assert len(config.blacklist) == 600
        assert config.blacklist.contains("BLUECANYON")

    def test_surrounding_spaces_kept(self, tmp_path):
        """Spaces are part of an entry; only line endings are removed."""
        path = tmp_path / "extra.txt"
        path.write_bytes(b" open sesame \r\nquietrivers\n")
        assert load_extra_blacklist(str(path)) == [" open sesame ", "quietrivers"]

        config = config_from_environment(blacklist_file=str(path))
        assert config.blacklist.contains(" Open Sesame ")
        assert not config.blacklist.contains("open sesame")

    def test_missing_blacklist_file(self, tmp_path):
        """A configured but missing file is an error."""
        with pytest.raises(StorageError):
            config_from_environment(blacklist_file=str(tmp_path / "missing.txt"))

    def test_no_blacklist_file(self):
        """Without a file only the default corpus is used."""
        assert len(config_from_environment(blacklist_file="").blacklist) == 598

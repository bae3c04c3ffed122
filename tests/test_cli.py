"""Tests for the interactive CLI flows."""

import pytest

import cli.tester as tester
from entropy import ScoringEngine, build_config, get_audit_events
from entropyapp import main_menu


def feed_input(monkeypatch, answers):
    """Replace input() with a scripted sequence of answers."""
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def engine():
    return ScoringEngine()


class TestTesterFlows:
    """Test password testing flows."""

    def test_single_password(self, monkeypatch, capsys, engine):
        """A hidden password is evaluated and explained."""
        monkeypatch.setattr("getpass.getpass", lambda prompt="": "Password1")
        tester.test_password_flow(engine)
        out = capsys.readouterr().out
        assert "Password Strength: Very weak" in out
        assert "Alphabet size: 62" in out
        assert "common" in out

    def test_detailed_display_scores_once(self, capsys):
        """Details, suggestions and the audit event reuse a single score."""
        calls = []

        def counting(entropy, password):
            calls.append(password)
            return entropy

        engine = ScoringEngine(build_config(functions=[counting]))
        tier_index = tester.display_evaluation("Password1", engine)
        assert tier_index == 0
        assert calls == ["Password1"]
        assert "Suggestions:" in capsys.readouterr().out
        assert get_audit_events()[-1]["label"] == "Very weak"

    def test_single_password_canceled(self, monkeypatch, capsys, engine):
        """Closing input cancels the flow."""
        def closed(prompt=""):
            raise EOFError

        monkeypatch.setattr("getpass.getpass", closed)
        tester.test_password_flow(engine)
        assert "Canceled." in capsys.readouterr().out

    def test_live_mode(self, monkeypatch, capsys, engine):
        """Every line is re-evaluated until a blank line."""
        feed_input(monkeypatch, ["y", "abc", "K#9zQ!2vL", ""])
        tester.live_evaluate_flow(engine)
        out = capsys.readouterr().out
        assert out.count("Password Strength:") == 2
        assert "Pass (55.53 bits)" in out

    def test_live_mode_declined(self, monkeypatch, capsys, engine):
        """Declining the visibility warning cancels live mode."""
        feed_input(monkeypatch, ["n"])
        tester.live_evaluate_flow(engine)
        out = capsys.readouterr().out
        assert "Canceled." in out
        assert "Password Strength:" not in out

    def test_tier_table(self, capsys, engine):
        """All tier labels are listed."""
        tester.show_tier_table(engine)
        out = capsys.readouterr().out
        for label in ["Very weak", "Weak", "Pass", "Strong", "Very strong", "Super strong"]:
            assert label in out
        assert ">= 78 bits" in out

    def test_events_logged(self, monkeypatch, engine):
        """CLI evaluations are written to the audit log."""
        feed_input(monkeypatch, ["y", "abc", "abcd", ""])
        tester.live_evaluate_flow(engine)
        events = get_audit_events()
        assert len(events) == 2
        assert all(e["source"] == "cli" for e in events)


class TestMainMenu:
    """Test main menu routing."""

    def test_invalid_then_exit(self, monkeypatch, capsys, engine):
        """Invalid choices re-prompt; 4 exits."""
        feed_input(monkeypatch, ["9", "3", "4"])
        main_menu(engine)
        out = capsys.readouterr().out
        assert "Invalid choice" in out
        assert "Strength Tiers" in out
        assert "Goodbye" in out

    def test_closed_input_exits(self, monkeypatch, capsys, engine):
        """End of input leaves the menu."""
        feed_input(monkeypatch, [])
        main_menu(engine)
        assert "Goodbye" in capsys.readouterr().out

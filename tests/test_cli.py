"""Tests for the interactive CLI flow."""

import pytest

from breachcheck import UNKNOWN_RESULT, BreachChecker
from cli import tester

from conftest import SAMPLE_RANGE


@pytest.fixture
def stub_checker(make_client, monkeypatch):
    def _install(*results):
        lookup_client, transport = make_client(*results)
        monkeypatch.setattr(
            tester, "BreachChecker",
            lambda password, **kwargs: BreachChecker(password, client=lookup_client, **kwargs),
        )
        return transport
    return _install


class TestReportResult:
    """Test result printing."""

    def test_safe(self, capsys):
        assert tester.report_result(0, "Strong", []) is True
        assert "SAFE" in capsys.readouterr().out

    def test_compromised(self, capsys):
        assert tester.report_result(42, "Weak", ["Add numbers."]) is False
        out = capsys.readouterr().out
        assert "COMPROMISED" in out
        assert "Add numbers." in out

    def test_unknown(self, capsys):
        assert tester.report_result(UNKNOWN_RESULT, "Strong", []) is False
        assert "UNKNOWN" in capsys.readouterr().out


class TestCheckPasswordFlow:
    """Test the prompt-check-print flow."""

    def test_breached_password(self, stub_checker, monkeypatch, capsys):
        stub_checker(SAMPLE_RANGE)
        monkeypatch.setattr(tester, "prompt_secret", lambda: "password")
        assert tester.check_password_flow() is False
        assert "3,861,493" in capsys.readouterr().out

    def test_no_password_entered(self, monkeypatch, capsys):
        monkeypatch.setattr(tester, "prompt_secret", lambda: None)
        assert tester.check_password_flow() is None
        assert "No password entered" in capsys.readouterr().out

    def test_main_exit_code(self, stub_checker, monkeypatch):
        stub_checker("")
        monkeypatch.setattr(tester, "prompt_secret", lambda: "Tr0ub4dor&3#Xy9!")
        monkeypatch.setattr(tester, "confirm_action", lambda prompt: False)
        assert tester.main([]) == 0

"""Tests for diagnostics and SIEM event logging."""

import logging

import pytest

from breachcheck import BreachChecker, config
from breachcheck.siem import close_siem_log, get_siem_events, log_siem_event, report

from conftest import SAMPLE_RANGE


@pytest.fixture
def siem_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "breach_events.jsonl"
    monkeypatch.setattr(config, "SIEM_LOGGING_ENABLED", True)
    monkeypatch.setattr(config, "SIEM_LOG_FILE", str(path))
    yield path
    close_siem_log()


class TestReport:
    """Test the diagnostic sink."""

    def test_prefixed_message(self, caplog):
        with caplog.at_level(logging.ERROR, logger="breachcheck"):
            report("Failed to convert password.", logging.ERROR)
        assert "password_breach_check reported: Failed to convert password." in caplog.text

    def test_level_preserved(self, caplog):
        with caplog.at_level(logging.WARNING, logger="breachcheck"):
            report("Retrying", logging.WARNING)
        assert caplog.records[-1].levelno == logging.WARNING


class TestSiemEvents:
    """Test JSON event logging."""

    def test_disabled_by_default(self, tmp_path, monkeypatch):
        path = tmp_path / "events.jsonl"
        monkeypatch.setattr(config, "SIEM_LOGGING_ENABLED", False)
        monkeypatch.setattr(config, "SIEM_LOG_FILE", str(path))
        log_siem_event("breach_detected", "BREACHED")
        assert not path.exists()
        assert get_siem_events() == []

    def test_event_written(self, siem_file):
        log_siem_event("breach_detected", "BREACHED", {"hash_prefix": "5BAA6", "count": 3})
        events = get_siem_events()
        assert len(events) == 1
        assert events[0]["event_type"] == "breach_detected"
        assert events[0]["status"] == "BREACHED"
        assert events[0]["details"] == {"hash_prefix": "5BAA6", "count": 3}
        assert "timestamp" in events[0]

    def test_limit(self, siem_file):
        for i in range(5):
            log_siem_event("lookup_failed", "UNKNOWN", {"attempt": i})
        events = get_siem_events(limit=2)
        assert [e["details"]["attempt"] for e in events] == [3, 4]

    def test_breach_hit_logged_without_password(self, siem_file, make_client):
        client, _ = make_client(SAMPLE_RANGE)
        BreachChecker("password", client=client).check()

        events = get_siem_events()
        assert events[-1]["event_type"] == "breach_detected"
        assert events[-1]["details"] == {"hash_prefix": "5BAA6", "count": 3861493}
        assert "password" not in siem_file.read_text().replace("password_breach_check", "")

    def test_unwritable_log_does_not_fail_check(self, tmp_path, monkeypatch, make_client, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        monkeypatch.setattr(config, "SIEM_LOGGING_ENABLED", True)
        monkeypatch.setattr(config, "SIEM_LOG_FILE", str(blocker / "logs" / "events.jsonl"))
        client, _ = make_client(SAMPLE_RANGE)
        try:
            with caplog.at_level(logging.ERROR, logger="breachcheck"):
                assert BreachChecker("password", client=client).check() == 3861493
        finally:
            close_siem_log()
        assert "Could not write SIEM event" in caplog.text

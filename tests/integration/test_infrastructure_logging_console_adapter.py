"""Integration tests for the structlog console adapter."""

import json

import pytest

from authgate.infrastructure.logging import ConsoleAdapter


@pytest.mark.integration
class TestConsoleAdapter:
    def test_json_output_is_structured(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.info("sign_in_succeeded", user_id="123")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "sign_in_succeeded"
        assert event["user_id"] == "123"
        assert event["level"] == "info"
        assert "timestamp" in event

    def test_error_includes_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("store_failed", error=RuntimeError("boom"), operation="save")

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["error_type"] == "RuntimeError"
        assert event["error_message"] == "boom"
        assert event["operation"] == "save"

    def test_bind_carries_context(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(trace_id="t-1")

        logger.warning("forbidden")

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["trace_id"] == "t-1"

    def test_level_filtering(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("hidden")
        logger.debug("hidden")

        assert capsys.readouterr().out == ""

    def test_critical_includes_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.critical("bootstrap_failed", error=ValueError("bad"))

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["level"] == "critical"
        assert event["error_type"] == "ValueError"
        assert event["error_message"] == "bad"

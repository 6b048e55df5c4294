"""Tests for structured logging setup and correlation context."""

import json
import logging
import re

import pytest
import structlog

from handover.logging import (
    clear_context,
    get_correlation_id,
    get_logger,
    new_correlation_id,
    set_correlation_id,
    setup_logging,
)


def strip_ansi(text):
    """Strip ANSI escape sequences from text."""
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


def parse_json_lines(output):
    lines = output.strip().split("\n")
    return [json.loads(line) for line in lines if line.strip()]


def find_event(output, event):
    return next((e for e in parse_json_lines(output) if e.get("event") == event), None)


@pytest.fixture(autouse=True)
def reset_logging():
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


class TestSetupLogging:
    def test_json_format_binds_service(self, capsys):
        setup_logging(service_name="handover-test", log_format="json", log_level="INFO")

        get_logger(__name__).info("project_loaded", project_id="p1", version=2)

        entry = find_event(capsys.readouterr().out, "project_loaded")
        assert entry is not None
        assert entry["service"] == "handover-test"
        assert entry["project_id"] == "p1"
        assert entry["version"] == 2  # noqa: PLR2004
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_console_format(self, capsys):
        setup_logging(service_name="handover-test", log_format="console", log_level="INFO")

        get_logger().info("checklist_saved", kind="launch")

        output = strip_ansi(capsys.readouterr().out)
        assert "checklist_saved" in output
        assert "kind=launch" in output

    def test_reads_environment(self, monkeypatch, capsys):
        monkeypatch.setenv("SERVICE_NAME", "env_service")
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        setup_logging()
        get_logger().debug("debug_event")

        entry = find_event(capsys.readouterr().out, "debug_event")
        assert entry is not None
        assert entry["service"] == "env_service"

    def test_level_filtering(self, capsys):
        setup_logging(service_name="handover-test", log_format="console", log_level="WARNING")

        logger = get_logger()
        logger.info("info_event")
        logger.warning("warning_event")

        output = strip_ansi(capsys.readouterr().out)
        assert "info_event" not in output
        assert "warning_event" in output


class TestCorrelation:
    def test_new_ids_are_prefixed_and_unique(self):
        first = new_correlation_id()

        assert re.fullmatch(r"req_[0-9a-f]{8}", first)
        assert first != new_correlation_id()

    def test_context_is_merged_into_events(self, capsys):
        setup_logging(service_name="handover-test", log_format="json", log_level="INFO")

        set_correlation_id("req_abc12345", method="GET", path="/api/projects")
        get_logger().info("with_context")

        entry = find_event(capsys.readouterr().out, "with_context")
        assert entry["correlation_id"] == "req_abc12345"
        assert entry["path"] == "/api/projects"
        assert get_correlation_id() == "req_abc12345"

    def test_clear_context(self, capsys):
        setup_logging(service_name="handover-test", log_format="json", log_level="INFO")

        set_correlation_id("req_abc12345")
        clear_context()
        get_logger().info("without_context")

        entry = find_event(capsys.readouterr().out, "without_context")
        assert "correlation_id" not in entry
        assert get_correlation_id() is None

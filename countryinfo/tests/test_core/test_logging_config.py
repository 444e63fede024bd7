"""Tests for structlog configuration."""

import json

import structlog

from countryinfo.app.config import Settings
from countryinfo.app.logging_config import configure_logging


def test_json_output(capsys, clean_env):
    configure_logging(Settings(log_format="json", _env_file=None))
    structlog.get_logger().info("Lookup done", code="JP")

    line = capsys.readouterr().out.strip().splitlines()[-1]
    payload = json.loads(line)
    assert payload["event"] == "Lookup done"
    assert payload["code"] == "JP"
    assert payload["level"] == "info"
    assert "timestamp" in payload


def test_level_filtering(capsys, clean_env):
    configure_logging(Settings(log_level="warning", log_format="json", _env_file=None))
    logger = structlog.get_logger()
    logger.info("hidden")
    logger.warning("shown")

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "shown"


def test_console_output(capsys, clean_env):
    configure_logging(Settings(_env_file=None))
    structlog.get_logger().warning("Console event", code="FR")

    out = capsys.readouterr().out
    assert "Console event" in out
    assert "FR" in out


def test_defaults_to_get_settings(capsys, clean_env):
    clean_env.setenv("COUNTRYINFO_LOG_FORMAT", "json")
    clean_env.setenv("COUNTRYINFO_LOG_LEVEL", "error")
    configure_logging()
    logger = structlog.get_logger()
    logger.warning("hidden")
    logger.error("shown")

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line)["event"] for line in lines] == ["shown"]

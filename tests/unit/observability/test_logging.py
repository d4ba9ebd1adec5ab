"""Tests for logging setup."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from indexregistry.config.settings import ObservabilitySettings
from indexregistry.observability.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_defaults_to_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging()

        logging.getLogger("indexregistry.test").info("Initialized registry: %s", "events")

        out = capsys.readouterr().out
        assert '"event": "Initialized registry: events"' in out
        assert '"level": "info"' in out

    def test_level_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(ObservabilitySettings(log_level="warning", log_format="console"))

        logging.getLogger("indexregistry.test").info("hidden")
        logging.getLogger("indexregistry.test").warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

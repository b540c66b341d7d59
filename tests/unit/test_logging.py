"""Tests for logging setup."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from esquire.config.settings import ObservabilitySettings
from esquire.observability.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(ObservabilitySettings(log_level="debug", log_format="json"))
    logging.getLogger("esquire.search").debug("Searching %s", "a/_search")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Searching a/_search"
    assert record["level"] == "debug"
    assert record["logger"] == "esquire.search"


def test_level_filters(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(ObservabilitySettings(log_level="warning"))
    logging.getLogger("esquire.client").info("hidden")
    assert "hidden" not in capsys.readouterr().err


def test_defaults_without_settings() -> None:
    setup_logging()
    assert logging.getLogger().level == logging.INFO

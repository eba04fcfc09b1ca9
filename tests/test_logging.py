import json
import logging

import pytest

from core.logging import bootstrap_logging, context, get_context, get_logger, shutdown_logging
from core.logging.formatter import JSONFormatter
from core.logging.levels import LogLevel, to_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    shutdown_logging()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_context_binds_only_inside_block():
    with context(account="a", game_id=None):
        assert get_context() == {"account": "a"}
        with context(game_id=7):
            assert get_context() == {"account": "a", "game_id": 7}
    assert get_context() == {}


def test_to_level_accepts_custom_names():
    assert to_level("success") == int(LogLevel.SUCCESS)
    assert to_level("TRACE") == 5
    assert to_level(logging.ERROR) == logging.ERROR
    assert to_level("nonsense") == logging.INFO


def test_json_formatter_includes_extras_and_context():
    record = logging.LogRecord("timeline", logging.WARNING, __file__, 10, "retry 1/2", None, None)
    record.service = "backend"
    record.attempt = 1
    record.context = {"account": "a"}

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "retry 1/2"
    assert payload["level"] == "WARNING"
    assert payload["service"] == "backend"
    assert payload["attempt"] == 1
    assert payload["context"] == {"account": "a"}


def test_bootstrap_writes_json_lines_with_bound_context(tmp_path, restore_root_logger):
    bootstrap_logging(service="timeline", level="DEBUG", log_dir=tmp_path, console=False)
    logger = get_logger("tests.logging", service="aggregator")

    with context(account="a", generation=3):
        logger.success(lambda: "aggregated 4 matches", extra={"count": 4})
    logging.getLogger("plain").info("no service given")
    shutdown_logging()

    lines = (tmp_path / "timeline.jsonl").read_text(encoding="utf-8").splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["level"] == "SUCCESS"
    assert first["service"] == "aggregator"
    assert first["count"] == 4
    assert first["context"] == {"account": "a", "generation": 3}
    assert second["service"] == "timeline"
    assert "context" not in second


def test_lazy_message_is_not_built_when_level_disabled(restore_root_logger):
    logging.getLogger().setLevel(logging.WARNING)
    calls = []

    def message():
        calls.append(1)
        return "expensive"

    get_logger("tests.lazy").debug(message)
    assert calls == []

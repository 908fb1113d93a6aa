"""Tests for src.utils.logging_config.

Test cases:
    - setup_logging is idempotent (no duplicate handlers)
    - Context fields appear in human and JSON output
    - pop_context removes selected / all fields
    - Library modules log through module loggers (draw_lines summary)

Run:
    pytest tests/test_logging_config.py -v
"""

import json
import logging

import pytest

from src.raster import display, draw, edges
from src.utils import logging_config


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler/level/context changes after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    logging_config.setup_logging(to_stderr=False, capture_warnings=False)
    logging.captureWarnings(False)
    logging_config.pop_context()
    root.setLevel(level)


def test_setup_logging_idempotent():
    """Repeated setup replaces rather than stacks handlers."""
    root = logging.getLogger()
    before = len(root.handlers)
    logging_config.setup_logging(log_level="DEBUG")
    logging_config.setup_logging(log_level="DEBUG")
    assert len(root.handlers) == before + 1
    assert root.level == logging.DEBUG


def test_setup_logging_without_handlers():
    assert logging_config.setup_logging(to_stderr=False) == []


def test_human_format_with_context(tmp_path):
    log_file = tmp_path / "logs" / "draw.log"
    logging_config.setup_logging(
        log_level="INFO", log_file=str(log_file), to_stderr=False, context={"scene": "cube"}
    )
    logging_config.get_logger("test.human").info("Drawing pass")

    for handler in logging.getLogger().handlers:
        handler.flush()
    line = log_file.read_text(encoding='utf-8').strip()
    assert "| INFO" in line
    assert "scene=cube |" in line
    assert line.endswith("Drawing pass")


def test_json_format_with_context(tmp_path):
    log_file = tmp_path / "draw.jsonl"
    logging_config.setup_logging(log_level="INFO", log_file=str(log_file), json=True, to_stderr=False)
    logging_config.push_context(scene="circle", pass_=2)
    logging_config.get_logger("test.json").warning("Unsupported curve")

    for handler in logging.getLogger().handlers:
        handler.flush()
    record = json.loads(log_file.read_text(encoding='utf-8').strip())
    assert record["lvl"] == "WARNING"
    assert record["msg"] == "Unsupported curve"
    assert record["scene"] == "circle"
    assert record["pass_"] == 2


def test_pop_context(tmp_path):
    log_file = tmp_path / "ctx.log"
    logging_config.setup_logging(log_file=str(log_file), to_stderr=False)
    logging_config.push_context(scene="cube", pass_=1)
    logging_config.pop_context(keys=["pass_"])
    logging_config.get_logger("test.pop").info("one")
    logging_config.pop_context()
    logging_config.get_logger("test.pop").info("two")

    for handler in logging.getLogger().handlers:
        handler.flush()
    first, second = log_file.read_text(encoding='utf-8').strip().splitlines()
    assert "scene=cube" in first and "pass_" not in first
    assert "scene=" not in second


def test_unknown_format_rejected():
    with pytest.raises(ValueError):
        logging_config.ContextFormatter("xml")


def test_set_level():
    logging_config.set_level("warning")
    assert logging.getLogger().level == logging.WARNING


def test_draw_lines_logs_summary(caplog):
    """The drawer reports a per-call summary at DEBUG, not per pixel."""
    m = edges.EdgeMatrix()
    edges.add_edge(m, 0, 0, 0, 3, 3, 0)
    screen = display.new_screen(8, 8)
    ctx = display.DrawContext(width=8, height=8)
    with caplog.at_level(logging.DEBUG, logger="src.raster.draw"):
        draw.draw_lines(m, screen, ctx)
    messages = [r.getMessage() for r in caplog.records if r.name == "src.raster.draw"]
    assert messages == ["Drew 1 segments from 2 points"]

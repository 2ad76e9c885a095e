# tests/test_utils.py - config, metrics and logging helpers
import json
import logging

import pytest

from word_builder.utils.config_manager import DEFAULTS, Config
from word_builder.utils.logger_utils import Log, configure_logging
from word_builder.utils.metrics_tracker import Metrics


def test_config_defaults_without_file(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    assert cfg.data == DEFAULTS
    assert not (tmp_path / "cfg.json").exists()


def test_config_autosave_writes_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    Config(str(path), autosave=True)
    assert json.loads(path.read_text()) == DEFAULTS


def test_config_file_overrides_defaults(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"min_letters": 4}))
    cfg = Config(str(path))
    assert cfg["min_letters"] == 4
    assert cfg["max_results"] == DEFAULTS["max_results"]


def test_config_set_coerces_and_saves(tmp_path):
    path = tmp_path / "cfg.json"
    cfg = Config(str(path))
    cfg.set("min_letters", "3")
    assert cfg["min_letters"] == 3
    assert json.loads(path.read_text())["min_letters"] == 3


def test_config_set_unknown_key(tmp_path):
    cfg = Config(str(tmp_path / "cfg.json"))
    with pytest.raises(KeyError):
        cfg.set("theme", "dark")
    with pytest.raises(ValueError):
        cfg.set("max_results", "lots")


def test_corrupt_config_is_ignored(tmp_path, caplog):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="word_builder.utils.config_manager"):
        cfg = Config(str(path))
    assert cfg.data == DEFAULTS
    assert "ignoring unreadable config" in caplog.text


def test_metrics_average_and_save(tmp_path):
    path = tmp_path / "m" / "metrics.json"
    m = Metrics(str(path))
    m.record("query_time", 0.2)
    m.record("query_time", 0.4)
    assert m.count("query_time") == 2
    assert m.avg("query_time") == pytest.approx(0.3)
    assert m.avg("missing") == 0.0
    m.save()
    saved = json.loads(path.read_text())
    assert saved["query_time"]["count"] == 2
    assert m.rows() == [("query_time", 2, pytest.approx(0.3))]


def test_time_block_records_metric(caplog):
    m = Metrics()
    with caplog.at_level(logging.INFO, logger="word_builder.metrics"):
        with Log.time_block("load words", m) as t:
            pass
    assert m.count("load words") == 1
    assert t.elapsed >= 0
    assert "load words done" in caplog.text


def test_configure_logging_file_handler(tmp_path):
    path = tmp_path / "logs" / "wb.log"
    configure_logging("INFO", str(path))
    try:
        logging.getLogger("word_builder.test").info("hello log")
        for h in logging.getLogger("word_builder").handlers:
            h.flush()
        assert "hello log" in path.read_text()
    finally:
        configure_logging("WARNING")

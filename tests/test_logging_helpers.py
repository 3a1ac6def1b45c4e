import io
import json
import logging

from codecollector import __version__
from codecollector.logging.factory import DefaultLoggerFactory
from codecollector.logging.helpers import (
    JsonLogFormatter,
    get_logger,
    reset_base_logger,
    resolve_level,
    setup_base_logger,
    trace_io,
)


def _record(msg="hello %s", args=("world",), **extra):
    rec = logging.LogRecord("codecollector.io.walker", logging.WARNING, __file__, 1, msg, args, None)
    for k, v in extra.items():
        setattr(rec, k, v)
    return rec


def test_get_logger_namespacing():
    assert get_logger().name == "codecollector"
    assert get_logger("codecollector").name == "codecollector"
    assert get_logger("io.walker").name == "codecollector.io.walker"
    assert get_logger("codecollector.collector").name == "codecollector.collector"


def test_json_formatter_payload():
    payload = json.loads(JsonLogFormatter().format(_record(context={"path": "/x"})))
    assert payload["level"] == "WARNING"
    assert payload["module"] == "codecollector.io.walker"
    assert payload["msg"] == "hello world"
    assert payload["version"] == __version__
    assert payload["ctx"] == {"path": "/x"}
    assert payload["ts"].endswith("Z")


def test_json_formatter_without_context():
    payload = json.loads(JsonLogFormatter().format(_record()))
    assert "ctx" not in payload


def test_setup_base_logger_plain_text():
    reset_base_logger()
    stream = io.StringIO()
    try:
        base = setup_base_logger(level=logging.INFO, stream=stream)
        get_logger("collector").info("done")
        get_logger("collector").debug("hidden")
        assert stream.getvalue() == "INFO: done\n"
        assert base.propagate is False
    finally:
        reset_base_logger()


def test_factory_configures_json_once():
    reset_base_logger()
    stream = io.StringIO()
    try:
        factory = DefaultLoggerFactory(json_logs=True, level=logging.INFO, stream=stream)
        lg = factory.get_logger("cli")
        factory.get_logger("cli")
        lg.error("boom")
        assert len(logging.getLogger("codecollector").handlers) == 1
        assert json.loads(stream.getvalue())["msg"] == "boom"
    finally:
        reset_base_logger()


def test_resolve_level(monkeypatch):
    monkeypatch.delenv("CODECOLLECT_LOG_LEVEL", raising=False)
    assert resolve_level() == logging.INFO
    monkeypatch.setenv("CODECOLLECT_LOG_LEVEL", "debug")
    assert resolve_level() == logging.DEBUG
    monkeypatch.setenv("CODECOLLECT_LOG_LEVEL", "30")
    assert resolve_level() == 30
    monkeypatch.setenv("CODECOLLECT_LOG_LEVEL", "chatty")
    assert resolve_level() == logging.INFO


def test_trace_io_gated_by_env(monkeypatch, caplog):
    lg = logging.getLogger("tests.trace")
    caplog.set_level(logging.DEBUG, logger="tests.trace")
    monkeypatch.delenv("CODECOLLECT_TRACE_IO", raising=False)
    trace_io(lg, "read", path="/a")
    assert not caplog.records
    monkeypatch.setenv("CODECOLLECT_TRACE_IO", "1")
    trace_io(lg, "read", path="/a")
    assert "read | ctx={'path': '/a'}" in caplog.text


def test_factory_from_env():
    factory = DefaultLoggerFactory.from_env({"CODECOLLECT_JSON_LOGS": "1", "CODECOLLECT_LOG_LEVEL": "warning"})
    assert factory.json_logs is True
    assert factory.level == logging.WARNING
    assert factory.mode == (True, logging.WARNING)

    plain = DefaultLoggerFactory.from_env({})
    assert plain.mode == (False, logging.INFO)

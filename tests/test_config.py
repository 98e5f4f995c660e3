import pytest
from behold.config import BeholdConfig, parse_context_spec
from behold.core.errors import ConfigError, BeholdError
from behold.core.logging import logger
from behold.context import get_store

def test_parse_bare_and_valued_keys():
    assert parse_context_spec("a,b=off,c=YES, d = 0 ,,") == {"a": True, "b": False, "c": True, "d": False}

def test_parse_rejects_bad_value():
    with pytest.raises(ConfigError) as exc:
        parse_context_spec("a=maybe")
    assert exc.value.name == "BEHOLD_CONTEXT"
    assert isinstance(exc.value, BeholdError)

def test_parse_rejects_missing_key():
    with pytest.raises(ConfigError):
        parse_context_spec("=on")

def test_defaults():
    cfg = BeholdConfig.load({})
    assert cfg.log_level == "WARN"
    assert cfg.color is True
    assert cfg.context == {}

def test_level_is_normalized():
    assert BeholdConfig.load({"BEHOLD_LOG_LEVEL": "debug"}).log_level == "DEBUG"
    assert BeholdConfig.load({"BEHOLD_LOG_LEVEL": "loud"}).log_level == "WARN"

def test_color_switch():
    assert BeholdConfig.load({"BEHOLD_COLOR_DISABLED": "1"}).color is False

def test_malformed_seed_is_logged_and_ignored(capsys):
    logger.set_level("WARN")
    cfg = BeholdConfig.load({"BEHOLD_CONTEXT": "a,b=maybe"})
    assert cfg.context == {}
    err = capsys.readouterr().err
    assert "[WARN] Failed to parse context seed" in err
    assert "maybe" in err

def test_malformed_seed_leaves_store_empty(monkeypatch, capsys):
    monkeypatch.setenv("BEHOLD_CONTEXT", "oops=2")
    assert get_store().snapshot() == {}
    captured = capsys.readouterr()
    assert captured.out == ""

def test_debug_logging_goes_to_stderr(monkeypatch, capsys):
    monkeypatch.setenv("BEHOLD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BEHOLD_COLOR_DISABLED", "1")
    try:
        get_store().set("k", True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[DEBUG] ContextSet key=k value=True" in captured.err
    finally:
        logger.set_level("WARN")
        logger.color = True

def test_logger_ignores_environment_until_config_applied(monkeypatch):
    from behold.core.logging import Logger
    monkeypatch.setenv("BEHOLD_COLOR_DISABLED", "1")
    fresh = Logger()
    assert fresh.color is True
    try:
        BeholdConfig.load().apply()
        assert logger.color is False
    finally:
        logger.set_level("WARN")
        logger.color = True

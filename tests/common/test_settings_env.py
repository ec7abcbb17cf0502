from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_choice, env_int, env_str
from common.logging import setup_default_logging


def test_env_int_default_invalid_and_floor(monkeypatch: pytest.MonkeyPatch) -> None:
    assert env_int("BTK_TEST_INT", 7) == 7
    monkeypatch.setenv("BTK_TEST_INT", "abc")
    assert env_int("BTK_TEST_INT", 7) == 7
    monkeypatch.setenv("BTK_TEST_INT", "-5")
    assert env_int("BTK_TEST_INT", 7, min_value=0) == 0
    monkeypatch.setenv("BTK_TEST_INT", " 12 ")
    assert env_int("BTK_TEST_INT", 7) == 12


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("Off", False), ("maybe", True)],
)
def test_env_bool(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("BTK_TEST_BOOL", raw)
    # 解釈できない値は既定値（True）
    assert env_bool("BTK_TEST_BOOL", True) is expected


def test_env_str_blank_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BTK_TEST_STR", "   ")
    assert env_str("BTK_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("BTK_TEST_STR", " debug ")
    assert env_str("BTK_TEST_STR", "fallback") == "debug"


def test_env_choice_unknown_is_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BTK_TEST_CHOICE", "loud")
    assert env_choice("BTK_TEST_CHOICE", ("INFO", "DEBUG"), "INFO") == "INFO"
    monkeypatch.setenv("BTK_TEST_CHOICE", "debug")
    assert env_choice("BTK_TEST_CHOICE", ("INFO", "DEBUG"), "INFO") == "DEBUG"


def test_settings_defaults() -> None:
    s = settings.get()
    assert s.LOG_LEVEL == "INFO"
    assert s.DEBUG_RAMP is False
    assert s.MAX_GRID_CELLS == 400


def test_settings_reload_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BTK_LOG_LEVEL", "debug")
    monkeypatch.setenv("BTK_DEBUG_RAMP", "true")
    monkeypatch.setenv("BTK_MAX_GRID_CELLS", "0")
    settings.reload_from_env()
    s = settings.get()
    assert s.LOG_LEVEL == "DEBUG"
    assert s.DEBUG_RAMP is True
    assert s.MAX_GRID_CELLS == 1


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    setup_default_logging("DEBUG")
    assert root.handlers == [handler]


def test_setup_default_logging_uses_env_level(monkeypatch: pytest.MonkeyPatch) -> None:
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    monkeypatch.setenv("BTK_LOG_LEVEL", "warning")
    settings.reload_from_env()
    setup_default_logging()
    assert calls and calls[0]["level"] == logging.WARNING

# Rev 0.1.0

from __future__ import annotations
import json
import logging
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from projboard.app_context import AppContext
from projboard.utils.config import load_settings, save_settings
from projboard.utils.logging_setup import _log_qt_message, level_from_env, setup_logging


def test_defaults_when_missing(tmp_path):
    s = load_settings(tmp_path / "nope.json")
    assert s["main_window"] == {"width": 900, "height": 600}


def test_round_trip_and_corrupt_fallback(tmp_path):
    path = tmp_path / "settings.json"
    save_settings({"main_window": {"width": 1200, "height": 700}}, path)
    assert load_settings(path)["main_window"]["width"] == 1200

    path.write_text("{not json")
    assert load_settings(path)["main_window"]["width"] == 900


def test_defaults_not_shared_between_loads(tmp_path):
    a = load_settings(tmp_path / "x.json")
    a["main_window"]["width"] = 1
    assert load_settings(tmp_path / "x.json")["main_window"]["width"] == 900


def test_app_context_builds_fresh_store(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"main_window": {"width": 640, "height": 480}}))

    a = AppContext.create(settings_path=path)
    b = AppContext.create(settings_path=path)

    assert a.store is not b.store
    assert len(a.store) == 0
    assert a.settings["main_window"]["width"] == 640


def test_setup_logging_writes_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PROJBOARD_LOG_LEVEL", "DEBUG")
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    try:
        logfile = setup_logging("projboard", log_dir=tmp_path)
        logging.getLogger("projboard.test").info("hello log")
        for h in root.handlers:
            h.flush()
        assert logfile == tmp_path / "projboard.log"
        assert "hello log" in logfile.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(level)
        qInstallMessageHandler(None)


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("PROJBOARD_LOG_LEVEL", "warning")
    assert level_from_env() == logging.WARNING
    monkeypatch.setenv("PROJBOARD_LOG_LEVEL", "bogus")
    assert level_from_env() == logging.INFO


def test_qt_messages_keep_their_severity(caplog):
    with caplog.at_level(logging.DEBUG, logger="qt"):
        _log_qt_message(QtMsgType.QtWarningMsg, None, "qt says careful")
        _log_qt_message(QtMsgType.QtCriticalMsg, None, "qt says broken")
    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("qt", logging.WARNING, "qt says careful"),
        ("qt", logging.ERROR, "qt says broken"),
    ]

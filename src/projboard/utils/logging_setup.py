# Rev 0.2.0

# projboard – logging setup (Rev 0.2.0)
from __future__ import annotations
import logging, os, sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from .paths import APP_NAME, logs_dir

LINE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV = "PROJBOARD_LOG_LEVEL"

# Qt severities, lowest first; anything unknown logs at INFO
_QT_LEVELS = dict(zip(
    (QtMsgType.QtDebugMsg, QtMsgType.QtInfoMsg, QtMsgType.QtWarningMsg,
     QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg),
    (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL),
))


def level_from_env(default: str = "INFO") -> int:
    name = os.environ.get(LEVEL_ENV, default).upper()
    return getattr(logging, name, logging.INFO)


def build_handlers(logfile: Path, level: int) -> List[logging.Handler]:
    """Rotating file (5 MB x 7) plus stdout, same format for both."""
    fmt = logging.Formatter(LINE_FORMAT, TIME_FORMAT)
    handlers: List[logging.Handler] = [
        RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8"),
        logging.StreamHandler(sys.stdout),
    ]
    for h in handlers:
        h.setFormatter(fmt)
        h.setLevel(level)
    return handlers


def _log_uncaught(exctype, value, tb) -> None:
    logging.getLogger("unhandled").error("Uncaught exception", exc_info=(exctype, value, tb))
    sys.__excepthook__(exctype, value, tb)


def _log_qt_message(msg_type, context, message) -> None:
    logging.getLogger("qt").log(_QT_LEVELS.get(msg_type, logging.INFO), message)


def setup_logging(app_name: str = APP_NAME, log_dir: Optional[Path] = None) -> Path:
    level = level_from_env()
    logfile = (log_dir or logs_dir()) / f"{app_name}.log"

    root = logging.getLogger()
    root.setLevel(level)
    for h in build_handlers(logfile, level):
        root.addHandler(h)

    sys.excepthook = _log_uncaught
    qInstallMessageHandler(_log_qt_message)

    logging.getLogger(__name__).info(
        "logging ready: level=%s file=%s", logging.getLevelName(level), logfile
    )
    return logfile

# src/projboard/utils/config.py
import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from .paths import config_dir

log = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "main_window": {
        "width": 900,
        "height": 600,
    },
}


def settings_file() -> Path:
    return config_dir() / "settings.json"


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    data = copy.deepcopy(_DEFAULTS)
    if path.exists():
        try:
            data.update(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ValueError):
            log.warning("unreadable settings at %s; using defaults", path)
            return copy.deepcopy(_DEFAULTS)
    return data


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")

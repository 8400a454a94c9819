# projboard application context
# Rev 0.1.0

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .store.project_store import ProjectStore
from .utils.config import load_settings


@dataclass
class AppContext:
    """Central container for shared app resources."""
    store: ProjectStore
    settings: Dict[str, Any] = field(default_factory=dict)
    logfile: Optional[Path] = None

    @classmethod
    def create(cls, *, logfile: Optional[Path] = None, settings_path: Optional[Path] = None) -> "AppContext":
        """Build the one store for this run and load settings."""
        log = logging.getLogger("AppContext")
        store = ProjectStore()
        settings = load_settings(settings_path)
        log.info("AppContext initialized (log=%s)", logfile)
        return cls(store=store, settings=settings, logfile=logfile)

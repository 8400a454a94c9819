# Rev 0.1.0
# projboard — Main Window
# Layout: input form on top, ACTIVE | FINISHED lists below

from __future__ import annotations
import logging
from typing import Callable, Optional

from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout

from projboard.app_context import AppContext
from projboard.models.entities import ProjectStatus
from projboard.ui.panels.project_input_panel import ProjectInputPanel
from projboard.ui.panels.project_list_panel import ProjectListPanel
from projboard.utils.config import save_settings

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        *,
        ctx: AppContext,
        notify: Optional[Callable[[str], None]] = None,
        persist_settings: bool = True,
        parent=None,
    ):
        super().__init__(parent)
        self._ctx = ctx
        self._persist_settings = persist_settings

        self.setWindowTitle("projboard — Projects")
        geo = ctx.settings.get("main_window", {})
        self.resize(int(geo.get("width", 900)), int(geo.get("height", 600)))

        central = QWidget(self)
        v = QVBoxLayout(central)

        # every panel shares the one injected store
        self.input_panel = ProjectInputPanel(store=ctx.store, notify=notify, parent=central)
        v.addWidget(self.input_panel)

        lists = QHBoxLayout()
        self.active_panel = ProjectListPanel(store=ctx.store, status=ProjectStatus.ACTIVE, parent=central)
        self.finished_panel = ProjectListPanel(store=ctx.store, status=ProjectStatus.FINISHED, parent=central)
        lists.addWidget(self.active_panel)
        lists.addWidget(self.finished_panel)
        v.addLayout(lists, 1)

        self.setCentralWidget(central)
        self.input_panel.projectAdded.connect(self._on_project_added)

    def _on_project_added(self, project_id: str) -> None:
        self.statusBar().showMessage(f"Added project {project_id}", 3000)

    def closeEvent(self, event):
        if self._persist_settings:
            self._ctx.settings["main_window"] = {"width": self.width(), "height": self.height()}
            try:
                save_settings(self._ctx.settings)
            except OSError:
                log.exception("could not save settings")
        super().closeEvent(event)

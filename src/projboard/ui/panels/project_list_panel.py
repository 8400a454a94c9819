# src/projboard/ui/panels/project_list_panel.py
# Rev 0.1.0 — one panel per status; rebuilt from the filtered list on every store change

from __future__ import annotations
from typing import Iterable, List, Optional
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QListWidget, QListWidgetItem

from projboard.models.entities import Project, ProjectStatus
from projboard.viewmodels.project_list_viewmodel import ProjectListViewModel


class ProjectListPanel(QWidget):
    def __init__(self, *, store, status: ProjectStatus, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._vm = ProjectListViewModel(store, status)
        self.setObjectName(f"{status.value}-projects")

        self._title = QLabel(status.label)
        self._list = QListWidget(self)
        self._list.setObjectName(f"{status.value}-project-list")

        lay = QVBoxLayout(self)
        lay.addWidget(self._title)
        lay.addWidget(self._list)

        self._vm.projectsChanged.connect(self.render)
        self.render(self._vm.projects())

    @property
    def status(self) -> ProjectStatus:
        return self._vm.status

    def render(self, projects: Iterable[Project]) -> None:
        self._list.clear()
        for p in projects:
            item = QListWidgetItem(p.title)
            item.setData(Qt.UserRole, p.id)
            self._list.addItem(item)

    # ---- introspection (tests, diagnostics)
    def titles(self) -> List[str]:
        return [self._list.item(i).text() for i in range(self._list.count())]

    def ids(self) -> List[str]:
        return [self._list.item(i).data(Qt.UserRole) for i in range(self._list.count())]

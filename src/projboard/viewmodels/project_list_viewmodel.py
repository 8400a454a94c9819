# Rev 0.1.0
# src/projboard/viewmodels/project_list_viewmodel.py
from __future__ import annotations
from typing import Iterable, List

from PySide6.QtCore import QObject, Signal

from projboard.models.entities import Project, ProjectStatus


def filter_by_status(projects: Iterable[Project], status: ProjectStatus) -> List[Project]:
    """Stable filter: keep records whose status is `status`, in their original order."""
    return [p for p in projects if p.status is status]


class ProjectListViewModel(QObject):
    """
    Emits:
      projectsChanged([Project, ...])  # only records with this model's status
    """
    projectsChanged = Signal(object)  # list[Project]

    def __init__(self, store, status: ProjectStatus):
        super().__init__()
        self._status = status
        self._assigned: List[Project] = []
        store.subscribe(self._on_store_changed)

    @property
    def status(self) -> ProjectStatus:
        return self._status

    def projects(self) -> List[Project]:
        return list(self._assigned)

    def _on_store_changed(self, snapshot) -> None:
        self._assigned = filter_by_status(snapshot, self._status)
        self.projectsChanged.emit(self.projects())

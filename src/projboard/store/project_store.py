# Rev 0.1.0
# src/projboard/store/project_store.py
from __future__ import annotations

import logging
from typing import Callable, List, Set, Tuple

from projboard.models.entities import Number, Project, ProjectStatus
from projboard.utils.ids import new_uid

log = logging.getLogger(__name__)

Snapshot = Tuple[Project, ...]
Listener = Callable[[Snapshot], None]


class ProjectStore:
    """
    Single source of truth for projects.

    Append-only: create() is the only mutation. Every listener registered
    before a create() is called once with a tuple snapshot of the whole
    collection, in registration order. Construct one per application and
    hand it to every adapter.
    """

    def __init__(self) -> None:
        self._projects: List[Project] = []
        self._listeners: List[Listener] = []
        self._issued_ids: Set[str] = set()
        log.debug("ProjectStore created")

    # ---- queries
    def projects(self) -> Snapshot:
        return tuple(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    # ---- subscriptions
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)
        log.debug("listener subscribed (%d total)", len(self._listeners))

    # ---- commands
    def create(self, title: str, description: str, headcount: Number) -> Project:
        project = Project(
            id=self._next_id(),
            title=title,
            description=description,
            headcount=headcount,
            status=ProjectStatus.ACTIVE,
        )
        self._projects.append(project)
        log.info("project created id=%s title=%r headcount=%s", project.id, title, headcount)
        self._notify()
        return project

    # ---- internals
    def _next_id(self) -> str:
        pid = new_uid("prj")
        while pid in self._issued_ids:
            pid = new_uid("prj")
        self._issued_ids.add(pid)
        return pid

    def _notify(self) -> None:
        # listeners added during fan-out wait for the next create()
        snapshot = self.projects()
        for listener in list(self._listeners):
            listener(snapshot)

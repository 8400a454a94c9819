# src/projboard/ui/panels/project_input_panel.py
# Rev 0.1.0 — form: Title | Description | People, validated before it reaches the store

from __future__ import annotations
from typing import Callable, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QFormLayout, QVBoxLayout, QLineEdit, QPushButton, QMessageBox

from projboard.services.validation import ValidationRejected
from projboard.viewmodels.project_input_viewmodel import ProjectInputViewModel



class ProjectInputPanel(QWidget):
    projectAdded = Signal(str)  # project id

    def __init__(self, *, store, notify: Optional[Callable[[str], None]] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("user-input")
        self._vm = ProjectInputViewModel(store)
        self._notify = notify or self._warn

        self.title = QLineEdit(self);        self.title.setPlaceholderText("Title")
        self.description = QLineEdit(self);  self.description.setPlaceholderText("Description")
        self.people = QLineEdit(self);       self.people.setPlaceholderText("People (1-5)")
        self._btn_add = QPushButton("ADD PROJECT", self)

        form = QFormLayout()
        form.addRow("Title:", self.title)
        form.addRow("Description:", self.description)
        form.addRow("People:", self.people)

        lay = QVBoxLayout(self)
        lay.addLayout(form)
        lay.addWidget(self._btn_add)

        # bound method: self is captured no matter who emits
        self._btn_add.clicked.connect(self.submit)
        for edit in (self.title, self.description, self.people):
            edit.returnPressed.connect(self.submit)

    def submit(self) -> bool:
        try:
            project = self._vm.submit(self.title.text(), self.description.text(), self.people.text())
        except ValidationRejected as e:
            self._notify(str(e))
            return False
        self.clear_input()
        self.projectAdded.emit(project.id)
        return True

    def clear_input(self) -> None:
        self.title.clear()
        self.description.clear()
        self.people.clear()

    def _warn(self, message: str) -> None:
        QMessageBox.warning(self, "Invalid input", message)

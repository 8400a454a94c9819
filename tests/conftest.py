# Rev 0.1.0

"""Pytest fixtures for projboard (Rev 0.1.0)"""
from __future__ import annotations
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from projboard.store.project_store import ProjectStore


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def store() -> ProjectStore:
    return ProjectStore()

# Rev 0.1.0
"""Lightweight entities for projboard (in-memory only)"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class ProjectStatus(Enum):
    ACTIVE = "active"        # in progress
    FINISHED = "finished"    # completed

    @property
    def label(self) -> str:
        return f"{self.value.upper()} PROJECTS"


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    description: str
    headcount: Number   # int from the form; fractional text stays float
    status: ProjectStatus = ProjectStatus.ACTIVE

# Rev 0.1.0
# src/projboard/viewmodels/project_input_viewmodel.py
from __future__ import annotations

import logging
from typing import Tuple

from projboard.models.entities import Number, Project
from projboard.services.validation import (
    Validatable, ValidationRejected, coerce_number, validate,
)

log = logging.getLogger(__name__)

TITLE_MIN_LENGTH = 5
DESCRIPTION_MIN_LENGTH = 5
HEADCOUNT_MIN = 1
HEADCOUNT_MAX = 5


class ProjectInputViewModel:
    def __init__(self, store):
        """
        store must expose:
          create(title, description, headcount) -> Project
        """
        self._store = store

    def gather(self, title: str, description: str, people_text: str) -> Tuple[str, str, Number]:
        people = coerce_number(people_text)
        rules = (
            Validatable(title, required=True, min_length=TITLE_MIN_LENGTH),
            Validatable(description, required=True, min_length=DESCRIPTION_MIN_LENGTH),
            Validatable(people, required=True, min=HEADCOUNT_MIN, max=HEADCOUNT_MAX),
        )
        if not all(validate(r) for r in rules):
            log.warning("submission rejected title=%r people=%r", title, people_text)
            raise ValidationRejected("Invalid input, please try again!")
        return title, description, people

    def submit(self, title: str, description: str, people_text: str) -> Project:
        t, d, n = self.gather(title, description, people_text)
        return self._store.create(t, d, n)

from __future__ import annotations

import uuid


def new_uid(prefix: str) -> str:
    """
    Generate an opaque unique id string for in-memory records.
    """
    p = (prefix or "id").strip().lower()
    return f"{p}_{uuid.uuid4().hex}"

from __future__ import annotations

import uuid


def new_id() -> str:
    """Opaque unique identifier for a stored record."""
    return uuid.uuid4().hex

from __future__ import annotations

import secrets
import string
from uuid import uuid4

_KEY_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    return str(uuid4())


def generate_task_key(length: int = 9) -> str:
    """Short lowercase key for tasks typed in by hand (e.g. ``k3f9x0a2b``)."""
    return "".join(secrets.choice(_KEY_ALPHABET) for _ in range(length))


__all__ = ["generate_id", "generate_task_key"]

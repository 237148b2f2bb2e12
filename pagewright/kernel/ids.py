"""
Pagewright Kernel — Node Identity

Ids are minted from a per-process salt and a monotonically increasing
counter. No id is ever handed out twice within a process, and ids from two
processes differ by salt. No locking: itertools.count is advanced atomically
under the interpreter lock.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]

_SALT = uuid.uuid4().hex[:6]
_counter = itertools.count(1)


def new_id() -> str:
    """Mint a fresh node id, e.g. 'node-3f9a1c-42'."""
    return f"node-{_SALT}-{next(_counter)}"


def sequential_ids(prefix: str = "n") -> IdFactory:
    """
    Deterministic id factory for tests and reproducible fixtures.
    Each factory has its own counter.
    """
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"

"""
Identifier generation for catalog entities.

Anything that creates a Specification or SpecValue takes a ``new_id``
callable so tests can swap the random default for a predictable sequence.
"""

import uuid
from typing import Callable

IdGenerator = Callable[[], str]


def uuid_ids() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


class SequentialIds:
    """Deterministic generator producing ``<prefix>-1``, ``<prefix>-2``, ..."""

    def __init__(self, prefix: str = "id"):
        self.prefix = prefix
        self.count = 0

    def __call__(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"

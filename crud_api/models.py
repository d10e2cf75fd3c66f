"""In-memory data records.

Users are bare name strings and need no record type. Projects carry a
generated identifier which stays stable across updates.
"""

import uuid
from dataclasses import dataclass, asdict
from typing import Optional


def new_project_id() -> str:
    """Return a fresh random identifier for a project."""
    return str(uuid.uuid4())


def is_project_id(value: str) -> bool:
    """Return True if `value` is a canonical lowercase UUID4 string."""
    try:
        parsed = uuid.UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    return parsed.version == 4 and str(parsed) == value


@dataclass
class Project:
    id: str
    title: Optional[str] = None
    owner: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

"""Repository classes owning the in-memory collections.

Each repository is small and focused on a single resource (users,
projects). Nothing is persisted: a repository starts from its seed and
is discarded with the application instance that created it.

FastAPI runs sync handlers on a thread pool, so every operation holds
the repository lock for the duration of its read or mutation.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from . import models


class UserRepository:
    """Ordered list of user names addressed by position.

    Positions shift after a removal, so an index obtained before a
    delete may point at a different user afterwards. Projects use
    stable identifiers instead; users keep positional addressing for
    compatibility with existing clients.
    """

    def __init__(self, seed: Iterable[str] = ()):
        self._users: List[str] = list(seed)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list(self) -> List[str]:
        """Return a copy of all names in order."""
        with self._lock:
            return list(self._users)

    def get(self, index: int) -> Optional[str]:
        """Return the name at `index` or `None` if out of range."""
        with self._lock:
            if 0 <= index < len(self._users):
                return self._users[index]
            return None

    def insert(self, name: str) -> List[str]:
        """Append `name` and return the updated list."""
        with self._lock:
            self._users.append(name)
            return list(self._users)

    def update(self, index: int, name: str) -> Optional[List[str]]:
        """Overwrite the name at `index` and return the updated list.

        Returns `None` when `index` no longer addresses an element.
        """
        with self._lock:
            if not 0 <= index < len(self._users):
                return None
            self._users[index] = name
            return list(self._users)

    def remove(self, index: int) -> Optional[str]:
        """Remove and return the name at `index`; later names shift down.

        Returns `None` when `index` no longer addresses an element.
        """
        with self._lock:
            if not 0 <= index < len(self._users):
                return None
            return self._users.pop(index)


class ProjectRepository:
    """Projects keyed by a generated identifier, kept in creation order."""

    def __init__(self):
        self._projects: List[models.Project] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._projects)

    def list(self, title: Optional[str] = None) -> List[models.Project]:
        """Return all projects, or those whose title contains `title`.

        Matching is a case-sensitive substring test. An empty or missing
        filter returns every project.
        """
        with self._lock:
            if not title:
                return list(self._projects)
            return [p for p in self._projects if p.title is not None and title in p.title]

    def insert(self, title: Optional[str], owner: Optional[str]) -> models.Project:
        """Create a project with a fresh identifier and store it."""
        with self._lock:
            existing = {p.id for p in self._projects}
            project_id = models.new_project_id()
            while project_id in existing:
                project_id = models.new_project_id()
            project = models.Project(id=project_id, title=title, owner=owner)
            self._projects.append(project)
            return project

    def update(self, project_id: str, title: Optional[str], owner: Optional[str]) -> Optional[models.Project]:
        """Replace title/owner in place. Returns `None` if not found."""
        with self._lock:
            project = self._find(project_id)
            if project is None:
                return None
            project.title = title
            project.owner = owner
            return project

    def remove(self, project_id: str) -> bool:
        """Delete the project; return False if it was not stored."""
        with self._lock:
            project = self._find(project_id)
            if project is None:
                return False
            self._projects.remove(project)
            return True

    def _find(self, project_id: str) -> Optional[models.Project]:
        for project in self._projects:
            if project.id == project_id:
                return project
        return None

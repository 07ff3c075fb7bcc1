"""Persistence façade for projects over a KeyValueStore.

Key scheme (all values JSON):

    <prefix>current_project    current project name, absent when none is selected
    <prefix>projects           ordered list of registered project names
    <prefix>project_<name>     full project record
"""

import logging

from mapvc.core.errors import KeyValueStoreError, PersistenceFailure
from mapvc.core.kv_store.abc import JsonValue, KeyValueStore
from mapvc.core.models import Project

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX = "mapvc_"


class ProjectStore:
    """Reads and writes project records, the registry and the current pointer.

    Every KeyValueStoreError is re-raised as PersistenceFailure.
    """

    def __init__(self, kv_store: KeyValueStore, prefix: str = DEFAULT_KEY_PREFIX) -> None:
        self._kv = kv_store
        self._prefix = prefix

    @property
    def current_project_key(self) -> str:
        return f"{self._prefix}current_project"

    @property
    def projects_key(self) -> str:
        return f"{self._prefix}projects"

    def project_key(self, name: str) -> str:
        return f"{self._prefix}project_{name}"

    def list_projects(self) -> list[str]:
        names = self._get(self.projects_key)
        if names is None:
            return []
        if not isinstance(names, list):
            raise PersistenceFailure(f"Corrupt project registry under {self.projects_key}")
        return [str(name) for name in names]

    def save_project_list(self, names: list[str]) -> None:
        self._set(self.projects_key, list(names))

    def load_project(self, name: str) -> Project:
        """Load a project, or a fresh default one if nothing is stored.

        The default is not persisted; call save_project() to make it durable.
        """
        raw = self._get(self.project_key(name))
        if raw is None:
            logger.debug("No stored record for project %s, using fresh default", name)
            return Project.fresh(name)
        return Project.from_dict(raw)

    def save_project(self, project: Project) -> None:
        self._set(self.project_key(project.name), project.to_dict())

    def current_project_name(self) -> str | None:
        name = self._get(self.current_project_key)
        if name is None:
            return None
        return str(name)

    def set_current_project_name(self, name: str) -> None:
        self._set(self.current_project_key, name)

    def clear_current_project_name(self) -> None:
        self._remove(self.current_project_key)

    def delete_project(self, name: str) -> None:
        """Remove the project record, clear the pointer if current, then unregister it.

        The registry entry goes last, so a failed step leaves the project registered.
        """
        self._remove(self.project_key(name))
        if self.current_project_name() == name:
            self.clear_current_project_name()
        names = self.list_projects()
        if name in names:
            self.save_project_list([n for n in names if n != name])

    def _get(self, key: str) -> JsonValue | None:
        try:
            return self._kv.get(key)
        except KeyValueStoreError as e:
            raise PersistenceFailure(str(e)) from e

    def _set(self, key: str, value: JsonValue) -> None:
        logger.debug("Persisting %s", key)
        try:
            self._kv.set(key, value)
        except KeyValueStoreError as e:
            raise PersistenceFailure(str(e)) from e

    def _remove(self, key: str) -> None:
        try:
            self._kv.remove(key)
        except KeyValueStoreError as e:
            raise PersistenceFailure(str(e)) from e

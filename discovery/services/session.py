"""
Session Module

Namespaced session storage. During a request the Flask session is used;
outside a request (CLI, tests) a process-local dictionary stands in.
"""

import uuid
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional

from flask import has_request_context, session


class SessionManager:
    """Gives access to the current session storage and session id."""

    def __init__(self, storage_factory: Optional[Callable[[], MutableMapping]] = None) -> None:
        self._storage_factory = storage_factory
        self._local_storage: Dict[str, Any] = {}

    def get_storage(self) -> MutableMapping:
        if self._storage_factory is not None:
            return self._storage_factory()
        if has_request_context():
            return session
        return self._local_storage

    def get_id(self) -> str:
        """Return the session id, creating one on first use."""
        storage = self.get_storage()
        if "session_id" not in storage:
            storage["session_id"] = str(uuid.uuid4())
        return storage["session_id"]

    def destroy(self) -> None:
        self.get_storage().clear()


class SessionContainer(MutableMapping):
    """
    Key-value view over one namespace of the session.

    Writes replace the namespace dictionary so the Flask session notices the
    change and persists it.
    """

    def __init__(self, namespace: str, manager: SessionManager) -> None:
        self.namespace = namespace
        self.manager = manager

    def _data(self) -> Dict[str, Any]:
        return self.manager.get_storage().get(self.namespace) or {}

    def _save(self, data: Dict[str, Any]) -> None:
        self.manager.get_storage()[self.namespace] = data

    def __getitem__(self, key: str) -> Any:
        return self._data()[key]

    def __setitem__(self, key: str, value: Any) -> None:
        data = dict(self._data())
        data[key] = value
        self._save(data)

    def __delitem__(self, key: str) -> None:
        data = dict(self._data())
        del data[key]
        self._save(data)

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self._data()))

    def __len__(self) -> int:
        return len(self._data())

    def clear(self) -> None:
        self._save({})
